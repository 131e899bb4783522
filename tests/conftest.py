"""Root pytest configuration.

Test Structure:
    tests/
    ├── unit/              # Fast, isolated tests (one SQLite file per test)
    │   ├── application/
    │   ├── config/
    │   ├── domain/
    │   ├── infrastructure/
    │   └── presentation/
    ├── integration/       # Full generation runs against tmp_path
    └── shared/            # Shared fixtures and helpers
"""

import logging
from datetime import datetime

import pytest

from tagseed_config import clear_settings_cache

# Settings fields that must not leak from the developer's shell into tests
SETTINGS_ENV_VARS = (
    "WORKING_DIR",
    "DESIRED_USER_ENTRIES",
    "DESIRED_MIN_TAG_ASSOCS",
    "DESIRED_MAX_TAG_ASSOCS",
    "NAMES_FILE",
    "LABELS_FILE",
    "RANDOM_SEED",
    "DATABASE_ECHO",
    "LOG_LEVEL",
)

FIXED_NOW = datetime(2024, 5, 2, 9, 30, 0)


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch):
    """Clear env overrides and the settings cache around every test."""
    for name in SETTINGS_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    clear_settings_cache()
    yield
    clear_settings_cache()


@pytest.fixture(autouse=True)
def restore_logging():
    """Undo logging.basicConfig(force=True) calls made by the CLI."""
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


@pytest.fixture
def fixed_clock():
    return lambda: FIXED_NOW
