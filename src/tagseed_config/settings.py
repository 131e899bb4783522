"""Generator settings loaded from environment variables.

Configuration file discovery (in priority order):
1. OS environment variables (always highest priority)
2. TAGSEED_ENV_FILE environment variable (path to .env file)
3. config/.env.dev - local development
4. config/.env - shared defaults

Uses pydantic-settings for automatic type coercion and validation.
"""

from __future__ import annotations

import os
from functools import lru_cache
from pathlib import Path
from typing import Optional

from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


def _find_project_root() -> Path:
    """Find the project root directory."""
    current = Path(__file__).resolve().parent

    for parent in [current, *current.parents]:
        if (parent / "config").is_dir():
            return parent
        if (parent / "pyproject.toml").is_file():
            return parent
        if (parent / ".git").is_dir():
            return parent

    return Path.cwd()


def get_config_dir() -> Path:
    """Get the config directory path (env files, name/label lists)."""
    return _find_project_root() / "config"


def _resolve_env_file_path() -> Path | None:
    """Resolve the .env file path.

    Priority:
    1. TAGSEED_ENV_FILE env var (absolute, or relative to the project root)
    2. config/.env.dev (local development)
    3. config/.env
    """
    env_file_path = os.environ.get("TAGSEED_ENV_FILE")
    if env_file_path:
        path = Path(env_file_path)
        if not path.is_absolute():
            path = _find_project_root() / path
        if path.exists():
            return path

    config_dir = get_config_dir()

    dev_env = config_dir / ".env.dev"
    if dev_env.exists():
        return dev_env

    shared_env = config_dir / ".env"
    if shared_env.exists():
        return shared_env

    return None


class Settings(BaseSettings):
    """Generator configuration loaded from environment variables.

    Values are loaded from:
    1. OS environment variables (highest priority)
    2. .env file (config/.env.dev or config/.env)
    3. Default values
    """

    model_config = SettingsConfigDict(
        env_file=_resolve_env_file_path(),
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Output location; tmp/ and build/ live underneath it
    working_dir: Optional[Path] = None

    # Generation volume
    desired_user_entries: int = Field(default=100000, ge=0)
    desired_min_tag_assocs: int = Field(default=0, ge=0)
    desired_max_tag_assocs: int = Field(default=1, ge=0)

    # Name and label lists (one entry per line); unset = built-in lists.
    # Relative paths are taken from the project root.
    names_file: Optional[Path] = None
    labels_file: Optional[Path] = None

    # Unset = non-deterministic output
    random_seed: Optional[int] = None

    database_echo: bool = False

    # Logging (LOG_ prefix)
    log_level: str = "INFO"

    @field_validator("names_file", "labels_file", mode="after")
    @classmethod
    def _resolve_list_file(cls, v: Optional[Path]) -> Optional[Path]:
        """Resolve relative list paths against the project root, like TAGSEED_ENV_FILE."""
        if v is None or v.is_absolute():
            return v
        return _find_project_root() / v

    @model_validator(mode="after")
    def _validate_tag_assoc_range(self) -> "Settings":
        if self.desired_min_tag_assocs > self.desired_max_tag_assocs:
            msg = (
                "DESIRED_MIN_TAG_ASSOCS must not exceed DESIRED_MAX_TAG_ASSOCS "
                f"({self.desired_min_tag_assocs} > {self.desired_max_tag_assocs})"
            )
            raise ValueError(msg)
        return self

    @property
    def resolved_working_dir(self) -> Path:
        """Working directory, defaulting to the current directory."""
        return self.working_dir if self.working_dir is not None else Path.cwd()


@lru_cache()
def get_settings() -> Settings:
    """Return cached generator settings."""
    return Settings()


def clear_settings_cache() -> None:
    """Clear the settings cache (useful for tests)."""
    get_settings.cache_clear()
