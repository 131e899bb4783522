"""Tests for environment-driven settings."""

from pathlib import Path

import pytest
from pydantic import ValidationError as PydanticValidationError

from tagseed_config import Settings, clear_settings_cache, get_config_dir, get_settings


def test_defaults():
    settings = Settings()

    assert settings.working_dir is None
    assert settings.desired_user_entries == 100000
    assert settings.desired_min_tag_assocs == 0
    assert settings.desired_max_tag_assocs == 1
    assert settings.names_file is None
    assert settings.labels_file is None
    assert settings.random_seed is None
    assert settings.log_level == "INFO"


def test_reads_environment(monkeypatch, tmp_path):
    monkeypatch.setenv("DESIRED_USER_ENTRIES", "10")
    monkeypatch.setenv("DESIRED_MIN_TAG_ASSOCS", "2")
    monkeypatch.setenv("DESIRED_MAX_TAG_ASSOCS", "5")
    monkeypatch.setenv("WORKING_DIR", str(tmp_path))
    monkeypatch.setenv("RANDOM_SEED", "42")

    settings = Settings()

    assert settings.desired_user_entries == 10
    assert settings.desired_min_tag_assocs == 2
    assert settings.desired_max_tag_assocs == 5
    assert settings.working_dir == tmp_path
    assert settings.random_seed == 42


def test_min_above_max_rejected(monkeypatch):
    monkeypatch.setenv("DESIRED_MIN_TAG_ASSOCS", "3")
    monkeypatch.setenv("DESIRED_MAX_TAG_ASSOCS", "1")

    with pytest.raises(PydanticValidationError):
        Settings()


def test_negative_user_entries_rejected(monkeypatch):
    monkeypatch.setenv("DESIRED_USER_ENTRIES", "-1")

    with pytest.raises(PydanticValidationError):
        Settings()


def test_resolved_working_dir_defaults_to_cwd(monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)

    assert Settings().resolved_working_dir == Path.cwd()
    assert Settings(working_dir=tmp_path / "x").resolved_working_dir == tmp_path / "x"


def test_relative_list_files_resolve_against_project_root(monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("NAMES_FILE", "config/names.txt")

    settings = Settings(labels_file=Path("config/labels.txt"))

    root = get_config_dir().parent
    assert settings.names_file == root / "config" / "names.txt"
    assert settings.labels_file == root / "config" / "labels.txt"


def test_absolute_list_file_is_kept(tmp_path):
    settings = Settings(names_file=tmp_path / "names.txt")

    assert settings.names_file == tmp_path / "names.txt"


def test_get_settings_is_cached_until_cleared(monkeypatch):
    first = get_settings()
    assert get_settings() is first

    monkeypatch.setenv("DESIRED_USER_ENTRIES", "7")
    clear_settings_cache()

    assert get_settings().desired_user_entries == 7
