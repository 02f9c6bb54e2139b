"""Tests for configuration loading."""

from __future__ import annotations

from pathlib import Path

import pytest

from tiny_ioc.core.config import load_app_settings
from tiny_ioc.core.models import Lifetime


@pytest.fixture(autouse=True)
def clear_settings_cache() -> None:
    """Ensure each test sees a fresh settings instance."""

    load_app_settings.cache_clear()


def test_defaults_loaded_without_env_file() -> None:
    """Default values should be returned when no overrides are present."""

    settings = load_app_settings(include_environment=False)
    assert settings.container.detect_cycles is True
    assert settings.container.type_keys == "name"
    assert settings.container.default_lifetime is Lifetime.SINGLETON
    assert settings.logging.level == "INFO"
    assert settings.todo.id_prefix == ""


def test_env_file_overrides(tmp_path: Path) -> None:
    """Values defined in an env file should override defaults."""

    env_file = tmp_path / "test.env"
    env_file.write_text(
        "TIOC_CONTAINER__DETECT_CYCLES=false\n"
        "TIOC_CONTAINER__TYPE_KEYS=identity\n"
        "TIOC_TODO__ID_PREFIX=todo-\n"
        "OTHER_SETTING=ignored\n",
        encoding="utf-8",
    )

    settings = load_app_settings(env_file=env_file, include_environment=False)
    assert settings.container.detect_cycles is False
    assert settings.container.type_keys == "identity"
    assert settings.todo.id_prefix == "todo-"


def test_environment_overrides_env_file(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    """Process environment values should win over the env file."""

    env_file = tmp_path / "test.env"
    env_file.write_text("TIOC_LOGGING__LEVEL=WARNING\n", encoding="utf-8")
    monkeypatch.setenv("TIOC_LOGGING__LEVEL", "DEBUG")
    monkeypatch.setenv("TIOC_CONTAINER__DEFAULT_LIFETIME", "transient")

    settings = load_app_settings(env_file=env_file)
    assert settings.logging.level == "DEBUG"
    assert settings.container.default_lifetime is Lifetime.TRANSIENT


def test_missing_env_file_is_ignored(tmp_path: Path) -> None:
    settings = load_app_settings(
        env_file=tmp_path / "absent.env", include_environment=False
    )
    assert settings.container.detect_cycles is True
