"""Application configuration models and loader utilities."""

from __future__ import annotations

import os
from functools import lru_cache
from pathlib import Path
from typing import Any, Literal, cast

from dotenv import dotenv_values
from pydantic import BaseModel, Field

from .models import Lifetime


class ContainerSettings(BaseModel):
    """Settings controlling how the container keys and builds providers."""

    detect_cycles: bool = Field(
        default=True,
        description="Fail with CyclicDependencyError instead of recursing forever",
    )
    type_keys: Literal["identity", "name"] = Field(
        default="name",
        description="Key class tokens by their __name__ or by the class object",
    )
    default_lifetime: Lifetime = Field(
        default=Lifetime.SINGLETON,
        description="Lifetime used when a registration does not specify one",
    )


class LoggingSettings(BaseModel):
    """Logging preferences."""

    level: str = Field(default="INFO", description="Root logging level")
    structured: bool = Field(
        default=False, description="Toggle JSON structured logging"
    )


class TodoSettings(BaseModel):
    """Settings for the example todo application."""

    id_prefix: str = Field(default="", description="Prefix for generated todo ids")


class AppSettings(BaseModel):
    """Aggregated application configuration."""

    container: ContainerSettings = Field(default_factory=ContainerSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)
    todo: TodoSettings = Field(default_factory=TodoSettings)


ENV_PREFIX = "TIOC_"


def _normalize_key(raw_key: str) -> list[str]:
    """Convert an environment variable key into a nested attribute path."""
    trimmed = raw_key.removeprefix(ENV_PREFIX)
    return [segment.lower() for segment in trimmed.split("__") if segment]


def _merge_into_tree(tree: dict[str, Any], path: list[str], value: Any) -> None:
    """Assign a value to a nested dictionary given a path."""
    cursor = tree
    for segment in path[:-1]:
        next_node = cursor.setdefault(segment, {})
        cursor = cast(dict[str, Any], next_node)
    cursor[path[-1]] = value


def _normalize_value(value: Any) -> Any:
    if not isinstance(value, str):
        return value
    if value == "":
        return None
    lowercase_value = value.lower()
    if lowercase_value == "true":
        return True
    if lowercase_value == "false":
        return False
    return value


def _collect_env_values(
    env_file: Path | str | None, include_environment: bool
) -> dict[str, Any]:
    """Load configuration values from environment variables and optional file."""
    collected: dict[str, Any] = {}

    file_values: dict[str, Any] = {}
    if env_file:
        env_path = Path(env_file)
        if env_path.is_file():
            file_values = {
                key: value
                for key, value in dotenv_values(env_path).items()
                if key and key.startswith(ENV_PREFIX)
            }

    env_values: dict[str, Any] = {}
    if include_environment:
        env_values = {
            key: value
            for key, value in os.environ.items()
            if key.startswith(ENV_PREFIX)
        }

    combined: dict[str, Any] = {**file_values, **env_values}

    for key, value in combined.items():
        path = _normalize_key(key)
        if not path:
            continue
        _merge_into_tree(collected, path, _normalize_value(value))

    return collected


@lru_cache(maxsize=1)
def load_app_settings(
    env_file: Path | str | None = None,
    include_environment: bool = True,
    **overrides: Any,
) -> AppSettings:
    """Load application settings, applying env files and overrides."""
    collected = _collect_env_values(env_file, include_environment)
    if overrides:
        collected.update(overrides)
    return AppSettings.model_validate(collected)


__all__ = [
    "AppSettings",
    "ContainerSettings",
    "LoggingSettings",
    "TodoSettings",
    "load_app_settings",
]
