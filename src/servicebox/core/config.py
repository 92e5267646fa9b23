"""Container configuration models and loader utilities."""

from __future__ import annotations

import os
from functools import lru_cache
from pathlib import Path
from typing import Any, cast

from dotenv import dotenv_values
from pydantic import BaseModel, Field


class LoggingSettings(BaseModel):
    """Logging preferences."""

    enabled: bool = Field(
        default=False, description="Let containers configure the servicebox logger"
    )
    level: str = Field(default="WARNING", description="servicebox logger level")
    structured: bool = Field(
        default=False, description="Toggle brace-style structured logging"
    )
    propagate: bool = Field(
        default=True, description="Forward servicebox records to parent loggers"
    )


class ContainerSettings(BaseModel):
    """Behavioural switches for a service container."""

    allow_import_paths: bool = Field(
        default=True,
        description="Resolve unregistered class strings as import paths",
    )
    thread_safe: bool = Field(
        default=True, description="Serialise service lookups behind a lock"
    )
    logging: LoggingSettings = Field(default_factory=LoggingSettings)


ENV_PREFIX = "SERVICEBOX_"


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
    """Coerce env strings: empty to ``None``, true/false to booleans."""
    if not isinstance(value, str):
        return value
    if value == "":
        return None
    lowered = value.lower()
    if lowered == "true":
        return True
    if lowered == "false":
        return False
    return value


def _collect_env_values(
    env_file: Path | str | None, include_environment: bool
) -> dict[str, Any]:
    """Load configuration values from environment variables and optional file."""
    collected: dict[str, Any] = {}

    file_values = {}
    if env_file:
        env_path = Path(env_file)
        if env_path.is_file():
            file_values = {
                key: value
                for key, value in dotenv_values(env_path).items()
                if key and key.startswith(ENV_PREFIX)
            }

    env_values = {}
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
def load_container_settings(
    env_file: Path | str | None = None,
    include_environment: bool = True,
    **overrides: Any,
) -> ContainerSettings:
    """Load container settings, applying env files and overrides."""
    collected = _collect_env_values(env_file, include_environment)
    if overrides:
        collected.update(overrides)
    return ContainerSettings.model_validate(collected)


__all__ = [
    "ContainerSettings",
    "LoggingSettings",
    "load_container_settings",
]
