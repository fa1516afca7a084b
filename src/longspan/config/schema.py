"""Typed configuration schema and loader for the longspan package."""

from __future__ import annotations

import os
from collections.abc import Mapping
from importlib import resources as importlib_resources
from pathlib import Path
from typing import Any, Literal

import yaml
from pydantic import BaseModel, ConfigDict, ValidationError, conint, constr

from longspan.utils.errors import ConfigError

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]

# ---------------------------------------------------------------------------
# Pydantic models
# ---------------------------------------------------------------------------


class DisplaySettings(BaseModel):
    """Options for rendering span debug strings."""

    empty_marker: constr(min_length=1)
    qualified_names: bool

    model_config = ConfigDict(extra="forbid")


class LoggingSettings(BaseModel):
    """Log level and the environment variable that may override it."""

    level: LogLevel
    level_env: str

    model_config = ConfigDict(extra="forbid")


class ConfigModel(BaseModel):
    """Top-level configuration model."""

    schema_version: conint(ge=1)
    display: DisplaySettings
    logging: LoggingSettings

    model_config = ConfigDict(extra="forbid")


# ---------------------------------------------------------------------------
# Loader utilities
# ---------------------------------------------------------------------------


def deep_merge_dicts(a: dict[str, Any], b: dict[str, Any]) -> dict[str, Any]:
    """Recursively merge mapping ``b`` onto ``a`` returning a new dict."""

    result: dict[str, Any] = dict(a)
    for key, b_val in b.items():
        if key in result and isinstance(result[key], dict) and isinstance(b_val, dict):
            result[key] = deep_merge_dicts(result[key], b_val)
        else:
            result[key] = b_val
    return result


def load_config(
    path: str | os.PathLike[str] | None = None,
    *,
    env: Mapping[str, str] | None = None,
) -> ConfigModel:
    """Load configuration from defaults and optional user overrides.

    Precedence of sources: package ``defaults.yml`` < user-provided YAML <
    environment variable named by ``logging.level_env``.  Any failure is
    reported as :class:`ConfigError`.
    """

    with (
        importlib_resources.files("longspan.config")
        .joinpath("defaults.yml")
        .open("r", encoding="utf-8") as f
    ):
        defaults = yaml.safe_load(f) or {}

    if path is not None:
        try:
            with Path(path).open("r", encoding="utf-8") as f:
                overrides = yaml.safe_load(f) or {}
        except (OSError, yaml.YAMLError) as exc:
            raise ConfigError(f"cannot read config {path}: {exc}") from exc
        if not isinstance(overrides, dict):
            raise ConfigError(f"config {path} must contain a mapping")
        merged = deep_merge_dicts(defaults, overrides)
    else:
        merged = defaults

    environ = env if env is not None else os.environ
    section = merged.get("logging")
    level_env = section.get("level_env") if isinstance(section, dict) else None
    if isinstance(level_env, str) and level_env in environ:
        merged = deep_merge_dicts(merged, {"logging": {"level": environ[level_env].upper()}})

    try:
        return ConfigModel.model_validate(merged)
    except ValidationError as exc:
        raise ConfigError(str(exc)) from exc


__all__ = [
    "ConfigModel",
    "DisplaySettings",
    "LoggingSettings",
    "ConfigError",
    "deep_merge_dicts",
    "load_config",
]
