"""Typed configuration schema and loader for the command line interface."""

from __future__ import annotations

import os
from collections.abc import Mapping
from importlib import resources as importlib_resources
from pathlib import Path
from typing import Any, Literal

import yaml
from pydantic import BaseModel, ConfigDict, conint

SHAPE_ENV = "WHOLEFILE_SHAPE"
LOG_LEVEL_ENV = "WHOLEFILE_LOG_LEVEL"

# ---------------------------------------------------------------------------
# Pydantic models
# ---------------------------------------------------------------------------


class OutputSettings(BaseModel):
    """How the CLI renders a file."""

    shape: Literal["bytes", "text", "lines"]
    line_numbers: bool

    model_config = ConfigDict(extra="forbid")


class LoggingSettings(BaseModel):
    """Log level for the package logger."""

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]

    model_config = ConfigDict(extra="forbid")


class ConfigModel(BaseModel):
    """Top-level configuration model."""

    schema_version: conint(ge=1)
    output: OutputSettings
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


def _env_overrides(environ: Mapping[str, str]) -> dict[str, Any]:
    overrides: dict[str, Any] = {}
    if environ.get(SHAPE_ENV):
        overrides["output"] = {"shape": environ[SHAPE_ENV].strip().lower()}
    if environ.get(LOG_LEVEL_ENV):
        overrides["logging"] = {"level": environ[LOG_LEVEL_ENV].strip().upper()}
    return overrides


def load_config(
    path: str | os.PathLike[str] | None = None,
    *,
    env: Mapping[str, str] | None = None,
) -> ConfigModel:
    """Load configuration from defaults and optional user overrides.

    Precedence of sources: package ``defaults.yml`` < user-provided YAML <
    environment variables.
    """

    with (
        importlib_resources.files("wholefile.config")
        .joinpath("defaults.yml")
        .open("r", encoding="utf-8") as f
    ):
        defaults = yaml.safe_load(f) or {}

    if path is not None:
        with Path(path).open("r", encoding="utf-8") as f:
            overrides = yaml.safe_load(f) or {}
        if not isinstance(overrides, dict):
            raise ValueError(f"{path}: top-level YAML value must be a mapping")
        merged = deep_merge_dicts(defaults, overrides)
    else:
        merged = defaults

    environ = env if env is not None else os.environ
    merged = deep_merge_dicts(merged, _env_overrides(environ))

    return ConfigModel.model_validate(merged)


__all__ = [
    "ConfigModel",
    "OutputSettings",
    "LoggingSettings",
    "SHAPE_ENV",
    "LOG_LEVEL_ENV",
    "deep_merge_dicts",
    "load_config",
]
