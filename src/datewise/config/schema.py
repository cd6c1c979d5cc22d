"""Typed configuration schema and loader for the datewise package."""

from __future__ import annotations

import os
from collections.abc import Mapping
from importlib import resources as importlib_resources
from pathlib import Path
from typing import Any, Literal

import yaml
from pydantic import BaseModel, ConfigDict, conint, field_validator

# ---------------------------------------------------------------------------
# Pydantic models
# ---------------------------------------------------------------------------

Separator = Literal["-", ".", "/", ",", ", ", " "]


class ParsingSettings(BaseModel):
    """Options controlling the separator trials of the parser."""

    separators: list[Separator]

    model_config = ConfigDict(extra="forbid")

    @field_validator("separators")
    @classmethod
    def _unique_non_empty(cls, value: list[str]) -> list[str]:
        if not value:
            raise ValueError("at least one separator is required")
        if len(set(value)) != len(value):
            raise ValueError("separators must not repeat")
        return value


class OutputSettings(BaseModel):
    """How the CLI prints results."""

    format: Literal["text", "json"]

    model_config = ConfigDict(extra="forbid")


class LoggingSettings(BaseModel):
    """Log level and the environment variable that may override it."""

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"]
    level_env: str

    model_config = ConfigDict(extra="forbid")


class ConfigModel(BaseModel):
    """Top-level configuration model."""

    schema_version: conint(ge=1)  # type: ignore[valid-type]
    locale: str
    parsing: ParsingSettings
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


def load_config(
    path: str | os.PathLike[str] | None = None,
    *,
    env: Mapping[str, str] | None = None,
) -> ConfigModel:
    """Load configuration from defaults and optional user overrides.

    Precedence of sources: package ``defaults.yml`` < user-provided YAML <
    environment variable named by ``logging.level_env``.
    """

    with (
        importlib_resources.files("datewise.config")
        .joinpath("defaults.yml")
        .open("r", encoding="utf-8") as f
    ):
        defaults = yaml.safe_load(f) or {}

    if path is not None:
        with Path(path).open("r", encoding="utf-8") as f:
            overrides = yaml.safe_load(f) or {}
        if not isinstance(overrides, dict):
            raise ValueError(f"Config file {path} must contain a mapping at the top level")
        merged = deep_merge_dicts(defaults, overrides)
    else:
        merged = defaults

    cfg = ConfigModel.model_validate(merged)

    environ = env if env is not None else os.environ
    level_env = cfg.logging.level_env
    if environ.get(level_env):
        merged = deep_merge_dicts(merged, {"logging": {"level": environ[level_env].strip().upper()}})
        cfg = ConfigModel.model_validate(merged)

    return cfg


__all__ = [
    "ConfigModel",
    "ParsingSettings",
    "OutputSettings",
    "LoggingSettings",
    "deep_merge_dicts",
    "load_config",
]
