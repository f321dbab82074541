"""Typed configuration schema and loader for the multitok package."""

from __future__ import annotations

import os
from collections.abc import Mapping
from importlib import resources as importlib_resources
from pathlib import Path
from typing import Any, Literal

import yaml
from pydantic import BaseModel, ConfigDict, Field, conint, field_validator

# ---------------------------------------------------------------------------
# Pydantic models
# ---------------------------------------------------------------------------

RuleName = Literal["hard_break", "prefix", "acronym", "initial"]
EngineName = Literal["rule", "statistical"]
LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class SegmenterSettings(BaseModel):
    """Rule-based segmenter settings."""

    precedence: list[RuleName]
    uppercase_initials: bool | None = None

    model_config = ConfigDict(extra="forbid")

    @field_validator("precedence")
    @classmethod
    def _unique(cls, value: list[str]) -> list[str]:
        if len(set(value)) != len(value):
            raise ValueError("segmenter rules must not repeat")
        return value


class TokenizerSettings(BaseModel):
    """Rule-based tokenizer settings."""

    protect_urls: bool
    protect_numbers: bool
    split_hyphens: bool | None = None

    model_config = ConfigDict(extra="forbid")


class StatisticalSettings(BaseModel):
    """spaCy model names per language for the statistical engine."""

    models: dict[str, str]

    model_config = ConfigDict(extra="forbid")


class LoggingSettings(BaseModel):
    """Log level and the environment variable that may override it."""

    level: LogLevel
    level_env: str

    model_config = ConfigDict(extra="forbid")


class EnvSettings(BaseModel):
    """Names of environment variables overriding top-level choices."""

    language: str
    engine: str

    model_config = ConfigDict(extra="forbid")


class ConfigModel(BaseModel):
    """Top-level configuration model."""

    schema_version: conint(ge=1)  # type: ignore[valid-type]
    language: str = Field(min_length=2)
    engine: EngineName
    paragraph_delimiter: str = Field(min_length=1)
    segmenter: SegmenterSettings
    tokenizer: TokenizerSettings
    statistical: StatisticalSettings
    logging: LoggingSettings
    env: EnvSettings

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
    environment variables for language, engine and log level.  Environment
    values are validated like any other source.
    """

    with (
        importlib_resources.files("multitok.config")
        .joinpath("defaults.yml")
        .open("r", encoding="utf-8") as f
    ):
        defaults = yaml.safe_load(f) or {}

    if path is not None:
        with Path(path).open("r", encoding="utf-8") as f:
            overrides = yaml.safe_load(f) or {}
        merged = deep_merge_dicts(defaults, overrides)
    else:
        merged = defaults

    cfg = ConfigModel.model_validate(merged)

    environ = env if env is not None else os.environ
    updates: dict[str, Any] = {}
    if cfg.env.language in environ:
        updates["language"] = environ[cfg.env.language]
    if cfg.env.engine in environ:
        updates["engine"] = environ[cfg.env.engine]
    if cfg.logging.level_env in environ:
        updates["logging"] = {"level": environ[cfg.logging.level_env].upper()}
    if updates:
        cfg = ConfigModel.model_validate(deep_merge_dicts(cfg.model_dump(), updates))

    return cfg


__all__ = [
    "ConfigModel",
    "SegmenterSettings",
    "TokenizerSettings",
    "StatisticalSettings",
    "LoggingSettings",
    "EnvSettings",
    "deep_merge_dicts",
    "load_config",
]
