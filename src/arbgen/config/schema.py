"""Typed configuration schema and loader for sampling runs."""

from __future__ import annotations

import os
from collections.abc import Mapping
from importlib import resources as importlib_resources
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, ConfigDict, conint

from ..utils.errors import ConfigurationError

# ---------------------------------------------------------------------------
# Pydantic models
# ---------------------------------------------------------------------------


class SeedSettings(BaseModel):
    """Seed used to build the generator state.

    ``value`` of ``None`` means a fresh seed is drawn from entropy for every
    run; such runs are reproducible only through the logged seed.
    """

    seed_env: str
    value: conint(ge=0, lt=2**32) | None = None

    model_config = ConfigDict(extra="forbid")


class SamplingSettings(BaseModel):
    """Size and number of values drawn per sampling run."""

    size: conint(ge=0)
    count: conint(ge=1)

    model_config = ConfigDict(extra="forbid")


class ConfigModel(BaseModel):
    """Top-level configuration model."""

    schema_version: conint(ge=1)
    seed: SeedSettings
    sampling: SamplingSettings

    model_config = ConfigDict(extra="forbid")


# ---------------------------------------------------------------------------
# Loader utilities
# ---------------------------------------------------------------------------


def merge_settings(lower: dict[str, Any], upper: dict[str, Any]) -> dict[str, Any]:
    """Overlay the settings layer ``upper`` on ``lower`` without mutating either.

    Sections present in both layers are merged key by key; any other value in
    ``upper`` (scalars, lists, ``None``) replaces the one below it.
    """

    merged: dict[str, Any] = dict(lower)
    for key, value in upper.items():
        below = merged.get(key)
        if isinstance(below, dict) and isinstance(value, dict):
            value = merge_settings(below, value)
        merged[key] = value
    return merged


def load_config(
    path: str | os.PathLike[str] | None = None,
    *,
    env: Mapping[str, str] | None = None,
) -> ConfigModel:
    """Load configuration from defaults and optional user overrides.

    Precedence of sources: package ``defaults.yml`` < user-provided YAML <
    environment variable for the seed.  An environment value that is not a
    valid seed raises :class:`pydantic.ValidationError` like any other bad
    setting; a file whose top level is not a mapping raises
    :class:`~arbgen.utils.errors.ConfigurationError` and malformed YAML
    raises :class:`yaml.YAMLError`.
    """

    with (
        importlib_resources.files("arbgen.config")
        .joinpath("defaults.yml")
        .open("r", encoding="utf-8") as f
    ):
        defaults = yaml.safe_load(f) or {}

    if path is not None:
        with Path(path).open("r", encoding="utf-8") as f:
            overrides = yaml.safe_load(f) or {}
        if not isinstance(overrides, dict):
            msg = f"{path}: top level must be a mapping, got {type(overrides).__name__}"
            raise ConfigurationError(msg)
        merged = merge_settings(defaults, overrides)
    else:
        merged = defaults

    cfg = ConfigModel.model_validate(merged)

    environ = env if env is not None else os.environ
    seed_env = cfg.seed.seed_env
    if environ.get(seed_env, "").strip():
        merged = merge_settings(merged, {"seed": {"value": environ[seed_env].strip()}})
        cfg = ConfigModel.model_validate(merged)

    return cfg


__all__ = [
    "ConfigModel",
    "SeedSettings",
    "SamplingSettings",
    "merge_settings",
    "load_config",
]
