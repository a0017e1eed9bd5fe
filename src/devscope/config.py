"""Configuration models for devscope."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from devscope.exceptions import ConfigError


class AuthenticityConfig(BaseModel):
    """Tuning parameters for the authenticity sub-scores."""
    model_config = ConfigDict(frozen=True)

    recent_activity_days: int = Field(default=90, gt=0)
    commit_target: float = Field(default=50.0, gt=0)
    log_factor: float = Field(default=2.78, gt=0)
    star_cap: float = 8.33
    fork_cap: float = 8.33
    watcher_cap: float = 8.34
    ownership_points: float = 10.0
    language_points: float = 7.5
    language_target: int = Field(default=5, gt=0)
    code_size_points: float = 7.5
    code_size_target: int = Field(default=500_000, gt=0)


class FlagThresholds(BaseModel):
    """Trigger levels for authenticity warning flags."""
    model_config = ConfigDict(frozen=True)

    low_originality_ratio: float = 0.3
    low_activity_floor: int = 5
    stale_ratio: float = 0.2
    low_commit_average: float = 5.0
    low_engagement_floor: int = 3
    no_stars_min_repos: int = 5
    min_languages: int = 2
    archived_ratio: float = 0.5
    many_repos: int = 20


class DevscopeConfig(BaseModel):
    """Top-level configuration composing all sub-configs."""
    model_config = ConfigDict(frozen=True)

    authenticity: AuthenticityConfig = Field(default_factory=AuthenticityConfig)
    flags: FlagThresholds = Field(default_factory=FlagThresholds)


def _read_yaml(path: Path) -> dict[str, Any]:
    try:
        with open(path) as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Could not parse {path}: {exc}") from exc
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError(f"{path} must contain a mapping at the top level")
    return data


def load_config(path: str | Path | None = None) -> DevscopeConfig:
    """Load configuration from YAML file, environment variables, and defaults.

    Priority (highest to lowest):
    1. Environment variables (DEVSCOPE_*)
    2. YAML config file
    3. Defaults
    """
    config_data: dict[str, Any] = {}

    if path is not None:
        config_path = Path(path)
        if config_path.is_file():
            config_data = _read_yaml(config_path)
    else:
        for default_path in [".devscope.yml", ".devscope.yaml"]:
            p = Path(default_path)
            if p.is_file():
                config_data = _read_yaml(p)
                break

    env_mapping = {
        "DEVSCOPE_RECENT_ACTIVITY_DAYS": ("authenticity", "recent_activity_days", int),
        "DEVSCOPE_COMMIT_TARGET": ("authenticity", "commit_target", float),
        "DEVSCOPE_LANGUAGE_TARGET": ("authenticity", "language_target", int),
        "DEVSCOPE_CODE_SIZE_TARGET": ("authenticity", "code_size_target", int),
        "DEVSCOPE_MANY_REPOS": ("flags", "many_repos", int),
        "DEVSCOPE_LOW_ACTIVITY_FLOOR": ("flags", "low_activity_floor", int),
    }

    for env_var, (section, key, type_fn) in env_mapping.items():
        value = os.environ.get(env_var)
        if value is not None:
            try:
                converted = type_fn(value)
            except ValueError as exc:
                raise ConfigError(f"{env_var} must be a number, got {value!r}") from exc
            section_data = config_data.setdefault(section, {})
            if not isinstance(section_data, dict):
                raise ConfigError(f"{section} must be a mapping")
            section_data[key] = converted

    try:
        return DevscopeConfig(**config_data)
    except ValidationError as exc:
        raise ConfigError(str(exc)) from exc
