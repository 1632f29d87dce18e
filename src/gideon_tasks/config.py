"""
Configuration management for gideon_tasks.

Loads configuration from YAML with ZERO defaults.
Every value must be explicitly specified or loading fails.

Fee rates and trust limits are deliberately absent: they mirror the backend
and are module constants in fees.py and trust.py.
"""

from __future__ import annotations

import os
from functools import lru_cache
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, ConfigDict

from gideon_tasks.exceptions import ConfigurationError

CONFIG_PATH_ENV_VAR = "CONFIG_PATH"
DEFAULT_CONFIG_FILENAME = "config.yaml"


class ServiceConfig(BaseModel):
    """Client identity configuration."""

    model_config = ConfigDict(extra="forbid")
    name: str
    version: str


class LoggingConfig(BaseModel):
    """Logging configuration."""

    model_config = ConfigDict(extra="forbid")
    level: str
    directory: str | None


class Settings(BaseModel):
    """
    Root configuration container.

    All fields are REQUIRED. No defaults exist.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)
    service: ServiceConfig
    logging: LoggingConfig


def get_config_path() -> Path:
    """Determine configuration file path."""
    raw = os.environ.get(CONFIG_PATH_ENV_VAR)
    if raw:
        return Path(raw)
    return Path.cwd() / DEFAULT_CONFIG_FILENAME


def load_settings(config_path: Path) -> Settings:
    """Load and validate Settings from a YAML file."""
    if not config_path.exists():
        msg = f"Config file not found: {config_path}"
        raise ConfigurationError(msg, {"path": str(config_path)})

    raw = yaml.safe_load(config_path.read_text())
    if not isinstance(raw, dict):
        msg = f"Invalid config file: {config_path}"
        raise ConfigurationError(msg, {"path": str(config_path)})

    return Settings(**raw)


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Load settings once from the resolved config path."""
    return load_settings(get_config_path())


def clear_settings_cache() -> None:
    """Forget cached settings so the next get_settings() re-reads the file."""
    get_settings.cache_clear()


def get_safe_config() -> dict[str, Any]:
    """Get configuration as a plain dict."""
    return get_settings().model_dump()
