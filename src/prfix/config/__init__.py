"""Configuration management for prfix."""

from __future__ import annotations

from prfix.config.loader import load_config
from prfix.config.models import (
    DEFAULT_CONFIG_PATH,
    PluginConfig,
    ReleaseConfig,
    RepositoryConfig,
)
from prfix.config.serializer import generate_config_toml

__all__ = [
    "DEFAULT_CONFIG_PATH",
    "PluginConfig",
    "ReleaseConfig",
    "RepositoryConfig",
    "load_config",
    "generate_config_toml",
]
