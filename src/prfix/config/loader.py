"""Load and validate prfix configuration from TOML files."""

from __future__ import annotations

import tomllib
from pathlib import Path
from typing import Any

from prfix.config.models import (
    ANALYZER_KEY,
    DEFAULT_CONFIG_PATH,
    NOTES_KEY,
    PluginConfig,
    ReleaseConfig,
    RepositoryConfig,
)
from prfix.config.validation import ConfigValidator


def load_config(path: Path = DEFAULT_CONFIG_PATH) -> ReleaseConfig:
    """Load config from TOML file, validate, and return."""
    if not path.exists():
        msg = f"Config not found at {path}. Run 'prfix init' to create one."
        raise FileNotFoundError(msg)

    with open(path, "rb") as f:
        data = tomllib.load(f)

    config = _from_dict(data, base_dir=path.parent)

    validator = ConfigValidator()
    errors = validator.validate(config)
    if errors:
        error_msgs = "\n".join(f"  {e.path}: {e.message}" for e in errors)
        msg = f"Config validation failed:\n{error_msgs}"
        raise ValueError(msg)

    return config


def _from_dict(data: dict[str, Any], base_dir: Path) -> ReleaseConfig:
    """Convert TOML dict to ReleaseConfig dataclass."""
    repo_data = data.get("repository", {})
    plugin_data = data.get("plugin", {})

    # Relative repo paths are resolved against the config file's directory
    repo_path = Path(repo_data.get("path", ".")).expanduser()
    if not repo_path.is_absolute():
        repo_path = base_dir / repo_path

    defaults = ReleaseConfig().plugin
    plugin = PluginConfig.from_mapping(plugin_data)
    if ANALYZER_KEY not in plugin_data:
        plugin.commit_analyzer_config = defaults.commit_analyzer_config
    if NOTES_KEY not in plugin_data:
        plugin.notes_generator_config = defaults.notes_generator_config

    return ReleaseConfig(
        repository=RepositoryConfig(
            path=repo_path,
            tag_prefix=repo_data.get("tag_prefix", "v"),
        ),
        plugin=plugin,
    )
