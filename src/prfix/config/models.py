"""Configuration dataclasses for prfix."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Literal

DEFAULT_CONFIG_PATH = Path(".prfix.toml")

ANALYZER_KEY = "commitAnalyzerConfig"
NOTES_KEY = "notesGeneratorConfig"

NotesConfig = dict[str, Any] | Literal[False]


@dataclass
class PluginConfig:
    """Per-call configuration slices for the two downstream collaborators."""

    commit_analyzer_config: dict[str, Any] = field(default_factory=dict)
    notes_generator_config: NotesConfig = field(default_factory=dict)

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any] | PluginConfig | None) -> PluginConfig:
        """Read the host's camelCase plugin options.

        Sub-configs are kept as the same objects so collaborators receive them
        verbatim. Missing or None keys fall back to an empty mapping.
        """
        if isinstance(data, PluginConfig):
            return data
        data = data or {}
        analyzer = data.get(ANALYZER_KEY)
        notes = data.get(NOTES_KEY)
        return cls(
            commit_analyzer_config=analyzer if analyzer is not None else {},
            notes_generator_config=notes if notes is not None else {},
        )

    @property
    def notes_enabled(self) -> bool:
        return self.notes_generator_config is not False

    def to_mapping(self) -> dict[str, Any]:
        return {
            ANALYZER_KEY: self.commit_analyzer_config,
            NOTES_KEY: self.notes_generator_config,
        }


@dataclass
class RepositoryConfig:
    """Where to read commits and how releases are tagged."""

    path: Path = field(default_factory=lambda: Path("."))
    tag_prefix: str = "v"


@dataclass
class ReleaseConfig:
    """Main prfix configuration."""

    repository: RepositoryConfig = field(default_factory=RepositoryConfig)
    plugin: PluginConfig = field(
        default_factory=lambda: PluginConfig(
            commit_analyzer_config={"preset": "angular"},
            notes_generator_config={"preset": "angular"},
        )
    )
