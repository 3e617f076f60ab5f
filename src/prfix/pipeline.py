"""Release pipeline adapter - normalize commits, then delegate downstream."""

from __future__ import annotations

import inspect
import logging
from collections.abc import Mapping
from typing import Any

from prfix.analyzers.base import CommitAnalyzer
from prfix.analyzers.conventional import ConventionalCommitAnalyzer
from prfix.config.models import PluginConfig
from prfix.models import CommitRecord, ReleaseContext
from prfix.notes.base import NotesGenerator
from prfix.notes.markdown import MarkdownNotesGenerator
from prfix.transformer import CommitNormalizer

logger = logging.getLogger(__name__)

PluginOptions = Mapping[str, Any] | PluginConfig | None


class ReleasePipeline:
    """Hand normalized commits to a commit analyzer and a notes generator.

    Both entry points update ``context.commits`` in place before delegating,
    so collaborators (and callers) see the normalized commits. Collaborator
    results and errors pass through untouched.
    """

    def __init__(
        self,
        analyzer: CommitAnalyzer | None = None,
        notes_generator: NotesGenerator | None = None,
        normalizer: CommitNormalizer | None = None,
    ) -> None:
        """Initialize pipeline with optional collaborator overrides."""
        self._analyzer = analyzer or ConventionalCommitAnalyzer()
        self._notes_generator = notes_generator or MarkdownNotesGenerator()
        self._normalizer = normalizer or CommitNormalizer()

    async def analyze_commits(self, plugin_config: PluginOptions, context: ReleaseContext) -> Any:
        """Return the analyzer's release type (None means no release)."""
        config = PluginConfig.from_mapping(plugin_config)
        self._apply_normalized(context)
        return await _resolve(self._analyzer.analyze(config.commit_analyzer_config, context))

    async def generate_notes(self, plugin_config: PluginOptions, context: ReleaseContext) -> Any:
        """Return the generator's notes, or None when notes are disabled."""
        config = PluginConfig.from_mapping(plugin_config)
        if not config.notes_enabled:
            logger.debug("Notes generation disabled, skipping")
            return None
        self._apply_normalized(context)
        return await _resolve(
            self._notes_generator.generate(config.notes_generator_config, context)
        )

    def _apply_normalized(self, context: ReleaseContext) -> None:
        """Replace the caller's commits with their normalized copies.

        Plain dict records from the host become CommitRecords here, so
        collaborators only ever see CommitRecord or None entries.
        """
        if context.commits is None:
            return
        normalized = self._normalizer.normalize_context(context).commits
        context.commits = [
            CommitRecord.from_mapping(c) if isinstance(c, Mapping) else c for c in normalized
        ]


async def _resolve(result: Any) -> Any:
    """Await collaborator results that are awaitable, pass others through."""
    if inspect.isawaitable(result):
        return await result
    return result


_default_pipeline = ReleasePipeline()


async def analyze_commits(plugin_config: PluginOptions, context: ReleaseContext) -> Any:
    """Normalize commits and run the default conventional commit analyzer."""
    return await _default_pipeline.analyze_commits(plugin_config, context)


async def generate_notes(plugin_config: PluginOptions, context: ReleaseContext) -> Any:
    """Normalize commits and render release notes with the default generator."""
    return await _default_pipeline.generate_notes(plugin_config, context)
