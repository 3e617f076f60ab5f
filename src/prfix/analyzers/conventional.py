"""Conventional commit analyzer - map commit types to release types."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from fnmatch import fnmatchcase
from typing import Any

from prfix.analyzers.base import CommitAnalyzer
from prfix.conventional import DEFAULT_NOTE_KEYWORDS, ParsedCommit, parse_commit
from prfix.models import ReleaseContext, ReleaseType, max_release

logger = logging.getLogger(__name__)

PRESETS = ("angular", "conventionalcommits")


@dataclass(frozen=True)
class ReleaseRule:
    """Match a parsed commit by type/scope/breaking and assign a release."""

    release: ReleaseType | None
    type: str | None = None
    scope: str | None = None
    breaking: bool | None = None

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> ReleaseRule:
        release = data.get("release")
        return cls(
            release=ReleaseType(release) if release else None,
            type=data.get("type"),
            scope=data.get("scope"),
            breaking=data.get("breaking"),
        )

    def matches(self, commit: ParsedCommit) -> bool:
        if self.type is not None and self.type != commit.type:
            return False
        if self.scope is not None and not fnmatchcase(commit.scope or "", self.scope):
            return False
        if self.breaking is not None and self.breaking != commit.breaking:
            return False
        return True


# Evaluated in order, first match wins
DEFAULT_RELEASE_RULES: tuple[ReleaseRule, ...] = (
    ReleaseRule(breaking=True, release=ReleaseType.MAJOR),
    ReleaseRule(type="revert", release=ReleaseType.PATCH),
    ReleaseRule(type="feat", release=ReleaseType.MINOR),
    ReleaseRule(type="fix", release=ReleaseType.PATCH),
    ReleaseRule(type="perf", release=ReleaseType.PATCH),
)


class ConventionalCommitAnalyzer(CommitAnalyzer):
    """Analyze commits against custom release rules, then the preset defaults."""

    def analyze(self, config: dict[str, Any], context: ReleaseContext) -> ReleaseType | None:
        preset = config.get("preset", "angular")
        if preset not in PRESETS:
            msg = f"Unknown preset {preset!r}. Supported: {', '.join(PRESETS)}"
            raise ValueError(msg)

        custom_rules = [ReleaseRule.from_mapping(r) for r in config.get("releaseRules", [])]
        note_keywords = config.get("parserOpts", {}).get("noteKeywords", DEFAULT_NOTE_KEYWORDS)

        result: ReleaseType | None = None
        for commit in context.commits or []:
            if commit is None:
                continue
            parsed = parse_commit(commit.message, note_keywords)
            if parsed is None:
                logger.debug("Not a conventional commit, skipping: %r", commit.message)
                continue

            release = self._classify(parsed, custom_rules)
            logger.debug("%s -> %s", commit.message.splitlines()[0], release or "no release")
            result = max_release(result, release)
            if result is ReleaseType.MAJOR:
                break

        return result

    @staticmethod
    def _classify(commit: ParsedCommit, custom_rules: list[ReleaseRule]) -> ReleaseType | None:
        """Custom rules first; fall back to the defaults when none match."""
        for rule in custom_rules:
            if rule.matches(commit):
                return rule.release
        for rule in DEFAULT_RELEASE_RULES:
            if rule.matches(commit):
                return rule.release
        return None
