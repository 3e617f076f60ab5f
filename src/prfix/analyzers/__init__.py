"""Commit analyzers - decide whether and how to bump the version."""

from __future__ import annotations

from prfix.analyzers.base import CommitAnalyzer
from prfix.analyzers.conventional import ConventionalCommitAnalyzer, ReleaseRule

__all__ = ["CommitAnalyzer", "ConventionalCommitAnalyzer", "ReleaseRule"]
