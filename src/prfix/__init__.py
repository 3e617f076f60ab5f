"""prfix - normalize pull-request merge commits for release automation."""

from __future__ import annotations

from prfix.models import CommitRecord, Release, ReleaseContext, ReleaseType
from prfix.pipeline import ReleasePipeline, analyze_commits, generate_notes
from prfix.transformer import CommitNormalizer, strip_merge_prefix

__all__ = [
    "CommitNormalizer",
    "CommitRecord",
    "Release",
    "ReleaseContext",
    "ReleasePipeline",
    "ReleaseType",
    "analyze_commits",
    "generate_notes",
    "strip_merge_prefix",
]
