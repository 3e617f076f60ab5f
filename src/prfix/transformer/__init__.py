"""Commit transformation layer - strip merge prefixes from commit text."""

from __future__ import annotations

from prfix.transformer.cleaner import strip_merge_prefix
from prfix.transformer.dispatcher import CommitNormalizer

__all__ = ["CommitNormalizer", "strip_merge_prefix"]
