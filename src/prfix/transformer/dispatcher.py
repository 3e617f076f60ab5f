"""Commit normalization over records, collections and release contexts."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Mapping
from dataclasses import replace
from typing import Any

from prfix.models import TEXT_FIELDS, CommitRecord, ReleaseContext
from prfix.transformer.cleaner import strip_merge_prefix

logger = logging.getLogger(__name__)

Record = CommitRecord | Mapping[str, Any] | None


class CommitNormalizer:
    """Rewrite merge-prefixed commit text to the original subject."""

    def __init__(self, clean: Callable[[Any], Any] | None = None) -> None:
        """Initialize normalizer with an optional string transform override."""
        self._clean = clean or strip_merge_prefix

    def normalize(self, record: Record) -> Record:
        """Return a shallow copy of the record with message/subject cleaned.

        Accepts a CommitRecord or a plain mapping; an absent or empty record is
        returned unchanged. The input is never modified.
        """
        if not record:
            return record

        if isinstance(record, CommitRecord):
            changes = {name: self._clean(getattr(record, name)) for name in TEXT_FIELDS}
            return replace(record, **changes)

        copied = dict(record)
        for name in TEXT_FIELDS:
            if name in copied:
                copied[name] = self._clean(copied[name])
        return copied

    def normalize_all(self, records: Iterable[Record]) -> list[Record]:
        """Normalize every record, preserving order and length."""
        originals = list(records)
        normalized = [self.normalize(r) for r in originals]
        rewritten = sum(1 for a, b in zip(originals, normalized) if _text(a) != _text(b))
        logger.debug("Stripped merge prefix from %d of %d commits", rewritten, len(normalized))
        return normalized

    def normalize_context(self, context: ReleaseContext) -> ReleaseContext:
        """Return a new context carrying normalized commits."""
        if context.commits is None:
            return replace(context)
        return replace(context, commits=self.normalize_all(context.commits))


def _text(record: Record) -> tuple[Any, Any]:
    if not record:
        return None, None
    if isinstance(record, CommitRecord):
        return record.message, record.subject
    return record.get("message"), record.get("subject")
