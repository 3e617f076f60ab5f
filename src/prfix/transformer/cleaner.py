"""Merge-prefix stripping for commit text."""

from __future__ import annotations

import re

# "Merged PR 1234: feat: add thing" -> "feat: add thing"
MERGE_PREFIX_RE = re.compile(r"^Merged PR [0-9]+:\s*(?P<remainder>.*)", re.DOTALL)


def strip_merge_prefix(text: str | None) -> str | None:
    """Return the text after a ``Merged PR <n>:`` prefix, trimmed.

    Text without the prefix, or whose remainder is blank, comes back exactly
    as given. ``None`` and other non-string values pass through.
    """
    if not isinstance(text, str):
        return text
    match = MERGE_PREFIX_RE.match(text)
    if match:
        remainder = match.group("remainder").strip()
        if remainder:
            return remainder
    return text
