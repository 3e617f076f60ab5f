"""Conventional commit message parsing shared by the default collaborators."""

from __future__ import annotations

import re
from collections.abc import Sequence
from dataclasses import dataclass, field

DEFAULT_NOTE_KEYWORDS: tuple[str, ...] = ("BREAKING CHANGE", "BREAKING-CHANGE")

# type(scope)!: subject
HEADER_RE = re.compile(
    r"^(?P<type>\w+)(?:\((?P<scope>[^)]*)\))?(?P<breaking>!)?:\s*(?P<subject>.+)$",
)

# GitHub's default revert header: Revert "feat: add X"
REVERT_RE = re.compile(r'^[Rr]evert\s+"(?P<inner>.+)"')


@dataclass(frozen=True)
class ParsedCommit:
    """A commit message split into conventional parts."""

    type: str
    subject: str
    scope: str | None = None
    body: str = ""
    breaking: bool = False
    notes: list[str] = field(default_factory=list)


def parse_commit(
    message: str | None,
    note_keywords: Sequence[str] = DEFAULT_NOTE_KEYWORDS,
) -> ParsedCommit | None:
    """Parse a full commit message; None when the header is not conventional."""
    if not isinstance(message, str) or not message.strip():
        return None

    header, _, body = message.strip().partition("\n")
    body = body.strip()

    revert = REVERT_RE.match(header)
    if revert:
        return ParsedCommit(type="revert", subject=revert.group("inner"), body=body)

    match = HEADER_RE.match(header.strip())
    if not match:
        return None

    notes = _breaking_notes(body, note_keywords)
    return ParsedCommit(
        type=match.group("type").lower(),
        subject=match.group("subject").strip(),
        scope=match.group("scope") or None,
        body=body,
        breaking=bool(match.group("breaking")) or bool(notes),
        notes=notes,
    )


def _breaking_notes(body: str, keywords: Sequence[str]) -> list[str]:
    """Collect text following note keywords (``BREAKING CHANGE: ...``) in the body."""
    notes: list[str] = []
    lines = body.splitlines()
    for i, line in enumerate(lines):
        for keyword in keywords:
            if line.startswith(f"{keyword}:"):
                text = line[len(keyword) + 1 :].strip()
                # Continuation lines run until the next blank line
                for follow in lines[i + 1 :]:
                    if not follow.strip():
                        break
                    text = f"{text} {follow.strip()}".strip()
                notes.append(text)
                break
    return notes
