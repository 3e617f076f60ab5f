"""Core data models: commit records and the release context they travel in."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Self

# Record keys the normalizer may rewrite. Everything else is opaque.
TEXT_FIELDS = ("message", "subject")


class ReleaseType(str, Enum):
    """Release severity, highest first."""

    MAJOR = "major"
    MINOR = "minor"
    PATCH = "patch"

    @property
    def rank(self) -> int:
        return _RANK[self]


_RANK = {ReleaseType.MAJOR: 3, ReleaseType.MINOR: 2, ReleaseType.PATCH: 1}


def max_release(a: ReleaseType | None, b: ReleaseType | None) -> ReleaseType | None:
    """Return the more severe of two release types (None means no release)."""
    if a is None:
        return b
    if b is None:
        return a
    return a if a.rank >= b.rank else b


@dataclass(frozen=True)
class CommitRecord:
    """One commit as seen by the release pipeline."""

    message: str | None = None
    subject: str | None = None
    extra: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> Self:
        """Build from a host's loose dict record, keeping unknown keys in extra."""
        extra = {k: v for k, v in data.items() if k not in TEXT_FIELDS}
        return cls(message=data.get("message"), subject=data.get("subject"), extra=extra)

    @property
    def short_hash(self) -> str:
        return str(self.extra.get("hash", ""))[:7]


@dataclass(frozen=True)
class Release:
    """A published or upcoming release."""

    version: str
    git_tag: str = ""
    git_head: str = ""


@dataclass
class ReleaseContext:
    """Commits under evaluation plus ambient release metadata."""

    # Entries may be None; the pipeline keeps them in place
    commits: list[CommitRecord | None] | None = None
    last_release: Release | None = None
    next_release: Release | None = None
    metadata: dict[str, Any] = field(default_factory=dict)
