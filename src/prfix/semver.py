"""Semantic version parsing and bumping for release tags."""

from __future__ import annotations

import re
from dataclasses import dataclass

from prfix.models import ReleaseType

_VERSION_RE = re.compile(r"^(0|[1-9]\d*)\.(0|[1-9]\d*)\.(0|[1-9]\d*)$")

FIRST_RELEASE = "1.0.0"


@dataclass(frozen=True, order=True)
class SemVer:
    major: int
    minor: int
    patch: int

    def __str__(self) -> str:
        return f"{self.major}.{self.minor}.{self.patch}"

    @classmethod
    def parse(cls, text: str, prefix: str = "") -> SemVer | None:
        """Parse ``1.2.3`` (optionally behind a tag prefix like ``v``)."""
        if prefix and text.startswith(prefix):
            text = text[len(prefix) :]
        m = _VERSION_RE.match(text)
        if m is None:
            return None
        return cls(int(m.group(1)), int(m.group(2)), int(m.group(3)))

    def bump(self, kind: ReleaseType) -> SemVer:
        match kind:
            case ReleaseType.MAJOR:
                return SemVer(self.major + 1, 0, 0)
            case ReleaseType.MINOR:
                return SemVer(self.major, self.minor + 1, 0)
            case ReleaseType.PATCH:
                return SemVer(self.major, self.minor, self.patch + 1)
            case _:
                raise AssertionError(f"unexpected bump kind: {kind}")


def next_version(last: str | None, kind: ReleaseType) -> str:
    """Version for the next release; the first release is always 1.0.0."""
    if last is None:
        return FIRST_RELEASE
    current = SemVer.parse(last)
    if current is None:
        msg = f"Last release version {last!r} is not a semantic version"
        raise ValueError(msg)
    return str(current.bump(kind))
