"""Shared test fixtures."""

from __future__ import annotations

import pytest

from prfix.models import CommitRecord, ReleaseContext


def _make_commit(message: str | None, subject: str | None = "", **extra) -> CommitRecord:
    """Commit whose subject mirrors the message unless given explicitly."""
    if subject == "":
        subject = message
    return CommitRecord(message=message, subject=subject, extra=extra)


@pytest.fixture
def merged_feature() -> CommitRecord:
    return _make_commit("Merged PR 1234: feat: add new feature", hash="a1b2c3d4e5f6")


@pytest.fixture
def plain_fix() -> CommitRecord:
    return _make_commit("fix: resolve bug in login function", hash="0f9e8d7c6b5a")


@pytest.fixture
def mixed_context() -> ReleaseContext:
    """Three commits with and without merge prefixes."""
    return ReleaseContext(
        commits=[
            _make_commit("Merged PR 1234: feat: add new feature"),
            _make_commit("fix: resolve bug in login function"),
            _make_commit("Merged PR 56789123: breaking: change API structure"),
        ]
    )
