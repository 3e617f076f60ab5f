"""Abstract base class for commit analyzers."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

from prfix.models import ReleaseContext


class CommitAnalyzer(ABC):
    """Decide the release type warranted by a context's commits."""

    @abstractmethod
    def analyze(
        self, config: dict[str, Any], context: ReleaseContext
    ) -> Any:  # str | None or Coroutine[Any, Any, str | None]
        """Return a release type, or None when no release is needed.

        Can be overridden as sync or async in subclasses.
        """
        ...
