"""Abstract base class for release notes generators."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

from prfix.models import ReleaseContext


class NotesGenerator(ABC):
    """Render release notes from a context's commits."""

    @abstractmethod
    def generate(
        self, config: dict[str, Any], context: ReleaseContext
    ) -> Any:  # str or Coroutine[Any, Any, str]
        """Return release notes text. Can be sync or async in subclasses."""
        ...
