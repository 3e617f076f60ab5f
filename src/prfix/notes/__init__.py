"""Release notes generators."""

from __future__ import annotations

from prfix.notes.base import NotesGenerator
from prfix.notes.markdown import MarkdownNotesGenerator

__all__ = ["MarkdownNotesGenerator", "NotesGenerator"]
