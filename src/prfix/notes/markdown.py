"""Markdown release notes, grouped by commit type."""

from __future__ import annotations

from datetime import date, datetime
from typing import Any

from prfix.conventional import DEFAULT_NOTE_KEYWORDS, ParsedCommit, parse_commit
from prfix.models import CommitRecord, ReleaseContext
from prfix.notes.base import NotesGenerator

BREAKING_TITLE = "⚠ BREAKING CHANGES"

# Section titles in display order, per preset
SECTIONS: dict[str, dict[str, str]] = {
    "angular": {
        "feat": "Features",
        "fix": "Bug Fixes",
        "perf": "Performance Improvements",
        "revert": "Reverts",
    },
    "conventionalcommits": {
        "feat": "Features",
        "fix": "Bug Fixes",
        "perf": "Performance Improvements",
        "revert": "Reverts",
        "docs": "Documentation",
        "refactor": "Code Refactoring",
    },
}

DEFAULT_COMMITS_SORT = ["scope", "subject"]


class MarkdownNotesGenerator(NotesGenerator):
    def generate(self, config: dict[str, Any], context: ReleaseContext) -> str:
        preset = config.get("preset", "angular")
        if preset not in SECTIONS:
            msg = f"Unknown preset {preset!r}. Supported: {', '.join(SECTIONS)}"
            raise ValueError(msg)
        sections = SECTIONS[preset]

        note_keywords = config.get("parserOpts", {}).get("noteKeywords", DEFAULT_NOTE_KEYWORDS)
        sort_keys = config.get("writerOpts", {}).get("commitsSort", DEFAULT_COMMITS_SORT)

        entries: dict[str, list[tuple[ParsedCommit, CommitRecord]]] = {t: [] for t in sections}
        breaking: list[tuple[ParsedCommit, str]] = []
        for commit in context.commits or []:
            if commit is None:
                continue
            parsed = parse_commit(commit.message, note_keywords)
            if parsed is None:
                continue
            if parsed.breaking:
                # "feat!: x" without a footer uses the subject as its note
                for note in parsed.notes or [parsed.subject]:
                    breaking.append((parsed, note))
            if parsed.type in entries:
                entries[parsed.type].append((parsed, commit))

        blocks: list[str] = []
        header = self._header(context)
        if header:
            blocks.append(header)

        if breaking:
            lines = [f"### {BREAKING_TITLE}", ""]
            lines.extend(f"* {_scope_prefix(p)}{note}" for p, note in breaking)
            blocks.append("\n".join(lines))

        for commit_type, title in sections.items():
            items = sorted(entries[commit_type], key=lambda e: _sort_key(e[0], sort_keys))
            if not items:
                continue
            lines = [f"### {title}", ""]
            lines.extend(_entry_line(parsed, commit) for parsed, commit in items)
            blocks.append("\n".join(lines))

        if not blocks:
            return ""
        return "\n\n".join(blocks) + "\n"

    @staticmethod
    def _header(context: ReleaseContext) -> str | None:
        if context.next_release is None:
            return None
        released_on = context.metadata.get("date") or date.today()
        if isinstance(released_on, datetime):
            released_on = released_on.date()
        if isinstance(released_on, date):
            released_on = released_on.isoformat()
        return f"## {context.next_release.version} ({released_on})"


def _scope_prefix(parsed: ParsedCommit) -> str:
    return f"**{parsed.scope}:** " if parsed.scope else ""


def _entry_line(parsed: ParsedCommit, commit: CommitRecord) -> str:
    line = f"* {_scope_prefix(parsed)}{parsed.subject}"
    if commit.short_hash:
        line += f" ({commit.short_hash})"
    return line


def _sort_key(parsed: ParsedCommit, keys: list[str]) -> tuple[str, ...]:
    return tuple(str(getattr(parsed, key, "") or "") for key in keys)
