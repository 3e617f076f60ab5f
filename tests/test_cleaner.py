"""Tests for merge-prefix stripping on plain strings."""

import pytest

from prfix.transformer.cleaner import strip_merge_prefix


class TestStripMergePrefix:
    def test_strips_prefix(self):
        assert strip_merge_prefix("Merged PR 1234: feat: add new feature") == "feat: add new feature"

    @pytest.mark.parametrize("number", ["1", "42", "56789123", "000123456789012345678"])
    def test_any_pr_number_discarded(self, number):
        assert strip_merge_prefix(f"Merged PR {number}: fix: Y") == "fix: Y"

    def test_no_space_after_colon(self):
        assert strip_merge_prefix("Merged PR 7:docs: typo") == "docs: typo"

    def test_trailing_whitespace_trimmed(self):
        assert strip_merge_prefix("Merged PR 7:   chore: tidy   ") == "chore: tidy"

    def test_inner_whitespace_kept(self):
        assert strip_merge_prefix("Merged PR 7: fix:  two  spaces") == "fix:  two  spaces"

    def test_body_kept_after_subject(self):
        text = "Merged PR 9: feat: x\n\nBREAKING CHANGE: y"
        assert strip_merge_prefix(text) == "feat: x\n\nBREAKING CHANGE: y"

    def test_non_prefixed_text_identical(self):
        text = "fix: resolve bug in login function"
        assert strip_merge_prefix(text) is text

    @pytest.mark.parametrize(
        "text",
        [
            "Merged PR: no number",
            "Merged PR abc: letters",
            "merged pr 12: lowercase",
            " Merged PR 12: leading space",
            "Merged PR 12 missing colon",
            "Note: Merged PR 12: not at start",
            "",
        ],
    )
    def test_near_misses_untouched(self, text):
        assert strip_merge_prefix(text) == text

    def test_blank_remainder_untouched(self):
        assert strip_merge_prefix("Merged PR 12:   ") == "Merged PR 12:   "

    def test_none_passes_through(self):
        assert strip_merge_prefix(None) is None

    def test_idempotent(self):
        once = strip_merge_prefix("Merged PR 8888: This is a normal commit message")
        assert once == "This is a normal commit message"
        assert strip_merge_prefix(once) == once
