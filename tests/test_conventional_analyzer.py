"""Tests for conventional commit parsing and the default analyzer."""

import pytest

from prfix.analyzers import ConventionalCommitAnalyzer
from prfix.conventional import parse_commit
from prfix.models import CommitRecord, ReleaseContext, ReleaseType


def _analyze(*messages: str, **config) -> ReleaseType | None:
    context = ReleaseContext(commits=[CommitRecord(message=m) for m in messages])
    return ConventionalCommitAnalyzer().analyze(config, context)


class TestParseCommit:
    def test_header_parts(self):
        parsed = parse_commit("feat(auth): add OAuth2 support")
        assert parsed.type == "feat"
        assert parsed.scope == "auth"
        assert parsed.subject == "add OAuth2 support"
        assert parsed.breaking is False

    def test_bang_marks_breaking(self):
        assert parse_commit("refactor!: drop py2").breaking is True

    def test_breaking_footer(self):
        parsed = parse_commit("feat: new api\n\nBREAKING CHANGE: old endpoints\nare gone")
        assert parsed.breaking is True
        assert parsed.notes == ["old endpoints are gone"]

    def test_custom_note_keywords(self):
        parsed = parse_commit("fix: x\n\nINCOMPATIBLE: y", note_keywords=["INCOMPATIBLE"])
        assert parsed.breaking is True
        assert parsed.notes == ["y"]

    def test_github_revert(self):
        parsed = parse_commit('Revert "feat: add X"')
        assert parsed.type == "revert"
        assert parsed.subject == "feat: add X"

    @pytest.mark.parametrize("message", ["update deployment config", "", None, "feat no colon"])
    def test_not_conventional(self, message):
        assert parse_commit(message) is None

    def test_merge_prefixed_is_not_conventional(self):
        assert parse_commit("Merged PR 1234: feat: add new feature") is None


class TestDefaultRules:
    def test_feat_is_minor(self):
        assert _analyze("feat: add user dashboard") is ReleaseType.MINOR

    def test_fix_is_patch(self):
        assert _analyze("fix: auth token refresh") is ReleaseType.PATCH

    def test_perf_is_patch(self):
        assert _analyze("perf: cache lookups") is ReleaseType.PATCH

    def test_revert_is_patch(self):
        assert _analyze('Revert "feat: add X"') is ReleaseType.PATCH

    def test_breaking_is_major(self):
        assert _analyze("feat!: replace config format") is ReleaseType.MAJOR

    def test_breaking_footer_is_major(self):
        assert _analyze("fix: x\n\nBREAKING CHANGE: y") is ReleaseType.MAJOR

    def test_docs_and_chore_no_release(self):
        assert _analyze("docs: update README", "chore: bump deps") is None

    def test_highest_wins(self):
        assert _analyze("fix: a", "feat: b", "docs: c") is ReleaseType.MINOR

    def test_non_conventional_ignored(self):
        assert _analyze("update deployment config", "fix: a") is ReleaseType.PATCH

    def test_no_commits(self):
        assert ConventionalCommitAnalyzer().analyze({}, ReleaseContext()) is None

    def test_none_message_ignored(self):
        assert _analyze() is None
        context = ReleaseContext(commits=[CommitRecord(message=None)])
        assert ConventionalCommitAnalyzer().analyze({}, context) is None


class TestReleaseRules:
    def test_custom_rule_adds_release(self):
        rules = [{"type": "docs", "scope": "README", "release": "patch"}]
        assert _analyze("docs(README): fix link", releaseRules=rules) is ReleaseType.PATCH

    def test_scope_must_match(self):
        rules = [{"type": "docs", "scope": "README", "release": "patch"}]
        assert _analyze("docs(api): fix link", releaseRules=rules) is None

    def test_scope_glob(self):
        rules = [{"type": "chore", "scope": "deps*", "release": "patch"}]
        assert _analyze("chore(deps-dev): bump", releaseRules=rules) is ReleaseType.PATCH

    def test_custom_rule_overrides_default(self):
        rules = [{"type": "feat", "release": "patch"}]
        assert _analyze("feat: small thing", releaseRules=rules) is ReleaseType.PATCH

    def test_release_false_suppresses(self):
        rules = [{"type": "fix", "scope": "ci", "release": False}]
        assert _analyze("fix(ci): pipeline", releaseRules=rules) is None

    def test_falls_back_to_defaults(self):
        rules = [{"type": "docs", "release": "patch"}]
        assert _analyze("feat: x", releaseRules=rules) is ReleaseType.MINOR

    def test_rule_without_release_means_no_release(self):
        rules = [{"type": "feat"}]
        assert _analyze("feat: x", releaseRules=rules) is None


class TestConfig:
    def test_unknown_preset(self):
        with pytest.raises(ValueError, match="Unknown preset"):
            _analyze("feat: x", preset="eslint")

    def test_conventionalcommits_preset(self):
        assert _analyze("feat: x", preset="conventionalcommits") is ReleaseType.MINOR

    def test_parser_note_keywords(self):
        result = _analyze(
            "fix: x\n\nINCOMPATIBLE: y", parserOpts={"noteKeywords": ["INCOMPATIBLE"]}
        )
        assert result is ReleaseType.MAJOR
