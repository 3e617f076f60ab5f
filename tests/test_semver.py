"""Tests for semantic version bumping."""

import pytest

from prfix.models import ReleaseType, max_release
from prfix.semver import SemVer, next_version


class TestSemVer:
    def test_parse(self):
        assert SemVer.parse("1.2.3") == SemVer(1, 2, 3)

    def test_parse_with_prefix(self):
        assert SemVer.parse("v1.2.3", prefix="v") == SemVer(1, 2, 3)

    @pytest.mark.parametrize("text", ["1.2", "01.2.3", "1.2.3-beta.1", "latest"])
    def test_parse_invalid(self, text):
        assert SemVer.parse(text) is None

    def test_bump(self):
        v = SemVer(1, 2, 3)
        assert str(v.bump(ReleaseType.MAJOR)) == "2.0.0"
        assert str(v.bump(ReleaseType.MINOR)) == "1.3.0"
        assert str(v.bump(ReleaseType.PATCH)) == "1.2.4"


class TestNextVersion:
    def test_first_release(self):
        assert next_version(None, ReleaseType.PATCH) == "1.0.0"

    def test_bumps_last(self):
        assert next_version("1.2.3", ReleaseType.MINOR) == "1.3.0"

    def test_invalid_last(self):
        with pytest.raises(ValueError, match="not a semantic version"):
            next_version("banana", ReleaseType.PATCH)


class TestMaxRelease:
    def test_none_loses(self):
        assert max_release(None, ReleaseType.PATCH) is ReleaseType.PATCH
        assert max_release(ReleaseType.PATCH, None) is ReleaseType.PATCH
        assert max_release(None, None) is None

    def test_higher_wins(self):
        assert max_release(ReleaseType.MINOR, ReleaseType.MAJOR) is ReleaseType.MAJOR
        assert max_release(ReleaseType.MINOR, ReleaseType.PATCH) is ReleaseType.MINOR
