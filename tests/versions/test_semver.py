"""
Tests for npm-style version ranges.

Tests cover:
- Parsing of every supported range form
- Range intersection
- Version satisfaction
- Invalid input
"""

import pytest
from packaging.version import Version

from pkgmatchkit.core.exceptions import InvalidRangeError
from pkgmatchkit.versions.semver import (
    SemVer,
    intersects,
    parse_range,
    parse_version,
    satisfies,
)


def _bounds(expression):
    """Render the intervals of a range as strings."""
    return [str(interval) for interval in parse_range(expression).intervals]


class TestParseVersion:
    """Test concrete version parsing."""

    def test_plain(self):
        version = parse_version("1.2.3")
        assert version == SemVer(Version("1.2.3"))
        assert str(version) == "1.2.3"

    def test_leading_v_and_equals(self):
        assert parse_version("v1.2.3") == parse_version("1.2.3")
        assert parse_version("=1.2.3") == parse_version("1.2.3")

    def test_build_metadata_ignored(self):
        assert parse_version("1.2.3+build.7") == parse_version("1.2.3")

    def test_prerelease_identifiers(self):
        version = parse_version("1.0.0-next.3")
        assert version.prerelease == ("next", 3)
        assert version.is_prerelease
        assert str(version) == "1.0.0-next.3"

    def test_prerelease_sorts_before_release(self):
        assert parse_version("1.0.0-next.3") < parse_version("1.0.0")
        assert parse_version("1.0.0-0") < parse_version("1.0.0")
        assert parse_version("1.0.0") < parse_version("1.0.1-alpha")

    @pytest.mark.parametrize(
        "lower,higher",
        [
            ("1.0.0-alpha", "1.0.0-alpha.1"),
            ("1.0.0-alpha.1", "1.0.0-alpha.beta"),
            ("1.0.0-alpha.beta", "1.0.0-beta"),
            ("1.0.0-beta", "1.0.0-beta.2"),
            ("1.0.0-beta.2", "1.0.0-beta.11"),
            ("1.0.0-beta.11", "1.0.0-rc.1"),
            ("1.0.0-alpha", "1.0.0-next.1"),
            ("1.0.0-next.3", "1.0.0-next.4"),
        ],
    )
    def test_prerelease_precedence(self, lower, higher):
        assert parse_version(lower) < parse_version(higher)
        assert parse_version(higher) > parse_version(lower)

    def test_distinct_tags_are_not_equal(self):
        assert parse_version("1.0.0-pre.1") != parse_version("1.0.0-rc.1")
        assert parse_version("1.0.0-c.1") != parse_version("1.0.0-rc.1")

    @pytest.mark.parametrize("text", ["1.2", "1.x", "latest", "", "1.2.3.4"])
    def test_rejects_incomplete_or_invalid(self, text):
        with pytest.raises(InvalidRangeError):
            parse_version(text)


class TestParseRange:
    """Test desugaring of range expressions into intervals."""

    @pytest.mark.parametrize(
        "expression,expected",
        [
            ("1.2.3", [">=1.2.3 <=1.2.3"]),
            ("=1.2.3", [">=1.2.3 <=1.2.3"]),
            ("1.2", [">=1.2.0 <1.3.0"]),
            ("1", [">=1.0.0 <2.0.0"]),
            ("1.x", [">=1.0.0 <2.0.0"]),
            ("1.2.X", [">=1.2.0 <1.3.0"]),
            ("*", ["*"]),
            ("", ["*"]),
            ("x", ["*"]),
        ],
    )
    def test_exact_and_x_ranges(self, expression, expected):
        assert _bounds(expression) == expected

    @pytest.mark.parametrize(
        "expression,expected",
        [
            ("^1.2.3", [">=1.2.3 <2.0.0"]),
            ("^0.2.3", [">=0.2.3 <0.3.0"]),
            ("^0.0.3", [">=0.0.3 <0.0.4"]),
            ("^1.2", [">=1.2.0 <2.0.0"]),
            ("^0.0", [">=0.0.0 <0.1.0"]),
            ("^1", [">=1.0.0 <2.0.0"]),
        ],
    )
    def test_caret_ranges(self, expression, expected):
        assert _bounds(expression) == expected

    @pytest.mark.parametrize(
        "expression,expected",
        [
            ("~1.2.3", [">=1.2.3 <1.3.0"]),
            ("~1.2", [">=1.2.0 <1.3.0"]),
            ("~1", [">=1.0.0 <2.0.0"]),
            ("~>1.2.3", [">=1.2.3 <1.3.0"]),
        ],
    )
    def test_tilde_ranges(self, expression, expected):
        assert _bounds(expression) == expected

    @pytest.mark.parametrize(
        "expression,expected",
        [
            (">1.2.3", [">1.2.3"]),
            (">1.2", [">=1.3.0"]),
            (">1", [">=2.0.0"]),
            (">=1.2", [">=1.2.0"]),
            ("<1.2.3", ["<1.2.3"]),
            ("<1.2", ["<1.2.0"]),
            ("<=1.2.3", ["<=1.2.3"]),
            ("<=1.2", ["<1.3.0"]),
            ("<=1", ["<2.0.0"]),
            (">= 1.0.0 < 2.0.0", [">=1.0.0 <2.0.0"]),
        ],
    )
    def test_primitive_comparators(self, expression, expected):
        assert _bounds(expression) == expected

    @pytest.mark.parametrize(
        "expression,expected",
        [
            ("1.2.3 - 2.3.4", [">=1.2.3 <=2.3.4"]),
            ("1.2 - 2.3.4", [">=1.2.0 <=2.3.4"]),
            ("1.2.3 - 2.3", [">=1.2.3 <2.4.0"]),
            ("1.2.3 - 2", [">=1.2.3 <3.0.0"]),
            ("1.2.3 - *", [">=1.2.3"]),
        ],
    )
    def test_hyphen_ranges(self, expression, expected):
        assert _bounds(expression) == expected

    def test_union(self):
        assert _bounds("^1.0.0 || ^3.0.0") == [">=1.0.0 <2.0.0", ">=3.0.0 <4.0.0"]

    def test_unsatisfiable_sets_are_dropped(self):
        assert _bounds(">2.0.0 <1.0.0 || 3.x") == [">=3.0.0 <4.0.0"]
        assert parse_range(">*").is_empty()
        assert parse_range("<0.0.0").is_empty()

    def test_str_is_expression(self):
        assert str(parse_range(">=1 <2")) == ">=1 <2"

    @pytest.mark.parametrize(
        "expression",
        ["latest", "file:../lib", "git+https://github.com/a/b.git", "^", ">=", "1.2.3.4", "~foo"],
    )
    def test_invalid_ranges(self, expression):
        with pytest.raises(InvalidRangeError):
            parse_range(expression)

    def test_non_string(self):
        with pytest.raises(InvalidRangeError, match="not a string"):
            parse_range(None)


class TestIntersects:
    """Test range intersection."""

    @pytest.mark.parametrize(
        "a,b",
        [
            ("1.0.0", "1.0.0"),
            ("^1.0.0", "1.2.0"),
            ("^1.0.0", "^1.5.0"),
            ("~1.2.0", "1.2.x"),
            (">=1.0.0", "<1.0.1"),
            ("1.x", ">=1.9.0 <3.0.0"),
            ("*", "4.17.21"),
            ("^1.0.0 || ^2.0.0", "2.3.4"),
            ("1.2.3 - 2.0.0", "2.0.0"),
        ],
    )
    def test_overlapping(self, a, b):
        assert intersects(a, b) is True
        assert intersects(b, a) is True

    @pytest.mark.parametrize(
        "a,b",
        [
            ("^1.0.0", "2.0.0"),
            ("1.0.0", "1.0.1"),
            ("<1.0.0", ">=1.0.0"),
            (">1.0.0", "<=1.0.0"),
            ("~1.2.0", "1.3.0"),
            ("^0.2.0", "0.3.0"),
            ("^1.0.0 || ^3.0.0", "2.x"),
        ],
    )
    def test_disjoint(self, a, b):
        assert intersects(a, b) is False
        assert intersects(b, a) is False

    def test_touching_inclusive_bounds(self):
        assert intersects("<=1.0.0", ">=1.0.0") is True

    def test_empty_range_intersects_nothing(self):
        assert intersects(">*", "*") is False

    def test_accepts_parsed_ranges(self):
        assert intersects(parse_range("^1.0.0"), parse_range("1.4.0")) is True

    def test_invalid_range_raises(self):
        with pytest.raises(InvalidRangeError):
            intersects("latest", "^1.0.0")


class TestSatisfies:
    """Test version satisfaction."""

    @pytest.mark.parametrize(
        "version,expression",
        [
            ("1.4.2", "~1.4.0"),
            ("1.9.9", "^1.0.0"),
            ("0.2.5", "^0.2.3"),
            ("2.0.0", ">=1.0.0"),
            ("1.2.3", "1.2.3"),
            ("3.1.0", "^1.0.0 || ^3.0.0"),
        ],
    )
    def test_satisfied(self, version, expression):
        assert satisfies(version, expression) is True

    @pytest.mark.parametrize(
        "version,expression",
        [
            ("2.0.0", "^1.0.0"),
            ("0.3.0", "^0.2.3"),
            ("1.5.0", "~1.4.0"),
            ("0.9.0", ">=1.0.0"),
        ],
    )
    def test_not_satisfied(self, version, expression):
        assert satisfies(version, expression) is False

    def test_version_object(self):
        assert satisfies(Version("1.2.0"), "^1.0.0") is True

    def test_prerelease_version(self):
        assert satisfies("1.0.0-next.4", ">1.0.0-next.3") is True
        assert satisfies("1.0.0-next.2", ">1.0.0-next.3") is False


class TestPrereleaseRanges:
    """Test ranges whose bounds carry prerelease tags."""

    def test_different_prerelease_numbers_disjoint(self):
        assert intersects("1.0.0-next.3", "1.0.0-next.4") is False

    def test_different_tags_disjoint(self):
        assert intersects("1.0.0-pre.1", "1.0.0-rc.1") is False

    def test_unknown_tag_above_alpha(self):
        assert intersects(">1.0.0-alpha", "1.0.0-next.1") is True
        assert intersects("<1.0.0-alpha", "1.0.0-next.1") is False

    def test_interval_renders_prerelease(self):
        assert _bounds(">=1.0.0-rc.1 <1.0.0") == [">=1.0.0-rc.1 <1.0.0"]
