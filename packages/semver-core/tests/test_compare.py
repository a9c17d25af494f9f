# SPDX-License-Identifier: MIT
"""Unit tests for version comparison."""

import pytest

from semver_core import (
    Ordering,
    ParseError,
    compare,
    compare_versions,
    parse_version,
    sort_versions,
    version_key,
)

# Precedence chain from the SemVer 2.0.0 specification, lowest first
SEMVER_CHAIN = [
    "1.0.0-alpha",
    "1.0.0-alpha.1",
    "1.0.0-alpha.beta",
    "1.0.0-beta",
    "1.0.0-beta.2",
    "1.0.0-beta.11",
    "1.0.0-rc.1",
    "1.0.0",
]


class TestCompare:
    """Tests for the compare function."""

    def test_equal_versions(self):
        """Test that equal versions compare as equal."""
        assert compare("1.0.0", "1.0.0") is Ordering.EQUAL

    def test_major_difference(self):
        """Test comparison with different major versions."""
        assert compare("1.0.0", "2.0.0") is Ordering.LESS
        assert compare("2.0.0", "1.0.0") is Ordering.GREATER

    def test_minor_difference(self):
        """Test comparison with different minor versions."""
        assert compare("1.0.0", "1.1.0") is Ordering.LESS
        assert compare("1.1.0", "1.0.0") is Ordering.GREATER

    def test_patch_difference(self):
        """Test comparison with different patch versions."""
        assert compare("1.0.0", "1.0.1") is Ordering.LESS
        assert compare("1.0.1", "1.0.0") is Ordering.GREATER

    def test_numeric_not_lexical(self):
        """Test that core fields compare as numbers."""
        assert compare("1.10.0", "1.9.0") is Ordering.GREATER

    def test_prerelease_vs_release(self):
        """Test that pre-release is less than release."""
        assert compare("1.0.0-alpha", "1.0.0") is Ordering.LESS
        assert compare("1.0.0", "1.0.0-alpha") is Ordering.GREATER

    def test_prerelease_does_not_outweigh_core(self):
        """Test that core fields decide before pre-release."""
        assert compare("1.0.1-alpha", "1.0.0") is Ordering.GREATER

    def test_build_metadata_ignored(self):
        """Test that build metadata is ignored in comparison."""
        assert compare(parse_version("1.0.0+001"), parse_version("1.0.0+002")) is Ordering.EQUAL
        assert compare("1.0.0+build", "1.0.0") is Ordering.EQUAL

    def test_mixed_string_and_version(self):
        """Test comparison with mixed string and Version."""
        v = parse_version("1.0.0")
        assert compare(v, "2.0.0") is Ordering.LESS
        assert compare("1.0.0", v) is Ordering.EQUAL

    def test_invalid_string(self):
        """Test that invalid strings raise ParseError."""
        with pytest.raises(ParseError):
            compare("1.0", "1.0.0")

    def test_compare_versions_returns_int(self):
        """Test the integer-returning alias."""
        assert compare_versions("1.0.0", "2.0.0") == -1
        assert compare_versions("2.0.0", "2.0.0") == 0
        assert compare_versions("2.0.0", "1.0.0") == 1


class TestPrereleaseOrdering:
    """Tests for pre-release ordering rules."""

    def test_semver_precedence_chain(self):
        """Test the precedence example from the SemVer specification."""
        for lower, higher in zip(SEMVER_CHAIN, SEMVER_CHAIN[1:]):
            assert compare(lower, higher) is Ordering.LESS, f"{lower} should be < {higher}"
            assert compare(higher, lower) is Ordering.GREATER

    def test_numeric_prerelease_parts(self):
        """Test numeric pre-release parts comparison."""
        assert compare("1.0.0-1", "1.0.0-2") is Ordering.LESS
        assert compare("1.0.0-10", "1.0.0-2") is Ordering.GREATER

    def test_numeric_before_alphanumeric(self):
        """Test that numeric identifiers sort before alphanumeric ones."""
        assert compare("1.0.0-999", "1.0.0-a") is Ordering.LESS
        assert compare("1.0.0-alpha.1", "1.0.0-alpha.a") is Ordering.LESS

    def test_ascii_ordering(self):
        """Test that alphanumeric identifiers compare by ASCII code point."""
        # Uppercase letters sort before lowercase in ASCII
        assert compare("1.0.0-Beta", "1.0.0-alpha") is Ordering.LESS
        assert compare("1.0.0-rc-1", "1.0.0-rc1") is Ordering.LESS

    def test_prefix_is_lower(self):
        """Test that a shorter prefix has lower precedence."""
        assert compare("1.0.0-alpha", "1.0.0-alpha.0") is Ordering.LESS

    def test_no_named_prerelease_aliases(self):
        """Test that 'a' and 'b' are plain identifiers, not alpha and beta."""
        assert compare("1.0.0-b", "1.0.0-alpha") is Ordering.GREATER


class TestRichComparisons:
    """Tests for the Version ordering operators."""

    def test_operators_follow_precedence(self):
        """Test <, <=, > and >= on Version objects."""
        a = parse_version("1.0.0-rc.1")
        b = parse_version("1.0.0")
        assert a < b
        assert a <= b
        assert b > a
        assert b >= a

    def test_build_metadata_neither_less_nor_equal(self):
        """Test that differing build metadata gives equal precedence but unequal values."""
        a = parse_version("1.0.0+a")
        b = parse_version("1.0.0+b")
        assert not a < b
        assert not a > b
        assert a <= b and a >= b
        assert a != b

    def test_comparison_with_other_types(self):
        """Test that ordering against non-versions is unsupported."""
        with pytest.raises(TypeError):
            parse_version("1.0.0") < "1.0.0"  # noqa: B015


class TestVersionKey:
    """Tests for version_key and sort_versions."""

    def test_sorting_basic(self):
        """Test sorting basic versions."""
        versions = ["2.0.0", "1.0.0", "1.1.0", "1.0.1"]
        assert sorted(versions, key=version_key) == ["1.0.0", "1.0.1", "1.1.0", "2.0.0"]

    def test_sorting_semver_chain(self):
        """Test that sorting a shuffled chain restores precedence order."""
        shuffled = list(reversed(SEMVER_CHAIN))
        shuffled[2], shuffled[5] = shuffled[5], shuffled[2]
        assert sorted(shuffled, key=version_key) == SEMVER_CHAIN

    def test_build_metadata_gives_equal_keys(self):
        """Test that build metadata does not change the key."""
        assert version_key("1.0.0+a") == version_key("1.0.0+b")

    def test_sort_versions(self):
        """Test sort_versions parses and orders."""
        result = sort_versions(["1.0.0", "1.0.0-rc.1", "0.9.0"])
        assert [str(v) for v in result] == ["0.9.0", "1.0.0-rc.1", "1.0.0"]

    def test_sort_versions_reverse(self):
        """Test sort_versions with reverse=True."""
        result = sort_versions(["1.0.0", "2.0.0"], reverse=True)
        assert [str(v) for v in result] == ["2.0.0", "1.0.0"]

    def test_sort_versions_is_stable(self):
        """Test that equal-precedence versions keep input order."""
        result = sort_versions(["1.0.0+b", "1.0.0+a"])
        assert [str(v) for v in result] == ["1.0.0+b", "1.0.0+a"]


class TestTransitivity:
    """Tests for comparison transitivity."""

    def test_transitivity(self):
        """Test that every pair in the chain is ordered consistently."""
        for i, lower in enumerate(SEMVER_CHAIN):
            for higher in SEMVER_CHAIN[i + 1 :]:
                assert compare(lower, higher) is Ordering.LESS

    def test_reflexivity(self):
        """Test that comparison is reflexive: a == a."""
        for v in ["1.0.0", "1.0.0-alpha", "1.0.0+build"]:
            assert compare(v, v) is Ordering.EQUAL
