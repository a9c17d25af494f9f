# SPDX-License-Identifier: MIT
"""Unit tests for identifier classification."""

import pytest

from semver_core import (
    EmptyIdentifierError,
    InvalidIdentifierError,
    LeadingZeroError,
    classify_identifier,
    validate_build_identifier,
)


class TestClassifyIdentifier:
    """Tests for classify_identifier function."""

    @pytest.mark.parametrize(
        "token, expected",
        [
            ("0", 0),
            ("7", 7),
            ("11", 11),
            ("alpha", "alpha"),
            ("0a", "0a"),
            ("007a", "007a"),
            ("-", "-"),
            ("x-1", "x-1"),
        ],
    )
    def test_classification(self, token, expected):
        """Test that all-digit tokens become ints and others stay text."""
        result = classify_identifier(token)
        assert result == expected
        assert type(result) is type(expected)

    def test_long_numeric_identifier(self):
        """Test numeric identifiers past the int/str digit limit."""
        assert classify_identifier("1" + "0" * 4400) == 10**4400

    def test_leading_zero(self):
        """Test that '007' is rejected rather than read as 7."""
        with pytest.raises(LeadingZeroError):
            classify_identifier("007")

    def test_empty(self):
        """Test that an empty token is rejected."""
        with pytest.raises(EmptyIdentifierError):
            classify_identifier("")

    @pytest.mark.parametrize("token", ["a_b", "a.b", "ü", "1 2", "+"])
    def test_invalid_characters(self, token):
        """Test that characters outside [0-9A-Za-z-] are rejected."""
        with pytest.raises(InvalidIdentifierError):
            classify_identifier(token)

    def test_non_ascii_digits(self):
        """Test that non-ASCII digits are not numeric."""
        with pytest.raises(InvalidIdentifierError):
            classify_identifier("١")

    def test_error_reports_context(self):
        """Test that errors carry the surrounding text and offset."""
        with pytest.raises(InvalidIdentifierError) as exc_info:
            classify_identifier("a_b", "1.0.0-a_b", 6)
        assert exc_info.value.text == "1.0.0-a_b"
        assert exc_info.value.offset == 6
        assert exc_info.value.fragment == "a_b"


class TestValidateBuildIdentifier:
    """Tests for validate_build_identifier function."""

    def test_leading_zero_allowed(self):
        """Test that build identifiers keep leading zeros."""
        assert validate_build_identifier("001") == "001"

    def test_invalid_character(self):
        """Test that build identifiers follow the character rules."""
        with pytest.raises(InvalidIdentifierError):
            validate_build_identifier("b#1")

    def test_empty(self):
        """Test that an empty build identifier is rejected."""
        with pytest.raises(EmptyIdentifierError):
            validate_build_identifier("")
