# SPDX-License-Identifier: MIT
"""Exception types raised by the semver engine.

Every error carries the text being parsed, the offending fragment and the
offset of that fragment in the text, so callers can point at the problem.
"""

from __future__ import annotations


class SemverError(Exception):
    """Base class for all semver engine errors."""

    pass


class _LocatedError(SemverError, ValueError):
    """An error that points at a fragment of the input text."""

    default_message = "Invalid input"

    def __init__(
        self,
        text: str,
        fragment: str = "",
        offset: int = 0,
        message: str = "",
    ):
        self.text = text
        self.fragment = fragment
        self.offset = offset
        self.message = message or f"{self.default_message}: {text!r}"
        super().__init__(self.message)

    def pointer(self) -> str:
        """Return the input text with a caret line under the offending fragment."""
        width = max(len(self.fragment), 1)
        return f"{self.text}\n{' ' * self.offset}{'^' * width}"


# =============================================================================
# Version parsing
# =============================================================================


class ParseError(_LocatedError):
    """Raised when a string does not follow the semantic versioning grammar."""

    default_message = "Invalid semantic version"


class MissingComponentError(ParseError):
    """Fewer than three core fields, or an empty core field."""

    default_message = "Missing version component"


class NonNumericCoreError(ParseError):
    """A major, minor or patch field contains non-digit characters."""

    default_message = "Non-numeric version component"


class LeadingZeroError(ParseError):
    """A numeric field or identifier has a leading zero."""

    default_message = "Leading zero in numeric identifier"


class InvalidIdentifierError(ParseError):
    """An identifier contains characters outside [0-9A-Za-z-]."""

    default_message = "Invalid identifier"


class EmptyIdentifierError(ParseError):
    """An identifier between separators is empty."""

    default_message = "Empty identifier"


# =============================================================================
# Constraint parsing
# =============================================================================


class ConstraintError(_LocatedError):
    """Raised when a range expression cannot be parsed or evaluated."""

    default_message = "Invalid version constraint"


class UnknownOperatorError(ConstraintError):
    """A comparator uses an operator outside =, <, <=, >, >=, ^, ~."""

    default_message = "Unknown operator"


class MalformedRangeError(ConstraintError):
    """A hyphen range is missing a side or is mixed with other comparators."""

    default_message = "Malformed hyphen range"


class InvalidVersionLiteralError(ConstraintError):
    """A version literal embedded in a constraint failed to parse.

    Attributes:
        parse_error: The underlying ParseError, with offsets relative to the
            literal rather than the whole constraint.
    """

    default_message = "Invalid version in constraint"

    def __init__(
        self,
        text: str,
        parse_error: ParseError,
        offset: int = 0,
    ):
        self.parse_error = parse_error
        super().__init__(
            text,
            fragment=parse_error.fragment,
            offset=offset + parse_error.offset,
            message=parse_error.message,
        )


class ConstraintDepthError(ConstraintError):
    """A constraint tree is nested deeper than the evaluator allows."""

    default_message = "Constraint tree nested too deeply"


# =============================================================================
# Increments
# =============================================================================


class BumpError(SemverError, ValueError):
    """Raised when a bump cannot produce a greater version."""

    pass
