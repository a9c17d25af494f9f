# SPDX-License-Identifier: MIT
"""Semantic version parsing, comparison, increments and range matching.

This package implements the Semantic Versioning 2.0.0 grammar and
precedence rules, plus npm-style range expressions.

Example:
    >>> from semver_core import parse_version, compare, bump, satisfies
    >>>
    >>> version = parse_version("1.2.3-alpha.1+build.456")
    >>> version.major
    1
    >>> version.prerelease
    ('alpha', 1)
    >>>
    >>> compare("1.0.0", "2.0.0")
    <Ordering.LESS: -1>
    >>>
    >>> str(bump(version, "minor"))
    '1.3.0'
    >>>
    >>> satisfies("1.4.0", "^1.2.3")
    True
"""

__version__ = "0.1.0"

from .errors import (
    SemverError,
    ParseError,
    MissingComponentError,
    NonNumericCoreError,
    LeadingZeroError,
    InvalidIdentifierError,
    EmptyIdentifierError,
    ConstraintError,
    UnknownOperatorError,
    MalformedRangeError,
    InvalidVersionLiteralError,
    ConstraintDepthError,
    BumpError,
)
from .identifiers import (
    Identifier,
    classify_identifier,
    validate_build_identifier,
)
from .semver import (
    Version,
    parse_version,
    is_valid_semver,
    to_string,
)
from .compare import (
    Ordering,
    compare,
    compare_versions,
    version_key,
    sort_versions,
)
from .bump import (
    BumpKind,
    bump,
    bump_major,
    bump_minor,
    bump_patch,
    bump_prerelease,
)
from .constraint import (
    Operator,
    Comparator,
    Range,
    And,
    Or,
    Constraint,
    parse_constraint,
)
from .evaluate import (
    MAX_DEPTH,
    satisfies,
)

__all__ = [
    # Errors
    "SemverError",
    "ParseError",
    "MissingComponentError",
    "NonNumericCoreError",
    "LeadingZeroError",
    "InvalidIdentifierError",
    "EmptyIdentifierError",
    "ConstraintError",
    "UnknownOperatorError",
    "MalformedRangeError",
    "InvalidVersionLiteralError",
    "ConstraintDepthError",
    "BumpError",
    # Identifiers
    "Identifier",
    "classify_identifier",
    "validate_build_identifier",
    # Version parsing
    "Version",
    "parse_version",
    "is_valid_semver",
    "to_string",
    # Version comparison
    "Ordering",
    "compare",
    "compare_versions",
    "version_key",
    "sort_versions",
    # Increments
    "BumpKind",
    "bump",
    "bump_major",
    "bump_minor",
    "bump_patch",
    "bump_prerelease",
    # Constraints
    "Operator",
    "Comparator",
    "Range",
    "And",
    "Or",
    "Constraint",
    "parse_constraint",
    "satisfies",
    "MAX_DEPTH",
]
