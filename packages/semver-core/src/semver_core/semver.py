# SPDX-License-Identifier: MIT
"""Semantic version parsing.

Supports MAJOR.MINOR.PATCH format with optional pre-release and build metadata:
- Pre-release: -alpha, -alpha.1, -beta, -beta.2, -rc, -rc.1, -x-y-z
- Build metadata: +build, +build.123, +20240101, +001

The parser is strict: no surrounding whitespace, no ``v`` prefix and no
partial versions. Each violation raises a specific ParseError subclass.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from .errors import (
    LeadingZeroError,
    MissingComponentError,
    NonNumericCoreError,
    ParseError,
)
from .identifiers import (
    IDENTIFIER_CHARS,
    Identifier,
    digits_to_int,
    format_identifiers,
    int_to_digits,
    is_numeric,
    split_identifiers,
)

CORE_FIELDS = ("major", "minor", "patch")


@dataclass(frozen=True, slots=True)
class Version:
    """Represents a parsed semantic version.

    Equality compares every field, build metadata included. Ordering with
    ``<``, ``<=``, ``>`` and ``>=`` follows SemVer precedence, which ignores
    build metadata, so two versions may be neither ``<`` nor ``==``.

    Attributes:
        major: Major version number (breaking changes)
        minor: Minor version number (new features, backward compatible)
        patch: Patch version number (bug fixes, backward compatible)
        prerelease: Pre-release identifiers, ints for numeric ones
            (e.g., ("alpha", 1)); empty for a release version
        build: Build metadata identifiers as text (e.g., ("build", "001"))
    """

    major: int
    minor: int
    patch: int
    prerelease: tuple[Identifier, ...] = ()
    build: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        for name in CORE_FIELDS:
            value = getattr(self, name)
            if not isinstance(value, int) or isinstance(value, bool) or value < 0:
                raise ValueError(f"{name} must be a non-negative integer, got {value!r}")
        object.__setattr__(self, "prerelease", tuple(self.prerelease))
        object.__setattr__(self, "build", tuple(self.build))
        for identifier in self.prerelease:
            if isinstance(identifier, bool) or not isinstance(identifier, (int, str)):
                raise ValueError(f"Invalid pre-release identifier: {identifier!r}")
            if isinstance(identifier, int):
                if identifier < 0:
                    raise ValueError(f"Invalid pre-release identifier: {identifier!r}")
            elif not _is_identifier_text(identifier) or is_numeric(identifier):
                raise ValueError(f"Invalid pre-release identifier: {identifier!r}")
        for identifier in self.build:
            if not isinstance(identifier, str) or not _is_identifier_text(identifier):
                raise ValueError(f"Invalid build identifier: {identifier!r}")

    def __str__(self) -> str:
        """Return the canonical string representation of the version."""
        version = self.base_version
        if self.prerelease:
            version += f"-{format_identifiers(self.prerelease)}"
        if self.build:
            version += f"+{format_identifiers(self.build)}"
        return version

    def __lt__(self, other: Any) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return _precedence(self, other) < 0

    def __le__(self, other: Any) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return _precedence(self, other) <= 0

    def __gt__(self, other: Any) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return _precedence(self, other) > 0

    def __ge__(self, other: Any) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return _precedence(self, other) >= 0

    @property
    def is_prerelease(self) -> bool:
        """Return True if this is a pre-release version."""
        return bool(self.prerelease)

    @property
    def base_version(self) -> str:
        """Return the base version without pre-release or build metadata."""
        return ".".join(int_to_digits(value) for value in self.core)

    @property
    def core(self) -> tuple[int, int, int]:
        """Return the (major, minor, patch) triple."""
        return (self.major, self.minor, self.patch)


def _is_identifier_text(identifier: str) -> bool:
    return bool(identifier) and all(char in IDENTIFIER_CHARS for char in identifier)


def _precedence(a: Version, b: Version) -> int:
    from .compare import compare

    return int(compare(a, b))


def parse_numeric_component(
    field: str,
    name: str,
    text: str,
    offset: int,
) -> int:
    """Parse one of the major, minor or patch fields.

    Raises:
        MissingComponentError: If the field is empty
        NonNumericCoreError: If the field has non-digit characters
        LeadingZeroError: If the field has a leading zero
    """
    if not field:
        raise MissingComponentError(
            text, fragment=field, offset=offset,
            message=f"Missing {name} version in {text!r}",
        )
    if not is_numeric(field):
        raise NonNumericCoreError(
            text, fragment=field, offset=offset,
            message=f"The {name} version {field!r} is not a number",
        )
    if len(field) > 1 and field[0] == "0":
        raise LeadingZeroError(
            text, fragment=field, offset=offset,
            message=f"The {name} version {field!r} has a leading zero",
        )
    return digits_to_int(field)


def _parse_core(core: str, text: str) -> tuple[int, int, int]:
    # The third field absorbs extra dots, so "1.2.3.4" fails on patch "3.4".
    fields = core.split(".", 2)
    if len(fields) < 3:
        raise MissingComponentError(
            text, fragment=core, offset=0,
            message=f"Expected MAJOR.MINOR.PATCH, got {core!r}",
        )
    values = []
    position = 0
    for name, field in zip(CORE_FIELDS, fields):
        values.append(parse_numeric_component(field, name, text, position))
        position += len(field) + 1
    major, minor, patch = values
    return major, minor, patch


def parse_version(version_string: str) -> Version:
    """Parse a semantic version string into a Version object.

    Args:
        version_string: A string following semantic versioning format
            (MAJOR.MINOR.PATCH[-prerelease][+build])

    Returns:
        A Version object with parsed components

    Raises:
        ParseError: If the string does not follow semantic versioning. The
            concrete subclass names the violated rule.

    Examples:
        >>> parse_version("1.2.3")
        Version(major=1, minor=2, patch=3, prerelease=(), build=())

        >>> parse_version("1.0.0-alpha.1")
        Version(major=1, minor=0, patch=0, prerelease=('alpha', 1), build=())

        >>> parse_version("2.0.0-rc.1+build.456")
        Version(major=2, minor=0, patch=0, prerelease=('rc', 1), build=('build', '456'))
    """
    if not isinstance(version_string, str):
        raise ParseError(
            str(version_string),
            message=f"Version must be a string, got {type(version_string).__name__}",
        )

    text = version_string
    plus = text.find("+")
    head = text if plus < 0 else text[:plus]
    dash = head.find("-")
    core = head if dash < 0 else head[:dash]

    major, minor, patch = _parse_core(core, text)

    prerelease: tuple[Identifier, ...] = ()
    if dash >= 0:
        prerelease = split_identifiers(head[dash + 1 :], text, dash + 1)

    build: tuple[str, ...] = ()
    if plus >= 0:
        build = tuple(
            str(identifier)
            for identifier in split_identifiers(text[plus + 1 :], text, plus + 1, build=True)
        )

    return Version(major, minor, patch, prerelease, build)


def is_valid_semver(version_string: str) -> bool:
    """Check if a string is a valid semantic version.

    Args:
        version_string: The string to validate

    Returns:
        True if the string is a valid semantic version, False otherwise

    Examples:
        >>> is_valid_semver("1.0.0")
        True
        >>> is_valid_semver("1.0")
        False
        >>> is_valid_semver("1.0.0-alpha")
        True
    """
    if not isinstance(version_string, str):
        return False
    try:
        parse_version(version_string)
    except ParseError:
        return False
    return True


def to_string(version: Version) -> str:
    """Return the canonical ``major.minor.patch[-pre][+build]`` form."""
    return str(version)
