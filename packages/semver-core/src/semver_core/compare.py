# SPDX-License-Identifier: MIT
"""Version comparison following SemVer 2.0.0 precedence.

Core fields compare numerically, a release outranks any pre-release of the
same core, and pre-release identifiers compare pairwise: numbers
numerically, text by ASCII code point, numbers before text, and a shorter
prefix before a longer sequence. Build metadata is ignored.
"""

from __future__ import annotations

from enum import IntEnum
from typing import Iterable, Union

from .identifiers import Identifier
from .semver import Version, parse_version


class Ordering(IntEnum):
    """Result of comparing two versions."""

    LESS = -1
    EQUAL = 0
    GREATER = 1


def _sign(a: object, b: object) -> int:
    # Callers only pass pairs of ints or pairs of strs.
    if a == b:
        return 0
    return -1 if a < b else 1  # type: ignore[operator]


def _compare_identifier(a: Identifier, b: Identifier) -> int:
    a_numeric = isinstance(a, int)
    b_numeric = isinstance(b, int)
    if a_numeric and b_numeric:
        return _sign(a, b)
    if a_numeric:
        # Numeric < alphanumeric per SemVer
        return -1
    if b_numeric:
        return 1
    return _sign(a, b)


def _compare_prerelease(
    pre1: tuple[Identifier, ...],
    pre2: tuple[Identifier, ...],
) -> int:
    """Compare two pre-release sequences.

    Returns:
        -1 if pre1 < pre2
        0 if pre1 == pre2
        1 if pre1 > pre2

    Per SemVer: a version without pre-release has higher precedence
    than one with pre-release (1.0.0 > 1.0.0-alpha).
    """
    if not pre1 and not pre2:
        return 0
    if not pre1:
        return 1
    if not pre2:
        return -1

    for p1, p2 in zip(pre1, pre2):
        result = _compare_identifier(p1, p2)
        if result:
            return result

    # All compared parts equal - longer pre-release has higher precedence
    return _sign(len(pre1), len(pre2))


def _coerce(version: Union[str, Version]) -> Version:
    return parse_version(version) if isinstance(version, str) else version


def compare(version1: Union[str, Version], version2: Union[str, Version]) -> Ordering:
    """Compare two semantic versions by precedence.

    Args:
        version1: First version (string or Version object)
        version2: Second version (string or Version object)

    Returns:
        Ordering.LESS, Ordering.EQUAL or Ordering.GREATER

    Raises:
        ParseError: If either version string is invalid

    Examples:
        >>> compare("1.0.0", "2.0.0")
        <Ordering.LESS: -1>
        >>> compare("1.0.0-alpha.beta", "1.0.0-beta")
        <Ordering.LESS: -1>
        >>> compare("1.0.0+001", "1.0.0+002")
        <Ordering.EQUAL: 0>
    """
    v1 = _coerce(version1)
    v2 = _coerce(version2)

    for attr in ("major", "minor", "patch"):
        result = _sign(getattr(v1, attr), getattr(v2, attr))
        if result:
            return Ordering(result)

    return Ordering(_compare_prerelease(v1.prerelease, v2.prerelease))


def compare_versions(version1: Union[str, Version], version2: Union[str, Version]) -> int:
    """Compare two semantic versions, returning -1, 0 or 1."""
    return int(compare(version1, version2))


def version_key(version: Union[str, Version]) -> tuple:
    """Return a sort key for a version, suitable for sorting.

    Keys order exactly as ``compare`` does, so versions differing only in
    build metadata get equal keys.

    Examples:
        >>> sorted(["1.0.0", "2.0.0", "1.0.0-alpha"], key=version_key)
        ['1.0.0-alpha', '1.0.0', '2.0.0']
    """
    v = _coerce(version)

    # Release sorts after every pre-release of the same core
    if not v.prerelease:
        prerelease_key: tuple = (1,)
    else:
        parts = tuple(
            (0, part, "") if isinstance(part, int) else (1, 0, part)
            for part in v.prerelease
        )
        prerelease_key = (0, parts)

    return (v.major, v.minor, v.patch, prerelease_key)


def sort_versions(
    versions: Iterable[Union[str, Version]],
    reverse: bool = False,
) -> list[Version]:
    """Parse and sort versions by precedence.

    The sort is stable, so versions of equal precedence keep their input order.
    """
    return sorted((_coerce(v) for v in versions), key=version_key, reverse=reverse)
