# SPDX-License-Identifier: MIT
"""Version increments.

Bumping a pre-release toward the release it precedes only drops the
pre-release tag: ``1.0.0-rc.1`` bumped to the next major is ``1.0.0``, not
``2.0.0``. Every bump clears build metadata and returns a version of
strictly greater precedence.
"""

from __future__ import annotations

from enum import Enum
from typing import Optional, Union

from .errors import BumpError
from .identifiers import Identifier, split_identifiers
from .semver import Version, parse_version


class BumpKind(str, Enum):
    """The part of a version to increment."""

    MAJOR = "major"
    MINOR = "minor"
    PATCH = "patch"
    PRERELEASE = "prerelease"

    @classmethod
    def from_name(cls, name: str) -> "BumpKind":
        """Look up a bump kind by its case-insensitive name.

        Raises:
            ValueError: If the name is not a known bump kind
        """
        try:
            return cls(name.strip().lower())
        except ValueError:
            choices = ", ".join(kind.value for kind in cls)
            raise ValueError(f"Invalid bump type: {name!r} (expected one of {choices})") from None


def bump_major(version: Version) -> Version:
    """Return the next major version.

    Examples:
        >>> str(bump_major(parse_version("1.2.3")))
        '2.0.0'
        >>> str(bump_major(parse_version("2.0.0-rc.1")))
        '2.0.0'
    """
    if version.prerelease and version.minor == 0 and version.patch == 0:
        return Version(version.major, 0, 0)
    return Version(version.major + 1, 0, 0)


def bump_minor(version: Version) -> Version:
    """Return the next minor version, resetting patch."""
    if version.prerelease and version.patch == 0:
        return Version(version.major, version.minor, 0)
    return Version(version.major, version.minor + 1, 0)


def bump_patch(version: Version) -> Version:
    """Return the next patch version."""
    if version.prerelease:
        return Version(version.major, version.minor, version.patch)
    return Version(version.major, version.minor, version.patch + 1)


def _parse_template(identifier: Optional[str]) -> tuple[Identifier, ...]:
    if not identifier:
        return ()
    return split_identifiers(identifier, identifier, 0)


def bump_prerelease(version: Version, identifier: Optional[str] = None) -> Version:
    """Return the next pre-release version.

    Args:
        version: The version to increment
        identifier: Optional dot-separated pre-release line (e.g., "rc" or
            "beta.fast"); the counter is kept after these identifiers

    Returns:
        A new Version:
        - a release gets the next patch with pre-release ``<identifier>.0``
          (or just ``0``)
        - a pre-release on another line switches to ``<identifier>.0``
        - otherwise a trailing numeric identifier is incremented, or ``0``
          is appended

    Raises:
        ParseError: If the identifier is not a valid pre-release identifier
        BumpError: If switching lines would not increase precedence

    Examples:
        >>> str(bump_prerelease(parse_version("1.2.3")))
        '1.2.4-0'
        >>> str(bump_prerelease(parse_version("1.2.3"), "rc"))
        '1.2.4-rc.0'
        >>> str(bump_prerelease(parse_version("1.0.0-alpha.1")))
        '1.0.0-alpha.2'
        >>> str(bump_prerelease(parse_version("1.0.0-alpha.1"), "beta"))
        '1.0.0-beta.0'
    """
    template = _parse_template(identifier)

    if not version.prerelease:
        return Version(version.major, version.minor, version.patch + 1, template + (0,))

    pre = version.prerelease
    if template and pre[: len(template)] != template:
        bumped = Version(version.major, version.minor, version.patch, template + (0,))
        if not bumped > version:
            raise BumpError(
                f"Cannot bump {version} to pre-release {identifier!r}: "
                f"{bumped} does not come after {version}"
            )
        return bumped

    last = pre[-1]
    if isinstance(last, int) and len(pre) > len(template):
        new_pre = pre[:-1] + (last + 1,)
    else:
        new_pre = pre + (0,)
    return Version(version.major, version.minor, version.patch, new_pre)


def bump(
    version: Union[str, Version],
    kind: Union[str, BumpKind],
    identifier: Optional[str] = None,
) -> Version:
    """Increment a version.

    Args:
        version: Version string or Version object
        kind: What to increment (a BumpKind or its name)
        identifier: Pre-release identifier, used only for PRERELEASE

    Returns:
        A new Version without build metadata

    Examples:
        >>> str(bump("1.2.3", BumpKind.MAJOR))
        '2.0.0'
        >>> str(bump("1.2.3-alpha", "minor"))
        '1.3.0'
    """
    v = parse_version(version) if isinstance(version, str) else version
    if not isinstance(kind, BumpKind):
        kind = BumpKind.from_name(kind)

    if kind is BumpKind.MAJOR:
        return bump_major(v)
    if kind is BumpKind.MINOR:
        return bump_minor(v)
    if kind is BumpKind.PATCH:
        return bump_patch(v)
    return bump_prerelease(v, identifier)
