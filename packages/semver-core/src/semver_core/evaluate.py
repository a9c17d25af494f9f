# SPDX-License-Identifier: MIT
"""Checking versions against constraint trees.

Pre-release versions are hidden by default. A candidate such as
``1.2.3-beta`` only satisfies a comparator set when one of the versions
named in that set is itself a pre-release of ``1.2.3``. Each ``||`` branch
is judged on its own bounds.
"""

from __future__ import annotations

from typing import Iterator, Union

from .constraint import And, Comparator, Constraint, Or, Range, parse_constraint
from .errors import ConstraintDepthError
from .semver import Version, parse_version

#: Deepest nesting accepted from a hand-built tree. Parsed trees use at most 3.
MAX_DEPTH = 64


def _check_depth(node: Constraint, depth: int) -> None:
    if depth > MAX_DEPTH:
        # Rendering the remaining subtree would recurse just as deep.
        text = type(node).__name__
        raise ConstraintDepthError(
            text, fragment=text, offset=0,
            message=f"Constraint nested deeper than {MAX_DEPTH} levels",
        )


def _bounds(node: Constraint, depth: int) -> Iterator[Version]:
    """Yield the versions named by a comparator set, skipping nested ``Or``s."""
    _check_depth(node, depth)
    if isinstance(node, Comparator):
        yield node.version
    elif isinstance(node, Range):
        yield node.low
        yield node.high
    elif isinstance(node, And):
        for child in node.children:
            yield from _bounds(child, depth + 1)
    elif isinstance(node, Or):
        return
    else:
        raise TypeError(f"Not a constraint node: {node!r}")


def _holds(node: Constraint, version: Version, depth: int) -> bool:
    """Test every bound of a comparator set."""
    _check_depth(node, depth)
    if isinstance(node, (Comparator, Range)):
        return node.test(version)
    if isinstance(node, And):
        return all(_holds(child, version, depth + 1) for child in node.children)
    if isinstance(node, Or):
        # A nested Or is a set of independent groups
        return any(_evaluate(child, version, depth + 1) for child in node.children)
    raise TypeError(f"Not a constraint node: {node!r}")


def _evaluate(node: Constraint, version: Version, depth: int) -> bool:
    _check_depth(node, depth)
    if isinstance(node, Or):
        return any(_evaluate(child, version, depth + 1) for child in node.children)

    if not _holds(node, version, depth):
        return False
    if not version.prerelease:
        return True
    return any(
        bound.prerelease and bound.core == version.core
        for bound in _bounds(node, depth)
    )


def satisfies(
    version: Union[str, Version],
    constraint: Union[str, Constraint],
) -> bool:
    """Check whether a version satisfies a constraint.

    Args:
        version: Version string or Version object
        constraint: Range string or parsed constraint tree

    Returns:
        True if the version is accepted

    Raises:
        ParseError: If the version string is invalid
        ConstraintError: If the constraint string is invalid, or a
            hand-built tree is nested more than MAX_DEPTH levels

    Examples:
        >>> satisfies("1.2.5", "^1.2.3")
        True
        >>> satisfies("2.0.0", "^1.2.3")
        False
        >>> satisfies("1.2.3-beta", ">=1.2.3")
        False
        >>> satisfies("1.2.3-beta", ">=1.2.3-alpha")
        True
    """
    v = parse_version(version) if isinstance(version, str) else version
    tree = parse_constraint(constraint) if isinstance(constraint, str) else constraint
    return _evaluate(tree, v, 0)
