# SPDX-License-Identifier: MIT
"""Range expressions over semantic versions.

A constraint is a small tree built from four node types:

- ``Comparator``: an operator applied to one version (``>=1.2.3``, ``^1.2.3``)
- ``Range``: an inclusive hyphen range (``1.2.3 - 2.3.4``)
- ``And``: whitespace-joined comparators, all of which must hold
- ``Or``: ``||``-joined clauses, any of which must hold

Partial versions and wildcards (``1.2``, ``1.x``, ``*``) are expanded to
explicit comparators while parsing, so every version in a tree is complete.
``str()`` of a tree renders text that parses back to an equal tree.

Example:
    >>> str(parse_constraint("^1.2 || 2.x"))
    '>=1.2.0 <2.0.0 || >=2.0.0 <3.0.0'
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from typing import Iterator, NamedTuple, Optional, Union

from .compare import compare
from .errors import (
    ConstraintError,
    InvalidVersionLiteralError,
    MalformedRangeError,
    MissingComponentError,
    NonNumericCoreError,
    ParseError,
    UnknownOperatorError,
)
from .semver import CORE_FIELDS, Version, parse_numeric_component, parse_version

_OPERATOR_PATTERN = re.compile(r"[<>=~^!]*")
_TOKEN_PATTERN = re.compile(r"\S+")
_WILDCARDS = frozenset({"*", "x", "X"})


class Operator(str, Enum):
    """Comparison operators accepted in a comparator."""

    EQ = "="
    LT = "<"
    LE = "<="
    GT = ">"
    GE = ">="
    CARET = "^"
    TILDE = "~"


def caret_upper(version: Version) -> Version:
    """Return the exclusive upper bound of ``^version``.

    The most significant non-zero core field stays fixed.
    """
    if version.major:
        return Version(version.major + 1, 0, 0)
    if version.minor:
        return Version(0, version.minor + 1, 0)
    return Version(0, 0, version.patch + 1)


def tilde_upper(version: Version) -> Version:
    """Return the exclusive upper bound of ``~version``."""
    return Version(version.major, version.minor + 1, 0)


# =============================================================================
# Constraint tree
# =============================================================================


@dataclass(frozen=True, slots=True)
class Comparator:
    """A single operator applied to a complete version."""

    operator: Operator
    version: Version

    def __str__(self) -> str:
        return f"{self.operator.value}{self.version}"

    def test(self, version: Version) -> bool:
        """Apply the operator, ignoring pre-release visibility."""
        op = self.operator
        if op is Operator.CARET:
            return compare(version, self.version) >= 0 and compare(
                version, caret_upper(self.version)
            ) < 0
        if op is Operator.TILDE:
            return compare(version, self.version) >= 0 and compare(
                version, tilde_upper(self.version)
            ) < 0

        result = compare(version, self.version)
        if op is Operator.EQ:
            return result == 0
        if op is Operator.LT:
            return result < 0
        if op is Operator.LE:
            return result <= 0
        if op is Operator.GT:
            return result > 0
        return result >= 0


@dataclass(frozen=True, slots=True)
class Range:
    """An inclusive hyphen range."""

    low: Version
    high: Version

    def __str__(self) -> str:
        return f"{self.low} - {self.high}"

    def test(self, version: Version) -> bool:
        """Check both inclusive bounds, ignoring pre-release visibility."""
        return compare(self.low, version) <= 0 and compare(version, self.high) <= 0


@dataclass(frozen=True, slots=True)
class And:
    """Constraints that must all hold."""

    children: tuple["Constraint", ...]

    def __str__(self) -> str:
        return " ".join(str(child) for child in self.children)


@dataclass(frozen=True, slots=True)
class Or:
    """Constraints of which at least one must hold."""

    children: tuple["Constraint", ...]

    def __str__(self) -> str:
        return " || ".join(str(child) for child in self.children)


Constraint = Union[Comparator, Range, And, Or]

ANY = Comparator(Operator.GE, Version(0, 0, 0))
NOTHING = Comparator(Operator.LT, Version(0, 0, 0))


# =============================================================================
# Parsing
# =============================================================================


class _Partial(NamedTuple):
    """A version literal that may be missing trailing fields."""

    major: Optional[int]
    minor: Optional[int]
    version: Optional[Version]
    wildcard: bool

    @property
    def fixed(self) -> int:
        """Number of leading core fields that were given."""
        if self.version is not None:
            return 3
        if self.major is None:
            return 0
        return 1 if self.minor is None else 2

    @property
    def low(self) -> Version:
        return Version(self.major or 0, self.minor or 0, 0)

    @property
    def next_bound(self) -> Version:
        """The first version above every version this partial matches."""
        if self.minor is None:
            return Version(self.major + 1, 0, 0)  # type: ignore[operator]
        return Version(self.major, self.minor + 1, 0)  # type: ignore[arg-type]


def _parse_partial_literal(literal: str) -> _Partial:
    cut = len(literal)
    for separator in ("-", "+"):
        index = literal.find(separator)
        if 0 <= index < cut:
            cut = index
    core = literal[:cut]
    fields = core.split(".")

    if len(fields) == 3 and not _WILDCARDS.intersection(fields):
        version = parse_version(literal)
        return _Partial(version.major, version.minor, version, False)

    if cut < len(literal):
        error = MissingComponentError if len(fields) < 3 else NonNumericCoreError
        raise error(
            literal, fragment=core, offset=0,
            message=(
                f"Pre-release and build metadata need a full version, got {literal!r}"
            ),
        )
    if len(fields) > 3:
        extra = ".".join(fields[2:])
        raise NonNumericCoreError(
            literal, fragment=extra, offset=len(core) - len(extra),
            message=f"The patch version {extra!r} is not a number",
        )

    values: list[Optional[int]] = []
    position = 0
    wildcard = False
    for name, field in zip(CORE_FIELDS, fields):
        if field in _WILDCARDS:
            wildcard = True
            values.append(None)
        elif wildcard:
            raise NonNumericCoreError(
                literal, fragment=field, offset=position,
                message=f"The {name} version {field!r} follows a wildcard",
            )
        else:
            values.append(parse_numeric_component(field, name, literal, position))
        position += len(field) + 1

    values.extend([None] * (2 - len(values)))
    return _Partial(values[0], values[1], None, wildcard)


def _parse_partial(literal: str, text: str, offset: int) -> _Partial:
    try:
        return _parse_partial_literal(literal)
    except ParseError as e:
        raise InvalidVersionLiteralError(text, e, offset) from e


def _expand_partial(operator: Operator, partial: _Partial) -> list[Constraint]:
    if partial.fixed == 0:
        if operator in (Operator.LT, Operator.GT):
            return [NOTHING]
        return [ANY]

    low = partial.low
    if operator is Operator.GE:
        return [Comparator(Operator.GE, low)]
    if operator is Operator.LT:
        return [Comparator(Operator.LT, low)]
    if operator is Operator.GT:
        return [Comparator(Operator.GE, partial.next_bound)]
    if operator is Operator.LE:
        return [Comparator(Operator.LT, partial.next_bound)]

    upper = partial.next_bound
    if operator is Operator.CARET and partial.fixed == 2 and partial.major:
        upper = Version(low.major + 1, 0, 0)
    return [Comparator(Operator.GE, low), Comparator(Operator.LT, upper)]


def _lookup_operator(op_text: str, text: str, offset: int) -> Optional[Operator]:
    if not op_text:
        return None
    try:
        return Operator(op_text)
    except ValueError:
        raise UnknownOperatorError(
            text, fragment=op_text, offset=offset,
            message=f"Unknown operator {op_text!r} at offset {offset}",
        ) from None


def _expand(
    operator: Optional[Operator],
    literal: str,
    offset: int,
    text: str,
) -> list[Constraint]:
    partial = _parse_partial(literal, text, offset)
    if partial.version is not None:
        return [Comparator(operator or Operator.EQ, partial.version)]
    if operator is None:
        # A bare truncated version means "compatible with"; a bare
        # wildcard means "anything at that position".
        operator = Operator.EQ if partial.wildcard else Operator.CARET
    return _expand_partial(operator, partial)


def _tokens(clause: str, offset: int) -> Iterator[tuple[str, int]]:
    for match in _TOKEN_PATTERN.finditer(clause):
        yield match.group(), offset + match.start()


def _hyphen_range(
    low_token: tuple[str, int],
    high_token: tuple[str, int],
    text: str,
) -> Constraint:
    for token, offset in (low_token, high_token):
        op_text = _OPERATOR_PATTERN.match(token).group()  # type: ignore[union-attr]
        if op_text:
            raise MalformedRangeError(
                text, fragment=token, offset=offset,
                message=f"Hyphen range bounds cannot have operators, got {token!r}",
            )

    low = _parse_partial(low_token[0], text, low_token[1])
    high = _parse_partial(high_token[0], text, high_token[1])

    if low.version is not None and high.version is not None:
        return Range(low.version, high.version)

    nodes: list[Constraint] = []
    if low.fixed:
        nodes.append(Comparator(Operator.GE, low.version or low.low))
    if high.version is not None:
        nodes.append(Comparator(Operator.LE, high.version))
    elif high.fixed:
        nodes.append(Comparator(Operator.LT, high.next_bound))

    if not nodes:
        return ANY
    return nodes[0] if len(nodes) == 1 else And(tuple(nodes))


def _parse_clause(clause: str, text: str, offset: int) -> Constraint:
    tokens = list(_tokens(clause, offset))
    if not tokens:
        return ANY

    if any(token == "-" for token, _ in tokens):
        if len(tokens) != 3 or tokens[1][0] != "-":
            raise MalformedRangeError(
                text, fragment=clause.strip(), offset=tokens[0][1],
                message=f"Expected 'LOW - HIGH', got {clause.strip()!r}",
            )
        return _hyphen_range(tokens[0], tokens[2], text)

    nodes: list[Constraint] = []
    index = 0
    while index < len(tokens):
        token, position = tokens[index]
        op_text = _OPERATOR_PATTERN.match(token).group()  # type: ignore[union-attr]
        operator = _lookup_operator(op_text, text, position)
        index += 1
        if op_text == token and index < len(tokens):
            # Operator separated from its version by whitespace
            literal, literal_offset = tokens[index]
            index += 1
        else:
            literal, literal_offset = token[len(op_text) :], position + len(op_text)
        nodes.extend(_expand(operator, literal, literal_offset, text))

    return nodes[0] if len(nodes) == 1 else And(tuple(nodes))


def parse_constraint(text: str) -> Constraint:
    """Parse a range expression into a constraint tree.

    Args:
        text: A range such as ``">=1.2.3 <2.0.0 || ^3.1"``

    Returns:
        A Comparator, Range, And or Or node. Single-element groups are
        returned unwrapped.

    Raises:
        UnknownOperatorError: If a comparator uses an unsupported operator
        MalformedRangeError: If a hyphen range is missing a side
        InvalidVersionLiteralError: If an embedded version is malformed

    Examples:
        >>> parse_constraint("^1.2.3")
        Comparator(operator=<Operator.CARET: '^'>, version=Version(major=1, minor=2, patch=3, prerelease=(), build=()))
        >>> str(parse_constraint("~1.2"))
        '>=1.2.0 <1.3.0'
        >>> str(parse_constraint("1.2.3 - 2"))
        '>=1.2.3 <3.0.0'
    """
    if not isinstance(text, str):
        raise ConstraintError(
            str(text), message=f"Constraint must be a string, got {type(text).__name__}"
        )

    clauses: list[Constraint] = []
    position = 0
    for clause in text.split("||"):
        clauses.append(_parse_clause(clause, text, position))
        position += len(clause) + 2

    return clauses[0] if len(clauses) == 1 else Or(tuple(clauses))
