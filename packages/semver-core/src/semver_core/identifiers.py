# SPDX-License-Identifier: MIT
"""Classification of dot-separated pre-release and build identifiers."""

from __future__ import annotations

import string
from typing import Union

from .errors import (
    EmptyIdentifierError,
    InvalidIdentifierError,
    LeadingZeroError,
)

#: A pre-release identifier: ``int`` for numeric, ``str`` for alphanumeric.
Identifier = Union[int, str]

IDENTIFIER_CHARS = frozenset(string.ascii_letters + string.digits + "-")
_DIGITS = frozenset(string.digits)


def _check_chars(token: str, text: str, offset: int) -> None:
    if not token:
        raise EmptyIdentifierError(
            text, fragment=token, offset=offset,
            message=f"Empty identifier at offset {offset} in {text!r}",
        )
    for index, char in enumerate(token):
        if char not in IDENTIFIER_CHARS:
            raise InvalidIdentifierError(
                text, fragment=token, offset=offset,
                message=(
                    f"Invalid character {char!r} at offset {offset + index} "
                    f"in identifier {token!r}"
                ),
            )


#: Largest digit run converted in one step, below the interpreter's
#: int/str conversion limit.
_CHUNK_DIGITS = 4000


def digits_to_int(digits: str) -> int:
    """Convert a string of ASCII digits of any length to an int."""
    value = 0
    for start in range(0, len(digits), _CHUNK_DIGITS):
        chunk = digits[start : start + _CHUNK_DIGITS]
        value = value * 10 ** len(chunk) + int(chunk)
    return value


def int_to_digits(value: int) -> str:
    """Format a non-negative int of any size as decimal text."""
    base = 10**_CHUNK_DIGITS
    if value < base:
        return str(value)
    chunks = []
    while value >= base:
        value, low = divmod(value, base)
        chunks.append(f"{low:0{_CHUNK_DIGITS}d}")
    chunks.append(str(value))
    return "".join(reversed(chunks))


def is_numeric(token: str) -> bool:
    """Return True if every character of a non-empty token is an ASCII digit."""
    return bool(token) and all(char in _DIGITS for char in token)


def classify_identifier(
    token: str,
    text: str | None = None,
    offset: int = 0,
) -> Identifier:
    """Classify a pre-release identifier as numeric or alphanumeric.

    Args:
        token: The identifier text
        text: The full string the token came from, used in error reports
            (defaults to the token itself)
        offset: Offset of the token within ``text``

    Returns:
        An ``int`` if the token is all ASCII digits, otherwise the token

    Raises:
        EmptyIdentifierError: If the token is empty
        InvalidIdentifierError: If the token has characters outside [0-9A-Za-z-]
        LeadingZeroError: If a numeric token has a leading zero

    Examples:
        >>> classify_identifier("alpha")
        'alpha'
        >>> classify_identifier("11")
        11
        >>> classify_identifier("0a")
        '0a'
    """
    if text is None:
        text = token
    _check_chars(token, text, offset)
    if not is_numeric(token):
        return token
    if len(token) > 1 and token[0] == "0":
        raise LeadingZeroError(
            text, fragment=token, offset=offset,
            message=f"Numeric identifier {token!r} has a leading zero",
        )
    return digits_to_int(token)


def validate_build_identifier(
    token: str,
    text: str | None = None,
    offset: int = 0,
) -> str:
    """Validate a build metadata identifier.

    Build identifiers follow the same character rules as pre-release
    identifiers but may have leading zeros, so they are kept as text.
    """
    _check_chars(token, token if text is None else text, offset)
    return token


def split_identifiers(
    section: str,
    text: str,
    offset: int,
    build: bool = False,
) -> tuple[Identifier, ...]:
    """Split a dot-separated section into validated identifiers."""
    identifiers: list[Identifier] = []
    position = offset
    for token in section.split("."):
        if build:
            identifiers.append(validate_build_identifier(token, text, position))
        else:
            identifiers.append(classify_identifier(token, text, position))
        position += len(token) + 1
    return tuple(identifiers)


def format_identifiers(identifiers: tuple[Identifier, ...]) -> str:
    """Join identifiers back into their dot-separated form."""
    return ".".join(
        int_to_digits(identifier) if isinstance(identifier, int) else identifier
        for identifier in identifiers
    )
