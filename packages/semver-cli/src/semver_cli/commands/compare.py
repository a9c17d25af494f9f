# SPDX-License-Identifier: MIT
"""Compare two semantic versions."""

from __future__ import annotations

import click

from semver_core import Ordering, ParseError, compare as compare_versions

from ..main import echo_error, echo_info

_SYMBOLS = {
    Ordering.LESS: "<",
    Ordering.EQUAL: "==",
    Ordering.GREATER: ">",
}


@click.command()
@click.argument("first")
@click.argument("second")
def compare(first: str, second: str) -> None:
    """Compare FIRST and SECOND by precedence.

    Build metadata is ignored, so 1.0.0+a == 1.0.0+b.

    \b
    Examples:
        semver compare 1.0.0-alpha 1.0.0     # 1.0.0-alpha < 1.0.0
    """
    try:
        result = compare_versions(first, second)
    except ParseError as e:
        echo_error(str(e))
        raise SystemExit(1)

    echo_info(f"{first} {_SYMBOLS[result]} {second}")
