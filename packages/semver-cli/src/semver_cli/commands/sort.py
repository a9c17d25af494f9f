# SPDX-License-Identifier: MIT
"""Sort semantic versions by precedence."""

from __future__ import annotations

import click

from semver_core import ParseError, sort_versions

from ..main import echo_error, echo_info


@click.command()
@click.argument("versions", nargs=-1, required=True)
@click.option(
    "-r",
    "--reverse",
    is_flag=True,
    help="Print the highest version first.",
)
def sort(versions: tuple[str, ...], reverse: bool) -> None:
    """Print VERSIONS in precedence order, one per line."""
    try:
        ordered = sort_versions(versions, reverse=reverse)
    except ParseError as e:
        echo_error(str(e))
        raise SystemExit(1)

    for version in ordered:
        echo_info(str(version))
