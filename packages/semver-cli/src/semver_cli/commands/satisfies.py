# SPDX-License-Identifier: MIT
"""Check a version against a range expression."""

from __future__ import annotations

import click

from semver_core import (
    ConstraintError,
    ParseError,
    parse_constraint,
    parse_version,
    satisfies as version_satisfies,
)

from ..main import Context, echo_debug, echo_error, echo_info, pass_context


@click.command()
@click.argument("version")
@click.argument("constraint")
@pass_context
def satisfies(ctx: Context, version: str, constraint: str) -> None:
    """Check whether VERSION satisfies CONSTRAINT.

    Prints true or false. Exits 0 when satisfied, 1 when not and 2 when
    either argument is invalid.

    \b
    Examples:
        semver satisfies 1.2.5 "^1.2.3"             # true
        semver satisfies 1.2.3-beta ">=1.2.3"       # false
        semver satisfies 2.1.0 "1.x || >=2.1 <3"    # true
    """
    try:
        parsed_version = parse_version(version)
        tree = parse_constraint(constraint)
    except (ParseError, ConstraintError) as e:
        echo_error(str(e))
        click.echo(e.pointer(), err=True)
        raise SystemExit(2)

    echo_debug(ctx, f"Constraint: {tree}")
    result = version_satisfies(parsed_version, tree)
    echo_info("true" if result else "false")
    if not result:
        raise SystemExit(1)
