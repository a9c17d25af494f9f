# SPDX-License-Identifier: MIT
"""Validate semantic version strings."""

from __future__ import annotations

import click

from semver_core import ParseError, parse_version

from ..main import Context, echo_debug, echo_error, echo_success, pass_context


@click.command()
@click.argument("versions", nargs=-1, required=True)
@pass_context
def validate(ctx: Context, versions: tuple[str, ...]) -> None:
    """Check that each VERSION follows semantic versioning.

    Invalid versions are reported with a marker under the offending part.

    \b
    Examples:
        semver validate 1.2.3
        semver validate 1.0.0-rc.1+build.5 1.02.0
    """
    failures = 0
    for text in versions:
        try:
            version = parse_version(text)
        except ParseError as e:
            failures += 1
            echo_error(f"{text!r}: {e.message} [{type(e).__name__}]")
            click.echo(e.pointer(), err=True)
            continue
        echo_success(f"{version}: valid")
        echo_debug(
            ctx,
            f"  core={version.base_version} prerelease={version.prerelease} build={version.build}",
        )

    if failures:
        raise SystemExit(1)
