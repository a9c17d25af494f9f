# SPDX-License-Identifier: MIT
"""Bump the version recorded in the project's version files."""

from __future__ import annotations

from typing import Optional

import click

from semver_core import BumpError, BumpKind, ParseError, parse_version
from semver_core import bump as bump_version

from ..main import Context, echo_debug, echo_error, echo_info, echo_success, pass_context
from ..version_files import find_version, update_version_files

BUMP_CHOICES = [kind.value for kind in BumpKind]


def _describe_files(files: list[str]) -> str:
    """Join file names the way a sentence lists them."""
    if len(files) == 1:
        return files[0]
    if len(files) == 2:
        return f"{files[0]} or {files[1]}"
    return f"{', '.join(files[:-1])}, or {files[-1]}"


@click.command()
@click.argument(
    "kind",
    required=False,
    type=click.Choice(BUMP_CHOICES, case_sensitive=False),
)
@click.option(
    "--bump",
    "bump_option",
    type=click.Choice(BUMP_CHOICES, case_sensitive=False),
    help="Version part to bump (same as the KIND argument).",
)
@click.option(
    "--preid",
    help="Pre-release identifier for prerelease bumps (e.g., rc).",
)
@click.option(
    "--dry-run",
    is_flag=True,
    help="Show the new version without writing any file.",
)
@pass_context
def bump(
    ctx: Context,
    kind: Optional[str],
    bump_option: Optional[str],
    preid: Optional[str],
    dry_run: bool,
) -> None:
    """Bump the project version.

    Reads the current version from the first of composer.json, package.json
    and VERSION that records one, bumps it, and writes the new version to
    every one of those files that exists. Prompts for KIND when omitted.

    \b
    Examples:
        semver bump patch               # 1.2.3 -> 1.2.4
        semver bump --bump minor        # 1.2.3 -> 1.3.0
        semver bump prerelease --preid rc  # 1.2.3 -> 1.2.4-rc.0
        semver bump major --dry-run     # Show the result only
    """
    config = ctx.load_config()
    project_dir = config.project_dir

    source = find_version(project_dir, config.files)
    if source is None:
        echo_error(f"No version found in {_describe_files(config.files)} file.")
        raise SystemExit(1)
    echo_debug(ctx, f"Read version from {source.path}")

    try:
        current = parse_version(source.version)
    except ParseError as e:
        echo_error(f"Invalid semantic version in {source.path.name}: {e}")
        raise SystemExit(1)

    echo_info(f"Current version: {current}")

    kind = kind or bump_option
    if kind is None:
        kind = click.prompt(
            "What would you like to bump?",
            type=click.Choice(BUMP_CHOICES, case_sensitive=False),
            default=config.default_bump,
        )

    identifier = preid or config.prerelease_identifier
    try:
        new_version = bump_version(current, kind, identifier)
    except (BumpError, ParseError) as e:
        echo_error(str(e))
        raise SystemExit(1)

    echo_info(f"Bumping version {source.version} → {new_version}")

    if dry_run:
        echo_info("Dry run: no files were changed.")
        return

    updated = update_version_files(project_dir, str(new_version), config.files)
    for path in updated:
        echo_debug(ctx, f"Updated {path}")
    echo_success(f"Updated {len(updated)} file(s).")
