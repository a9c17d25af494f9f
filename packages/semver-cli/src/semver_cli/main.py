# SPDX-License-Identifier: MIT
"""CLI entry point for the semver command."""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Optional

import click

from semver_core import SemverError

from . import __version__
from .config import ConfigError, SemverConfig, load_config
from .version_files import VersionFileError


class Context:
    """CLI context object passed to commands."""

    def __init__(self) -> None:
        self.config: Optional[SemverConfig] = None
        self.verbose: bool = False
        self.project_dir: Optional[Path] = None

    def load_config(self) -> SemverConfig:
        """Load configuration, caching the result."""
        if self.config is None:
            self.config = load_config(self.project_dir)
        return self.config


pass_context = click.make_pass_decorator(Context, ensure=True)


def echo_error(message: str) -> None:
    """Print an error message to stderr."""
    click.secho(f"Error: {message}", fg="red", err=True)


def echo_success(message: str) -> None:
    """Print a success message."""
    click.secho(message, fg="green")


def echo_info(message: str) -> None:
    """Print an info message."""
    click.echo(message)


def echo_debug(ctx: Context, message: str) -> None:
    """Print a message only in verbose mode."""
    if ctx.verbose:
        click.secho(message, dim=True, err=True)


@click.group()
@click.version_option(version=__version__, prog_name="semver")
@click.option(
    "-v",
    "--verbose",
    is_flag=True,
    help="Enable verbose output.",
)
@click.option(
    "-C",
    "--directory",
    type=click.Path(exists=True, file_okay=False, path_type=Path),
    help="Change to directory before running command.",
)
@pass_context
def cli(ctx: Context, verbose: bool, directory: Optional[Path]) -> None:
    """Semantic version tool.

    Bump the version recorded in composer.json, package.json or VERSION,
    and check, compare and match semantic versions.

    \b
    Examples:
        semver bump patch
        semver bump prerelease --preid rc
        semver validate 1.2.3-beta.1
        semver compare 1.0.0-rc.1 1.0.0
        semver satisfies 1.4.2 "^1.2 || ^2"
    """
    ctx.verbose = verbose
    ctx.project_dir = directory
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")


# Import and register commands
from .commands import bump, validate, compare, sort, satisfies

cli.add_command(bump.bump)
cli.add_command(validate.validate)
cli.add_command(compare.compare)
cli.add_command(sort.sort)
cli.add_command(satisfies.satisfies)


def main() -> None:
    """Main entry point for the CLI."""
    try:
        cli()
    except ConfigError as e:
        echo_error(str(e))
        sys.exit(1)
    except VersionFileError as e:
        echo_error(str(e))
        sys.exit(1)
    except SemverError as e:
        echo_error(str(e))
        sys.exit(1)
    except Exception as e:
        echo_error(f"Unexpected error: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
