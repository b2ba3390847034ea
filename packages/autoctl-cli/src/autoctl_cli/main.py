# SPDX-License-Identifier: MIT
"""CLI entry point for autoctl command."""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Optional

import click

from autoctl_version import InvalidVersionError

from . import __version__
from .config import CLIConfig, ConfigError, load_config


class Context:
    """CLI context object passed to commands."""

    def __init__(self) -> None:
        self.config: Optional[CLIConfig] = None
        self.project_dir: Optional[Path] = None

    def load_config(self) -> CLIConfig:
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


@click.group()
@click.version_option(version=__version__)
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
    help="Read configuration from this directory instead of the current one.",
)
@pass_context
def cli(ctx: Context, verbose: bool, directory: Optional[Path]) -> None:
    """Semantic version tool.

    Validate, compare, sort and bump semantic versions.

    \b
    Examples:
        autoctl validate 1.2.3-rc.1
        autoctl bump 1.2.3 --release minor
        autoctl bump 1.2.3 -r prerelease --preid alpha
        autoctl compare 1.0.0-alpha 1.0.0
        autoctl sort 1.0.0 1.0.0-rc.1 0.9.0
    """
    ctx.project_dir = directory
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


# Import and register commands
from .commands import validate, bump, compare, sort, finalize

cli.add_command(validate.validate)
cli.add_command(bump.bump)
cli.add_command(compare.compare)
cli.add_command(sort.sort)
cli.add_command(finalize.finalize)


def main() -> None:
    """Main entry point for the CLI."""
    try:
        cli()
    except (ConfigError, InvalidVersionError) as e:
        echo_error(str(e))
        sys.exit(1)
    except Exception as e:
        echo_error(f"Unexpected error: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
