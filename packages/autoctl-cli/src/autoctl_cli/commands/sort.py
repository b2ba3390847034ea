# SPDX-License-Identifier: MIT
"""Sort semantic versions by precedence."""

from __future__ import annotations

from typing import Optional

import click

from autoctl_version import InvalidVersionError, sort_versions

from ..config import ConfigError
from ..main import echo_error, echo_info, pass_context, Context


@click.command()
@click.argument("versions", nargs=-1, required=True)
@click.option(
    "--reverse",
    "-r",
    is_flag=True,
    help="Print the highest version first.",
)
@click.option(
    "--build-meta/--no-build-meta",
    default=None,
    help="Break ties using build metadata.",
)
@pass_context
def sort(
    ctx: Context,
    versions: tuple[str, ...],
    reverse: bool,
    build_meta: Optional[bool],
) -> None:
    """Print VERSIONS in precedence order, one per line.

    \b
    Examples:
        autoctl sort 1.0.0 1.0.0-rc.1 0.9.0
        autoctl sort --reverse $(git tag)
    """
    if build_meta is None:
        try:
            build_meta = ctx.load_config().build_meta
        except (ConfigError, FileNotFoundError) as e:
            echo_error(str(e))
            raise SystemExit(1)

    try:
        ordered = sort_versions(versions, reverse=reverse, build_meta=build_meta)
    except InvalidVersionError as e:
        echo_error(str(e))
        raise SystemExit(1)

    for version in ordered:
        echo_info(str(version))
