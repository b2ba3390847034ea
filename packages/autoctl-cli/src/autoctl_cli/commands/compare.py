# SPDX-License-Identifier: MIT
"""Compare two semantic versions."""

from __future__ import annotations

from typing import Optional

import click

from autoctl_version import InvalidVersionError, compare as compare_versions, compare_with_build_meta

from ..config import ConfigError
from ..main import echo_error, echo_info, pass_context, Context


@click.command()
@click.argument("version1")
@click.argument("version2")
@click.option(
    "--build-meta/--no-build-meta",
    default=None,
    help="Break ties using build metadata.",
)
@pass_context
def compare(
    ctx: Context,
    version1: str,
    version2: str,
    build_meta: Optional[bool],
) -> None:
    """Print -1, 0 or 1 as VERSION1 is lower than, equal to or higher than VERSION2.

    \b
    Examples:
        autoctl compare 1.0.0-alpha 1.0.0               # -1
        autoctl compare 1.0.0+b 1.0.0+a                 # 0
        autoctl compare --build-meta 1.0.0+b 1.0.0+a    # 1
    """
    if build_meta is None:
        try:
            build_meta = ctx.load_config().build_meta
        except (ConfigError, FileNotFoundError) as e:
            echo_error(str(e))
            raise SystemExit(1)

    compare_fn = compare_with_build_meta if build_meta else compare_versions
    try:
        result = compare_fn(version1, version2)
    except InvalidVersionError as e:
        echo_error(str(e))
        raise SystemExit(1)

    echo_info(str(result))
