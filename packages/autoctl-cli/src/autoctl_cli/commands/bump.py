# SPDX-License-Identifier: MIT
"""Compute the next version for a release."""

from __future__ import annotations

from typing import Optional

import click

from autoctl_version import InvalidVersionError, ReleaseType, bump as bump_version

from ..config import ConfigError
from ..main import echo_error, echo_info, pass_context, Context


@click.command()
@click.argument("version", required=False)
@click.option(
    "--release",
    "-r",
    type=click.Choice([r.value for r in ReleaseType]),
    help="Release kind (defaults to [tool.autoctl.version].release, then patch).",
)
@click.option(
    "--preid",
    "-p",
    help="Pre-release tag such as alpha, beta or rc.",
)
@click.option(
    "--identifier-base/--no-identifier-base",
    default=None,
    help="Start new pre-release counters at 1 instead of 0.",
)
@pass_context
def bump(
    ctx: Context,
    version: Optional[str],
    release: Optional[str],
    preid: Optional[str],
    identifier_base: Optional[bool],
) -> None:
    """Print the version that follows VERSION.

    VERSION defaults to [project].version of the nearest pyproject.toml.
    Options not given on the command line fall back to [tool.autoctl.version].

    \b
    Examples:
        autoctl bump 1.2.3                          # 1.2.4
        autoctl bump 1.2.3 -r minor                 # 1.3.0
        autoctl bump 1.2.3 -r prerelease -p alpha   # 1.2.4-alpha.0
        autoctl bump 1.2.4-alpha.0 -r prerelease    # 1.2.4-alpha.1
        autoctl bump 1.2.3 -r premajor -p rc --identifier-base  # 2.0.0-rc.1
    """
    try:
        config = ctx.load_config()
    except (ConfigError, FileNotFoundError) as e:
        echo_error(str(e))
        raise SystemExit(1)

    if version is None:
        version = config.version
        if not version:
            echo_error("No VERSION given and no [project].version found in pyproject.toml")
            raise SystemExit(1)

    release_type = ReleaseType(release) if release else config.release
    identifier = config.preid if preid is None else preid
    if identifier_base is None:
        identifier_base = config.identifier_base

    try:
        result = bump_version(version, release_type, identifier, identifier_base)
    except InvalidVersionError as e:
        echo_error(str(e))
        raise SystemExit(1)

    echo_info(str(result))
