# SPDX-License-Identifier: MIT
"""Strip pre-release and build metadata from a version."""

from __future__ import annotations

import click

from autoctl_version import InvalidVersionError, parse

from ..main import echo_error, echo_info


@click.command()
@click.argument("version")
def finalize(version: str) -> None:
    """Print MAJOR.MINOR.PATCH of VERSION.

    \b
    Examples:
        autoctl finalize 1.2.3-rc.1+build.5   # 1.2.3
    """
    try:
        parsed = parse(version)
    except InvalidVersionError as e:
        echo_error(str(e))
        raise SystemExit(1)

    echo_info(parsed.finalize_version())
