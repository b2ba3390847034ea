# SPDX-License-Identifier: MIT
"""Validate semantic version strings."""

from __future__ import annotations

import click

from autoctl_version import is_valid_semver

from ..main import echo_error, echo_info, echo_success


@click.command()
@click.argument("versions", nargs=-1, required=True)
@click.option(
    "--quiet",
    "-q",
    is_flag=True,
    help="Only report through the exit status.",
)
def validate(versions: tuple[str, ...], quiet: bool) -> None:
    """Check that each VERSION follows semantic versioning.

    Exits with status 1 if any version is invalid.

    \b
    Examples:
        autoctl validate 1.2.3
        autoctl validate 1.0.0-rc.1 1.0.0+build.5
        autoctl validate -q "$VERSION" || exit 1
    """
    invalid = [version for version in versions if not is_valid_semver(version)]

    if not quiet:
        for version in versions:
            if version in invalid:
                echo_info(f"{version}: invalid")
            else:
                echo_info(f"{version}: valid")

    if invalid:
        if not quiet:
            echo_error(
                f"{len(invalid)} of {len(versions)} version(s) do not follow semantic "
                "versioning (MAJOR.MINOR.PATCH[-PRERELEASE][+BUILD]), see https://semver.org/"
            )
        raise SystemExit(1)

    if not quiet:
        echo_success("Validation passed")
