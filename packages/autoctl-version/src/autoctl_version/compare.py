# SPDX-License-Identifier: MIT
"""Version comparison following semantic versioning precedence.

Precedence is decided by MAJOR, MINOR and PATCH numerically, then:
- A release has higher precedence than any of its pre-releases (1.0.0-rc.1 < 1.0.0)
- Pre-release identifiers compare one by one (alpha < alpha.1 < alpha.beta < beta)
- Build metadata is ignored, unless compare_with_build_meta() is used
"""

from __future__ import annotations

from typing import Iterable, Union

from .identifier import compare_identifiers
from .semver import Version, parse


def _coerce(version: Union[str, Version]) -> Version:
    return parse(version) if isinstance(version, str) else version


def _compare_main(v1: Version, v2: Version) -> int:
    for attr in ("major", "minor", "patch"):
        val1 = getattr(v1, attr)
        val2 = getattr(v2, attr)
        if val1 != val2:
            return -1 if val1 < val2 else 1
    return 0


def _compare_prerelease(v1: Version, v2: Version) -> int:
    # No pre-release > any pre-release
    if not v1.is_prerelease and not v2.is_prerelease:
        return 0
    if not v1.is_prerelease:
        return 1
    if not v2.is_prerelease:
        return -1
    return compare_identifiers(v1.prerelease, v2.prerelease)


def compare(version1: Union[str, Version], version2: Union[str, Version]) -> int:
    """Compare two semantic versions, ignoring build metadata.

    Args:
        version1: First version (string or Version object)
        version2: Second version (string or Version object)

    Returns:
        -1 if version1 < version2
        0 if version1 == version2
        1 if version1 > version2

    Raises:
        InvalidVersionError: If either version string is invalid

    Examples:
        >>> compare("1.0.0", "2.0.0")
        -1
        >>> compare("1.0.0-alpha.1", "1.0.0-alpha")
        1
        >>> compare("1.0.0+build.1", "1.0.0+build.2")
        0
    """
    v1 = _coerce(version1)
    v2 = _coerce(version2)

    result = _compare_main(v1, v2)
    if result != 0:
        return result
    return _compare_prerelease(v1, v2)


def compare_with_build_meta(
    version1: Union[str, Version], version2: Union[str, Version]
) -> int:
    """Compare two semantic versions, using build metadata as a final tiebreak.

    Build identifiers compare with the same rules as pre-release identifiers,
    and a version without build metadata sorts before one with it.

    Examples:
        >>> compare_with_build_meta("1.0.0+build.1", "1.0.0+build.2")
        -1
        >>> compare_with_build_meta("1.0.0", "1.0.0+build")
        -1
    """
    v1 = _coerce(version1)
    v2 = _coerce(version2)

    result = compare(v1, v2)
    if result != 0:
        return result
    return compare_identifiers(v1.build, v2.build)


def version_key(version: Union[str, Version], build_meta: bool = False) -> tuple:
    """Return a sort key for a version, consistent with compare().

    Args:
        version: Version string or Version object
        build_meta: Also order by build metadata, like compare_with_build_meta()

    Examples:
        >>> sorted(["1.0.0", "2.0.0", "1.0.0-alpha"], key=version_key)
        ['1.0.0-alpha', '1.0.0', '2.0.0']
    """
    v = _coerce(version)

    # A release sorts after all of its pre-releases
    if v.is_prerelease:
        prerelease_key: tuple = (0, tuple(i.sort_key() for i in v.prerelease))
    else:
        prerelease_key = (1, ())

    key: tuple = (v.major, v.minor, v.patch, prerelease_key)
    if build_meta:
        key += (tuple(i.sort_key() for i in v.build),)
    return key


def sort_versions(
    versions: Iterable[Union[str, Version]],
    reverse: bool = False,
    build_meta: bool = False,
) -> list[Version]:
    """Parse and sort versions by precedence, lowest first.

    The sort is stable, so versions of equal precedence keep their input order.
    """
    parsed = [_coerce(v) for v in versions]
    return sorted(parsed, key=lambda v: version_key(v, build_meta), reverse=reverse)


def max_version(
    versions: Iterable[Union[str, Version]], build_meta: bool = False
) -> Version:
    """Return the version with the highest precedence.

    Raises:
        ValueError: If versions is empty
    """
    parsed = [_coerce(v) for v in versions]
    if not parsed:
        raise ValueError("max_version() requires at least one version")
    return max(parsed, key=lambda v: version_key(v, build_meta))
