# SPDX-License-Identifier: MIT
"""Computing the next version for a release.

Release kinds:
- major, minor, patch: finalize or bump to the next release
- premajor, preminor, prepatch: bump, then start a new pre-release
- prerelease: continue the current pre-release, or start one on the next patch

Examples:
    >>> str(bump("1.2.3", ReleaseType.MINOR))
    '1.3.0'
    >>> str(bump("1.2.3", ReleaseType.PRERELEASE, "alpha"))
    '1.2.4-alpha.0'
    >>> str(bump("1.2.4-alpha.0", ReleaseType.PRERELEASE, "alpha"))
    '1.2.4-alpha.1'
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Union

from .identifier import Identifier
from .semver import Version, parse

logger = logging.getLogger(__name__)


class ReleaseType(str, Enum):
    """Kinds of release a version can be incremented to."""

    MAJOR = "major"
    MINOR = "minor"
    PATCH = "patch"
    PREMAJOR = "premajor"
    PREMINOR = "preminor"
    PREPATCH = "prepatch"
    PRERELEASE = "prerelease"

    def __str__(self) -> str:
        return self.value


def _bump_major(version: Version) -> None:
    # 1.0.0-5 => 1.0.0, 1.1.0 => 2.0.0
    if version.minor != 0 or version.patch != 0 or not version.is_prerelease:
        version.major += 1
    version.minor = 0
    version.patch = 0
    version.prerelease = []


def _bump_minor(version: Version) -> None:
    # 1.2.0-5 => 1.2.0, 1.2.1 => 1.3.0
    if version.patch != 0 or not version.is_prerelease:
        version.minor += 1
    version.patch = 0
    version.prerelease = []


def _bump_patch(version: Version) -> None:
    # 1.2.0 => 1.2.1, 1.2.0-5 => 1.2.0
    if not version.is_prerelease:
        version.patch += 1
    version.prerelease = []


def _bump_prerelease_tag(version: Version, identifier: str, identifier_base: bool) -> None:
    """Advance the pre-release part without touching MAJOR.MINOR.PATCH.

    Without a tag the last numeric identifier is incremented, or the base
    counter is appended when there is none. A tag steers the pre-release to
    <tag>.<n>: an existing <tag>.<n> keeps counting, anything else restarts
    at <tag>.<base>.
    """
    base = Identifier.from_token("1" if identifier_base else "0")
    candidate = [Identifier.from_token(identifier), base] if identifier else [base]

    if not version.is_prerelease:
        version.prerelease = candidate
        return

    prerelease = list(version.prerelease)
    for index in range(len(prerelease) - 1, -1, -1):
        current = prerelease[index]
        if current.is_numeric:
            prerelease[index] = Identifier.from_token(str(current.numeric_value + 1))
            break
    else:
        prerelease.append(base)

    if identifier:
        continues_tag = (
            prerelease[0].raw == identifier and len(prerelease) > 1 and prerelease[1].is_numeric
        )
        if not continues_tag:
            prerelease = candidate

    version.prerelease = prerelease


def increment_version(
    version: Version,
    release: Union[ReleaseType, str],
    identifier: str = "",
    identifier_base: bool = False,
) -> Version:
    """Increment a version in place for the given release kind.

    Args:
        version: The version to modify
        release: Release kind (a ReleaseType or its string value)
        identifier: Optional pre-release tag such as "alpha" or "rc"
        identifier_base: Start new pre-release counters at 1 instead of 0

    Returns:
        The same Version object, for chaining

    Raises:
        ValueError: If release is not a known release kind
    """
    release = ReleaseType(release)
    previous = str(version) if logger.isEnabledFor(logging.DEBUG) else ""

    if release is ReleaseType.PREMAJOR:
        version.prerelease = []
        version.patch = 0
        version.minor = 0
        version.major += 1
        _bump_prerelease_tag(version, identifier, identifier_base)
    elif release is ReleaseType.PREMINOR:
        version.prerelease = []
        version.patch = 0
        version.minor += 1
        _bump_prerelease_tag(version, identifier, identifier_base)
    elif release is ReleaseType.PREPATCH:
        # Any existing pre-release is irrelevant to the next patch
        version.prerelease = []
        _bump_patch(version)
        _bump_prerelease_tag(version, identifier, identifier_base)
    elif release is ReleaseType.PRERELEASE:
        # Acts like prepatch on a release version
        if not version.is_prerelease:
            _bump_patch(version)
        _bump_prerelease_tag(version, identifier, identifier_base)
    elif release is ReleaseType.MAJOR:
        _bump_major(version)
    elif release is ReleaseType.MINOR:
        _bump_minor(version)
    elif release is ReleaseType.PATCH:
        _bump_patch(version)

    if previous:
        logger.debug("Incremented %s to %s (%s)", previous, version, release)
    return version


def bump(
    version: Union[Version, str],
    release: Union[ReleaseType, str],
    identifier: str = "",
    identifier_base: bool = False,
) -> Version:
    """Return the next version for a release, leaving the input untouched.

    Raises:
        InvalidVersionError: If version is a string that cannot be parsed
        ValueError: If release is not a known release kind
    """
    current = parse(version) if isinstance(version, str) else version.copy()
    return increment_version(current, release, identifier, identifier_base)
