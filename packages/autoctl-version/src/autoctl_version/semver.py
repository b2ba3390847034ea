# SPDX-License-Identifier: MIT
"""Semantic version parsing and rendering.

Supports MAJOR.MINOR.PATCH format with optional pre-release and build metadata:
- Pre-release: -alpha, -alpha.1, -beta, -beta.2, -rc, -rc.1, -0.3.7
- Build metadata: +build, +build.123, +20240101, +exp.sha.5114f85
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Union

from .identifier import Identifier, join_identifiers, parse_identifiers

if TYPE_CHECKING:
    from .increment import ReleaseType

logger = logging.getLogger(__name__)

SEMVER_SPEC_URL = "https://semver.org/"

# Semantic versioning regex pattern (SemVer 2.0.0 compliant)
# https://semver.org/#is-there-a-suggested-regular-expression-regex-to-check-a-semver-string
SEMVER_PATTERN = re.compile(
    r"^(?P<major>0|[1-9]\d*)"
    r"\.(?P<minor>0|[1-9]\d*)"
    r"\.(?P<patch>0|[1-9]\d*)"
    r"(?:-(?P<prerelease>(?:0|[1-9]\d*|\d*[a-zA-Z-][0-9a-zA-Z-]*)"
    r"(?:\.(?:0|[1-9]\d*|\d*[a-zA-Z-][0-9a-zA-Z-]*))*))?"
    r"(?:\+(?P<buildmetadata>[0-9a-zA-Z-]+(?:\.[0-9a-zA-Z-]+)*))?$",
    re.ASCII,
)


class InvalidVersionError(ValueError):
    """Raised when a version string does not follow semantic versioning.

    Attributes:
        version: The rejected input
        message: Human readable description with a pointer to semver.org
        result: The zero-valued Version that stands in for the failed parse
    """

    def __init__(self, version: str, message: str = ""):
        self.version = version
        self.message = message or (
            f"Version {version!r} does not match the semantic version number, "
            f"please refer to {SEMVER_SPEC_URL}"
        )
        self.result = Version()
        super().__init__(self.message)


@dataclass(slots=True)
class Version:
    """A semantic version.

    Unlike most value objects, a Version is mutable: increment() moves it to
    the next release in place. Use copy() or bump() to keep the original.

    Attributes:
        major: Major version number (breaking changes)
        minor: Minor version number (new features, backward compatible)
        patch: Patch version number (bug fixes, backward compatible)
        prerelease: Pre-release identifiers, empty for a release
        build: Build metadata identifiers, empty when absent
    """

    major: int = 0
    minor: int = 0
    patch: int = 0
    prerelease: list[Identifier] = field(default_factory=list)
    build: list[Identifier] = field(default_factory=list)

    def __str__(self) -> str:
        """Return the full string representation of the version."""
        version = self.finalize_version()
        if self.prerelease:
            version += f"-{self.prerelease_string}"
        if self.build:
            version += f"+{self.build_string}"
        return version

    def finalize_version(self) -> str:
        """Return MAJOR.MINOR.PATCH, discarding pre-release and build metadata."""
        return f"{self.major}.{self.minor}.{self.patch}"

    @property
    def base_version(self) -> str:
        """Return the base version without pre-release or build metadata."""
        return self.finalize_version()

    @property
    def is_prerelease(self) -> bool:
        """Return True if this is a pre-release version."""
        return len(self.prerelease) > 0

    @property
    def prerelease_string(self) -> str:
        return join_identifiers(self.prerelease)

    @property
    def build_string(self) -> str:
        return join_identifiers(self.build)

    def copy(self) -> Version:
        """Return an independent copy; identifier lists are not shared."""
        return Version(
            major=self.major,
            minor=self.minor,
            patch=self.patch,
            prerelease=list(self.prerelease),
            build=list(self.build),
        )

    def increment(
        self,
        release: Union[ReleaseType, str],
        identifier: str = "",
        identifier_base: bool = False,
    ) -> Version:
        """Move this version to its next release in place and return it.

        See increment_version() for the transition rules.
        """
        from .increment import increment_version

        return increment_version(self, release, identifier, identifier_base)

    def compare(self, other: Union[Version, str]) -> int:
        """Compare by precedence, ignoring build metadata."""
        from .compare import compare

        return compare(self, other)

    def compare_with_build_meta(self, other: Union[Version, str]) -> int:
        """Compare by precedence, using build metadata as the final tiebreak."""
        from .compare import compare_with_build_meta

        return compare_with_build_meta(self, other)


def parse(version_string: str) -> Version:
    """Parse a semantic version string into a Version object.

    Args:
        version_string: A string following semantic versioning format
            (MAJOR.MINOR.PATCH[-prerelease][+build])

    Returns:
        A Version object with parsed components

    Raises:
        InvalidVersionError: If the string does not follow semantic versioning

    Examples:
        >>> str(parse("1.0.0-alpha.1"))
        '1.0.0-alpha.1'

        >>> parse("2.0.0-rc.1+build.456").build_string
        'build.456'
    """
    if not isinstance(version_string, str):
        raise InvalidVersionError(
            str(version_string), f"Version must be a string, got {type(version_string).__name__}"
        )

    version_string = version_string.strip()
    if not version_string:
        raise InvalidVersionError(version_string, "Version string cannot be empty")

    match = SEMVER_PATTERN.match(version_string)
    if not match:
        raise InvalidVersionError(version_string)

    prerelease = match.group("prerelease")
    build = match.group("buildmetadata")
    return Version(
        major=int(match.group("major")),
        minor=int(match.group("minor")),
        patch=int(match.group("patch")),
        prerelease=parse_identifiers(prerelease) if prerelease else [],
        build=parse_identifiers(build) if build else [],
    )


def new_version(version_string: str) -> Version:
    """Parse a version string, logging instead of raising on failure.

    A malformed string yields the zero Version (0.0.0), which cannot be told
    apart from a parsed "0.0.0". Callers that need to know should use parse().
    """
    try:
        return parse(version_string)
    except InvalidVersionError as e:
        logger.error(
            "the %s number does not match the semantic version number, please refer to "
            + SEMVER_SPEC_URL,
            version_string,
        )
        return e.result


def is_valid_semver(version_string: str) -> bool:
    """Check if a string is a valid semantic version.

    Examples:
        >>> is_valid_semver("1.0.0")
        True
        >>> is_valid_semver("1.0")
        False
        >>> is_valid_semver("1.0.0-alpha")
        True
    """
    if not isinstance(version_string, str):
        return False
    return SEMVER_PATTERN.match(version_string.strip()) is not None
