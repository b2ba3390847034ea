# SPDX-License-Identifier: MIT
"""Semantic version parsing, comparison and incrementing.

This package parses versions following the SemVer 2.0.0 specification,
orders them by SemVer precedence and computes the next version for a
release kind.

Example:
    >>> from autoctl_version import parse, compare, bump, ReleaseType
    >>>
    >>> version = parse("1.2.3-alpha.1+build.456")
    >>> version.major
    1
    >>> version.prerelease_string
    'alpha.1'
    >>>
    >>> compare("1.0.0", "2.0.0")
    -1
    >>>
    >>> str(bump(version, ReleaseType.PRERELEASE, "alpha"))
    '1.2.3-alpha.2+build.456'
"""

__version__ = "0.1.0"

from .identifier import (
    Identifier,
    parse_identifiers,
)
from .semver import (
    Version,
    parse,
    new_version,
    is_valid_semver,
    InvalidVersionError,
    SEMVER_PATTERN,
)
from .increment import (
    ReleaseType,
    bump,
    increment_version,
)
from .compare import (
    compare,
    compare_with_build_meta,
    version_key,
    sort_versions,
    max_version,
)

__all__ = [
    # Identifiers
    "Identifier",
    "parse_identifiers",
    # Version parsing
    "Version",
    "parse",
    "new_version",
    "is_valid_semver",
    "InvalidVersionError",
    "SEMVER_PATTERN",
    # Incrementing
    "ReleaseType",
    "bump",
    "increment_version",
    # Version comparison
    "compare",
    "compare_with_build_meta",
    "version_key",
    "sort_versions",
    "max_version",
]
