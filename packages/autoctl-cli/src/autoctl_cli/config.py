# SPDX-License-Identifier: MIT
"""CLI configuration loading from pyproject.toml.

Defaults for the version commands live under ``[tool.autoctl.version]``::

    [tool.autoctl.version]
    preid = "rc"
    identifier-base = true
    release = "prerelease"
    build-meta = false
"""

from __future__ import annotations

import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib

from autoctl_version import ReleaseType


class ConfigError(Exception):
    """Raised when configuration loading fails."""

    pass


@dataclass
class CLIConfig:
    """CLI configuration loaded from pyproject.toml.

    Attributes:
        project_dir: Directory containing pyproject.toml
        version: Current project version from [project].version
        preid: Default pre-release tag for bumps
        identifier_base: Start new pre-release counters at 1
        release: Default release kind for bumps
        build_meta: Use build metadata as a tiebreak when comparing
    """

    project_dir: Path
    version: str = ""
    preid: str = ""
    identifier_base: bool = False
    release: ReleaseType = ReleaseType.PATCH
    build_meta: bool = False

    @classmethod
    def from_pyproject(cls, project_dir: str | Path) -> "CLIConfig":
        """Load configuration from pyproject.toml.

        Args:
            project_dir: Directory containing pyproject.toml

        Returns:
            CLIConfig instance

        Raises:
            ConfigError: If the file is invalid
            FileNotFoundError: If pyproject.toml doesn't exist
        """
        project_path = Path(project_dir)
        pyproject_path = project_path / "pyproject.toml"

        if not pyproject_path.exists():
            raise FileNotFoundError(f"pyproject.toml not found in {project_path}")

        try:
            with open(pyproject_path, "rb") as f:
                pyproject = tomllib.load(f)
        except tomllib.TOMLDecodeError as e:
            raise ConfigError(f"Invalid TOML syntax: {e}") from e

        return cls.from_pyproject_dict(pyproject, project_path)

    @classmethod
    def from_pyproject_dict(
        cls,
        pyproject: dict[str, Any],
        project_dir: Path,
    ) -> "CLIConfig":
        """Create CLIConfig from a parsed pyproject.toml dictionary.

        Raises:
            ConfigError: If a setting has the wrong type or an unknown value
        """
        project = _get_table(pyproject, "project")
        tool = _get_table(pyproject, "tool")
        tool_autoctl = _get_table(tool, "autoctl", "tool.")
        tool_version = _get_table(tool_autoctl, "version", "tool.autoctl.")

        version = _get_typed(project, "version", str, "", "project")
        preid = _get_typed(tool_version, "preid", str, "", "tool.autoctl.version")
        identifier_base = _get_typed(
            tool_version, "identifier-base", bool, False, "tool.autoctl.version"
        )
        build_meta = _get_typed(tool_version, "build-meta", bool, False, "tool.autoctl.version")

        release_name = _get_typed(
            tool_version, "release", str, ReleaseType.PATCH.value, "tool.autoctl.version"
        )
        try:
            release = ReleaseType(release_name)
        except ValueError as e:
            choices = ", ".join(r.value for r in ReleaseType)
            raise ConfigError(
                f"Unknown release kind {release_name!r} in [tool.autoctl.version]. "
                f"Expected one of: {choices}"
            ) from e

        return cls(
            project_dir=project_dir,
            version=version,
            preid=preid,
            identifier_base=identifier_base,
            release=release,
            build_meta=build_meta,
        )


def _get_table(table: dict[str, Any], key: str, prefix: str = "") -> dict[str, Any]:
    value = table.get(key, {})
    if not isinstance(value, dict):
        raise ConfigError(f"[{prefix}{key}] must be a table, got {type(value).__name__}")
    return value


def _get_typed(table: dict[str, Any], key: str, expected: type, default: Any, section: str) -> Any:
    value = table.get(key, default)
    if not isinstance(value, expected):
        raise ConfigError(
            f"{key} in [{section}] must be a {expected.__name__}, got {type(value).__name__}"
        )
    return value


def find_project_root(start_dir: Optional[str | Path] = None) -> Optional[Path]:
    """Find the project root by looking for pyproject.toml.

    Args:
        start_dir: Directory to start searching from (defaults to cwd)

    Returns:
        Path to the project root directory, or None if there is none
    """
    current = Path(start_dir) if start_dir else Path.cwd()
    current = current.resolve()

    for directory in (current, *current.parents):
        if (directory / "pyproject.toml").exists():
            return directory

    return None


def load_config(project_dir: Optional[str | Path] = None) -> CLIConfig:
    """Load CLI configuration from the project directory.

    Args:
        project_dir: Project directory (defaults to finding project root)

    Returns:
        CLIConfig instance, with defaults when no pyproject.toml exists

    Raises:
        ConfigError: If configuration cannot be loaded
    """
    root = find_project_root(project_dir)
    if root is None:
        return CLIConfig(project_dir=Path(project_dir) if project_dir else Path.cwd())

    return CLIConfig.from_pyproject(root)
