# SPDX-License-Identifier: MIT
"""Tests for CLI configuration loading."""

from __future__ import annotations

from pathlib import Path

import pytest

from autoctl_version import ReleaseType
from autoctl_cli.config import CLIConfig, ConfigError, find_project_root, load_config


class TestFromPyprojectDict:
    """Tests for CLIConfig.from_pyproject_dict."""

    def test_defaults(self, tmp_path: Path) -> None:
        """Test defaults for an empty pyproject."""
        config = CLIConfig.from_pyproject_dict({}, tmp_path)
        assert config.version == ""
        assert config.preid == ""
        assert config.identifier_base is False
        assert config.release is ReleaseType.PATCH
        assert config.build_meta is False

    def test_all_settings(self, tmp_path: Path) -> None:
        """Test reading every setting."""
        config = CLIConfig.from_pyproject_dict(
            {
                "project": {"version": "2.0.0"},
                "tool": {
                    "autoctl": {
                        "version": {
                            "preid": "beta",
                            "identifier-base": True,
                            "release": "preminor",
                            "build-meta": True,
                        }
                    }
                },
            },
            tmp_path,
        )
        assert config.version == "2.0.0"
        assert config.preid == "beta"
        assert config.identifier_base is True
        assert config.release is ReleaseType.PREMINOR
        assert config.build_meta is True

    def test_unknown_release(self, tmp_path: Path) -> None:
        """Test that an unknown release kind is rejected."""
        with pytest.raises(ConfigError, match="Unknown release kind"):
            CLIConfig.from_pyproject_dict(
                {"tool": {"autoctl": {"version": {"release": "pre"}}}}, tmp_path
            )

    def test_wrong_type(self, tmp_path: Path) -> None:
        """Test that a wrongly typed value is rejected."""
        with pytest.raises(ConfigError, match="identifier-base"):
            CLIConfig.from_pyproject_dict(
                {"tool": {"autoctl": {"version": {"identifier-base": "yes"}}}}, tmp_path
            )

    def test_section_not_a_table(self, tmp_path: Path) -> None:
        """Test that [tool.autoctl.version] must be a table."""
        with pytest.raises(ConfigError):
            CLIConfig.from_pyproject_dict({"tool": {"autoctl": {"version": "1.0.0"}}}, tmp_path)

    @pytest.mark.parametrize(
        "pyproject,section",
        [
            ({"tool": {"autoctl": 1}}, "[tool.autoctl]"),
            ({"tool": "autoctl"}, "[tool]"),
            ({"project": ["1.0.0"]}, "[project]"),
        ],
    )
    def test_outer_section_not_a_table(
        self, tmp_path: Path, pyproject: dict, section: str
    ) -> None:
        """Test that every enclosing section must be a table as well."""
        with pytest.raises(ConfigError, match="must be a table") as exc_info:
            CLIConfig.from_pyproject_dict(pyproject, tmp_path)
        assert section in str(exc_info.value)


class TestLoadConfig:
    """Tests for loading configuration from disk."""

    def test_from_pyproject(self, temp_project: Path) -> None:
        """Test loading the fixture project."""
        config = CLIConfig.from_pyproject(temp_project)
        assert config.version == "1.4.2"
        assert config.preid == "rc"
        assert config.release is ReleaseType.PRERELEASE

    def test_missing_pyproject(self, tmp_path: Path) -> None:
        """Test that from_pyproject needs a pyproject.toml."""
        with pytest.raises(FileNotFoundError):
            CLIConfig.from_pyproject(tmp_path)

    def test_invalid_toml(self, tmp_path: Path) -> None:
        """Test that invalid TOML raises ConfigError."""
        (tmp_path / "pyproject.toml").write_text("[project\nname = ")
        with pytest.raises(ConfigError, match="Invalid TOML"):
            load_config(tmp_path)

    def test_find_project_root_walks_up(self, temp_project: Path) -> None:
        """Test that the project root is found from a subdirectory."""
        nested = temp_project / "src" / "pkg"
        nested.mkdir(parents=True)
        assert find_project_root(nested) == temp_project.resolve()
        assert load_config(nested).version == "1.4.2"
