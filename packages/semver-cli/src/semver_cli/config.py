# SPDX-License-Identifier: MIT
"""CLI configuration loading from pyproject.toml."""

from __future__ import annotations

import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Optional

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib

from semver_core import BumpKind, ParseError, classify_identifier

from .version_files import DEFAULT_VERSION_FILES


class ConfigError(Exception):
    """Raised when configuration loading fails."""

    pass


@dataclass
class SemverConfig:
    """CLI configuration loaded from the ``[tool.semver]`` table.

    Attributes:
        project_dir: Directory holding the version files
        default_bump: Bump kind offered when none is given on the command line
        prerelease_identifier: Pre-release line used by prerelease bumps
            (e.g., "rc"), or None for a bare numeric counter
        files: Version files to read and update, highest priority first
    """

    project_dir: Path
    default_bump: str = BumpKind.PATCH.value
    prerelease_identifier: Optional[str] = None
    files: list[str] = field(default_factory=lambda: list(DEFAULT_VERSION_FILES))

    @classmethod
    def from_pyproject(cls, project_dir: str | Path) -> "SemverConfig":
        """Load configuration from pyproject.toml.

        Args:
            project_dir: Directory containing pyproject.toml

        Returns:
            SemverConfig instance

        Raises:
            ConfigError: If the file is invalid or has invalid settings
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
    ) -> "SemverConfig":
        """Create SemverConfig from a parsed pyproject.toml dictionary.

        Args:
            pyproject: Parsed pyproject.toml as a dictionary
            project_dir: Directory containing pyproject.toml

        Returns:
            SemverConfig instance

        Raises:
            ConfigError: If a [tool.semver] setting is invalid
        """
        tool_semver = pyproject.get("tool", {}).get("semver", {})
        if not isinstance(tool_semver, dict):
            raise ConfigError("[tool.semver] must be a table")

        default_bump = tool_semver.get("default_bump", BumpKind.PATCH.value)
        try:
            default_bump = BumpKind.from_name(str(default_bump)).value
        except ValueError as e:
            raise ConfigError(f"[tool.semver].default_bump: {e}") from e

        identifier = tool_semver.get("prerelease_identifier") or None
        if identifier is not None:
            identifier = str(identifier)
            try:
                for part in identifier.split("."):
                    classify_identifier(part, identifier)
            except ParseError as e:
                raise ConfigError(f"[tool.semver].prerelease_identifier: {e}") from e

        files = tool_semver.get("files", list(DEFAULT_VERSION_FILES))
        if (
            not isinstance(files, list)
            or not files
            or not all(isinstance(name, str) and name for name in files)
        ):
            raise ConfigError("[tool.semver].files must be a non-empty list of file names")

        return cls(
            project_dir=project_dir,
            default_bump=default_bump,
            prerelease_identifier=identifier,
            files=files,
        )


def load_config(project_dir: Optional[str | Path] = None) -> SemverConfig:
    """Load CLI configuration from the project directory.

    Args:
        project_dir: Project directory (defaults to the current directory)

    Returns:
        SemverConfig instance; defaults when there is no pyproject.toml

    Raises:
        ConfigError: If configuration cannot be loaded
    """
    project_path = Path(project_dir) if project_dir else Path.cwd()

    if (project_path / "pyproject.toml").exists():
        return SemverConfig.from_pyproject(project_path)

    return SemverConfig(project_dir=project_path)
