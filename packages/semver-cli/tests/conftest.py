# SPDX-License-Identifier: MIT
"""Pytest configuration and fixtures for CLI tests."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from click.testing import CliRunner


@pytest.fixture
def cli_runner() -> CliRunner:
    """Create a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def temp_project(tmp_path: Path) -> Path:
    """Create a project directory with all three version files."""
    project_dir = tmp_path / "test_project"
    project_dir.mkdir()

    (project_dir / "composer.json").write_text(
        json.dumps({"name": "acme/test", "version": "1.2.3", "require": {}}, indent=4) + "\n"
    )
    (project_dir / "package.json").write_text(
        json.dumps({"name": "test", "version": "1.2.3", "private": True}, indent=2)
    )
    (project_dir / "VERSION").write_text("1.2.3\n")

    return project_dir


@pytest.fixture
def pyproject_project(tmp_path: Path) -> Path:
    """Create a project with a [tool.semver] table and a VERSION file."""
    project_dir = tmp_path / "configured_project"
    project_dir.mkdir()

    (project_dir / "pyproject.toml").write_text(
        """[project]
name = "configured"
version = "0.0.0"

[tool.semver]
default_bump = "minor"
prerelease_identifier = "rc"
files = ["VERSION", "package.json"]
"""
    )
    (project_dir / "VERSION").write_text("2.4.1\n")
    (project_dir / "package.json").write_text(json.dumps({"version": "0.0.1"}))

    return project_dir
