# SPDX-License-Identifier: MIT
"""Reading and writing the version recorded in project files.

A project's version may live in ``composer.json``, ``package.json`` or a
plain ``VERSION`` file. Files are consulted in priority order; JSON files
only count when their top-level ``"version"`` is a string.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Optional

logger = logging.getLogger(__name__)

DEFAULT_VERSION_FILES = ("composer.json", "package.json", "VERSION")


class VersionFileError(Exception):
    """Raised when a version file cannot be read or written."""

    pass


@dataclass(frozen=True, slots=True)
class VersionSource:
    """Where a project's current version was found.

    Attributes:
        path: The file holding the version
        version: The version text as recorded in the file
    """

    path: Path
    version: str


def _is_json(path: Path) -> bool:
    return path.suffix.lower() == ".json"


def _read_text(path: Path) -> str:
    try:
        return path.read_text(encoding="utf-8")
    except OSError as e:
        raise VersionFileError(f"Cannot read {path}: {e}") from e


def _load_json_object(path: Path, contents: str) -> Optional[dict]:
    try:
        data = json.loads(contents)
    except json.JSONDecodeError as e:
        logger.debug("Skipping %s: invalid JSON (%s)", path, e)
        return None
    if not isinstance(data, dict):
        logger.debug("Skipping %s: top level is not an object", path)
        return None
    if not isinstance(data.get("version"), str):
        logger.debug("Skipping %s: no string \"version\" field", path)
        return None
    return data


def read_version(path: Path) -> Optional[str]:
    """Read the version recorded in a file.

    Returns:
        The version text, or None if the file is missing or records no version

    Raises:
        VersionFileError: If the file exists but cannot be read
    """
    if not path.is_file():
        return None

    contents = _read_text(path)
    if _is_json(path):
        data = _load_json_object(path, contents)
        return None if data is None else data["version"]

    version = contents.strip()
    if not version:
        logger.debug("Skipping %s: file is empty", path)
        return None
    return version


def find_version(
    project_dir: Path,
    files: Iterable[str] = DEFAULT_VERSION_FILES,
) -> Optional[VersionSource]:
    """Find the current version in the highest-priority file that has one.

    Args:
        project_dir: Directory to look in
        files: File names, highest priority first

    Returns:
        A VersionSource, or None if no file records a version
    """
    for name in files:
        path = project_dir / name
        version = read_version(path)
        if version is not None:
            logger.debug("Found version %s in %s", version, path)
            return VersionSource(path=path, version=version)
    return None


def _write_text(path: Path, contents: str) -> None:
    try:
        path.write_text(contents, encoding="utf-8")
    except OSError as e:
        raise VersionFileError(f"Cannot write {path}: {e}") from e


def write_version(path: Path, new_version: str) -> bool:
    """Record a new version in a file.

    JSON files are rewritten with two-space indentation and their key order
    kept; they are left alone unless they already have a string ``version``.
    Plain files are replaced by the version, keeping a trailing newline if
    there was one.

    Returns:
        True if the file was updated

    Raises:
        VersionFileError: If the file cannot be read or written
    """
    if not path.is_file():
        return False

    contents = _read_text(path)
    newline = "\n" if contents.endswith("\n") else ""

    if _is_json(path):
        data = _load_json_object(path, contents)
        if data is None:
            return False
        data["version"] = new_version
        _write_text(path, json.dumps(data, indent=2, ensure_ascii=False) + newline)
    else:
        _write_text(path, new_version + newline)

    logger.debug("Wrote version %s to %s", new_version, path)
    return True


def update_version_files(
    project_dir: Path,
    new_version: str,
    files: Iterable[str] = DEFAULT_VERSION_FILES,
) -> list[Path]:
    """Write a new version to every listed file that exists.

    Returns:
        The paths that were updated
    """
    updated: list[Path] = []
    for name in files:
        path = project_dir / name
        if write_version(path, new_version):
            updated.append(path)
    return updated
