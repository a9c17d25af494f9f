# SPDX-License-Identifier: MIT
"""Command-line version bumping built on semver_core."""

__version__ = "0.1.0"
