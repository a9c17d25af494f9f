# SPDX-License-Identifier: MIT
"""CLI command implementations."""

from . import bump, validate, compare, sort, satisfies

__all__ = ["bump", "validate", "compare", "sort", "satisfies"]
