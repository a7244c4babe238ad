"""Core resolution functionality for pgcodegen.

This module contains the batch resolution logic used by the CLI,
allowing programmatic access to whole-catalog resolution.
"""

from pgcodegen.core.resolve import (
    ResolvedColumn,
    ResolveResult,
    ResolveStatistics,
    resolve_catalog,
)

__all__ = [
    "ResolveResult",
    "ResolveStatistics",
    "ResolvedColumn",
    "resolve_catalog",
]
