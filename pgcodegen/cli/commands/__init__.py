"""CLI commands for pgcodegen.

Commands are registered by importing them in __main__.py.
"""

from __future__ import annotations

from pgcodegen.cli.commands.columns import columns
from pgcodegen.cli.commands.resolve import resolve
from pgcodegen.cli.commands.validate import validate

__all__ = [
    "columns",
    "resolve",
    "validate",
]
