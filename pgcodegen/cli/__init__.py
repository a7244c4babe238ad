"""CLI utilities for pgcodegen.

This package provides Rich-based formatting utilities and custom Click
command classes for consistent CLI output.
"""

from __future__ import annotations

from pgcodegen.cli.formatting import (
    format_columns_table,
    format_warning,
)
from pgcodegen.cli.help_formatter import RichCommand, RichGroup

__all__ = [
    "format_columns_table",
    "format_warning",
    "RichCommand",
    "RichGroup",
]
