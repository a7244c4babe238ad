"""Rich formatting utilities for CLI output.

Reusable Rich components for consistent output across commands.
"""

from __future__ import annotations

from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from pgcodegen.core import ResolveResult


def format_warning(message: str, context: str | None = None) -> Panel:
    """Create formatted warning panel.

    Args:
        message: Warning message
        context: Optional additional information

    Returns:
        Panel with warning formatting
    """
    content = f"[bold yellow]{message}[/bold yellow]"
    if context:
        content += f"\n\n[dim]{context}[/dim]"

    return Panel(
        content,
        title="[bold yellow]Warning[/bold yellow]",
        border_style="yellow",
        width=78,
        expand=False,
    )


def format_columns_table(result: ResolveResult, title: str | None = None) -> Table:
    """Build a table of resolved columns.

    Columns that fell back to ``interface{}`` are highlighted in yellow.
    """
    table = Table(title=title)
    table.add_column("Schema", style="blue")
    table.add_column("Table")
    table.add_column("Column")
    table.add_column("SQL type", style="dim")
    table.add_column("Go type")

    for col in result.columns:
        # Text avoids markup parsing of identifiers like []byte
        go_type = Text(col.go_type, style="yellow" if col.is_dynamic else "green")
        table.add_row(
            Text(col.schema_name),
            Text(col.table),
            Text(col.column),
            Text(col.declared_type),
            go_type,
        )

    return table
