"""Columns command for pgcodegen CLI."""

from __future__ import annotations

from pathlib import Path

import click
from rich.console import Console

from pgcodegen.adapters.golang import DriverProfile
from pgcodegen.cli import RichCommand, format_columns_table, format_warning
from pgcodegen.cli.utils import load_cli_catalog, load_cli_config
from pgcodegen.core import resolve_catalog
from pgcodegen.diagnostics import configure_logging

console = Console()


@click.command(cls=RichCommand)
@click.option(
    "--config",
    "-c",
    type=click.Path(exists=True, path_type=Path),
    help="Path to pgcodegen.yml config file (auto-detected if not specified)",
)
@click.option(
    "--driver",
    type=click.Choice([p.value for p in DriverProfile]),
    default=None,
    help="Override go.sql_package from config",
)
@click.option(
    "--debug",
    is_flag=True,
    help="Log unresolved types and show full stacktraces",
)
def columns(config: Path | None, driver: str | None, debug: bool) -> None:
    """Resolve the Go type of every table column in the catalog.

    ## Examples

        $ pgcodegen columns

        $ pgcodegen columns --driver pgx/v4
    """
    cfg, config_path = load_cli_config(console, config, debug)
    assert cfg is not None

    debug = debug or cfg.options.debug
    configure_logging(debug)

    catalog = load_cli_catalog(console, cfg.catalog_path, debug)
    profile = DriverProfile(driver) if driver else cfg.go.driver

    result = resolve_catalog(catalog, profile, rename=cfg.go.rename, debug=debug)

    console.print(f"[dim]Config:[/dim]  {config_path}")
    console.print(f"[dim]Catalog:[/dim] {cfg.catalog_path}")
    console.print(f"[dim]Driver:[/dim]  {profile.value}")
    console.print()
    console.print(format_columns_table(result))

    stats = result.stats
    console.print(
        f"\n[bold]{stats.columns}[/bold] columns in {stats.tables} tables "
        f"across {stats.schemas} schemas"
    )
    if stats.dynamic:
        console.print(
            format_warning(
                f"{stats.dynamic} column(s) resolved to interface{{}}",
                "Run with --debug to log each unresolved type.",
            )
        )
