"""Validate command for pgcodegen CLI."""

from __future__ import annotations

from pathlib import Path

import click
from rich.console import Console

from pgcodegen.cli import RichCommand
from pgcodegen.cli.utils import load_cli_catalog, load_cli_config

console = Console()


@click.command(cls=RichCommand)
@click.option(
    "--config",
    "-c",
    type=click.Path(exists=True, path_type=Path),
    help="Path to pgcodegen.yml config file",
)
@click.option(
    "--debug",
    is_flag=True,
    help="Show full exception stacktraces for troubleshooting",
)
def validate(config: Path | None, debug: bool) -> None:
    """Validate configuration and catalog.

    Checks that:
    - pgcodegen.yml is valid
    - The catalog exists and parses
    - Every table column declares a type

    ## Examples

        $ pgcodegen validate

        $ pgcodegen validate --config ./configs/pgcodegen.yml
    """
    cfg, config_path = load_cli_config(console, config, debug)
    assert cfg is not None
    console.print(f"[green]Config valid:[/green] {config_path}")
    console.print(f"[green]Driver:[/green] {cfg.go.driver.value}")

    catalog = load_cli_catalog(console, cfg.catalog_path, debug)
    console.print(f"[green]Catalog valid:[/green] {cfg.catalog_path}")

    for schema in catalog.schemas:
        console.print(
            f"  - {schema.name}: {len(schema.tables)} tables, "
            f"{len(schema.enums)} enums, {len(schema.composite_types)} composite types"
        )

    if catalog.get_schema(catalog.default_schema) is None:
        console.print(
            f"[yellow]Default schema '{catalog.default_schema}' is not in the catalog[/yellow]"
        )

    console.print("\n[bold green]All checks passed[/bold green]")
