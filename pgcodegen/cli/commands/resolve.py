"""Resolve command for pgcodegen CLI."""

from __future__ import annotations

from pathlib import Path

import click
from pydantic import ValidationError
from rich.console import Console

from pgcodegen.adapters.golang import DriverProfile, postgres_type
from pgcodegen.cli import RichCommand
from pgcodegen.cli.utils import load_cli_catalog, load_cli_config
from pgcodegen.diagnostics import configure_logging
from pgcodegen.domain import Catalog, Column

console = Console(stderr=True)


@click.command(cls=RichCommand)
@click.argument("declared_type")
@click.option("--not-null", is_flag=True, help="Column is NOT NULL")
@click.option("--array", "is_array", is_flag=True, help="Column is an array")
@click.option(
    "--driver",
    type=click.Choice([p.value for p in DriverProfile]),
    default=None,
    help="Driver profile (defaults to go.sql_package from config)",
)
@click.option(
    "--catalog",
    type=click.Path(exists=True, path_type=Path),
    help="Catalog YAML file or directory (defaults to config catalog)",
)
@click.option(
    "--config",
    "-c",
    type=click.Path(exists=True, path_type=Path),
    help="Path to pgcodegen.yml config file (auto-detected if not specified)",
)
@click.option(
    "--debug",
    is_flag=True,
    help="Log unresolved types and show full stacktraces",
)
def resolve(
    declared_type: str,
    not_null: bool,
    is_array: bool,
    driver: str | None,
    catalog: Path | None,
    config: Path | None,
    debug: bool,
) -> None:
    """Print the Go type for a single PostgreSQL column type.

    ## Examples

    Built-in type:

        $ pgcodegen resolve bigint

    Nullable JSON under pgx:

        $ pgcodegen resolve jsonb --driver pgx/v4

    Enum from a catalog:

        $ pgcodegen resolve billing.status --catalog catalog.yml
    """
    cfg, _ = load_cli_config(console, config, debug, required=False)

    if catalog is not None:
        cat = load_cli_catalog(console, catalog, debug)
    elif cfg is not None:
        cat = load_cli_catalog(console, cfg.catalog_path, debug)
    else:
        cat = Catalog()

    if driver is not None:
        profile = DriverProfile(driver)
    elif cfg is not None:
        profile = cfg.go.driver
    else:
        profile = DriverProfile.STANDARD

    rename = cfg.go.rename if cfg is not None else None
    debug = debug or (cfg is not None and cfg.options.debug)
    configure_logging(debug, console=console)

    try:
        column = Column(declared_type=declared_type, not_null=not_null, is_array=is_array)
    except ValidationError as e:
        console.print(f"[red]Invalid column:[/red] {e}")
        raise click.ClickException("Declared type must not be empty")

    click.echo(postgres_type(cat, column, profile, rename=rename, debug=debug))
