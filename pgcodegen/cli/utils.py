"""Config and catalog loading shared by CLI commands."""

from __future__ import annotations

import traceback
from collections.abc import Callable
from pathlib import Path
from typing import TypeVar

import click
import yaml
from pydantic import ValidationError
from rich.console import Console

from pgcodegen.config import CodegenConfig, find_config, load_config
from pgcodegen.domain import Catalog
from pgcodegen.ingestion import load_catalog

T = TypeVar("T")


def _guarded(console: Console, what: str, debug: bool, load: Callable[[], T]) -> T:
    """Run a loader, converting load errors into ClickException."""
    try:
        return load()
    except FileNotFoundError as e:
        if debug:
            console.print(traceback.format_exc())
        console.print(f"[red]{what} not found:[/red] {e}")
        raise click.ClickException(str(e))
    except yaml.YAMLError as e:
        if debug:
            console.print(traceback.format_exc())
        console.print(f"[red]YAML parsing error:[/red] {e}")
        raise click.ClickException(str(e))
    except ValidationError as e:
        if debug:
            console.print(traceback.format_exc())
        console.print(f"[red]{what} validation error:[/red] {e}")
        raise click.ClickException(str(e))
    except ValueError as e:
        if debug:
            console.print(traceback.format_exc())
        console.print(f"[red]{what} error:[/red] {e}")
        raise click.ClickException(str(e))


def load_cli_config(
    console: Console,
    config: Path | None,
    debug: bool,
    required: bool = True,
) -> tuple[CodegenConfig | None, Path | None]:
    """Load an explicit or auto-detected pgcodegen.yml.

    Args:
        console: Console for error output
        config: Explicit --config path, if given
        debug: Print tracebacks on failure
        required: Fail if no config file can be found

    Returns:
        Tuple of (config, config_path); both None if optional and not found
    """
    config_path = config or find_config()
    if config_path is None:
        if required:
            console.print("[red]No pgcodegen.yml found[/red]")
            console.print("\nCreate a pgcodegen.yml file:")
            console.print("""
[dim]catalog: ./catalog.yml

go:
  sql_package: pgx/v4[/dim]
""")
            raise click.ClickException("Config file not found")
        return None, None

    cfg = _guarded(console, "Config", debug, lambda: load_config(config_path))
    return cfg, config_path


def load_cli_catalog(console: Console, path: Path, debug: bool) -> Catalog:
    """Load a catalog file or directory, converting errors into ClickException."""
    return _guarded(console, "Catalog", debug, lambda: load_catalog(path))
