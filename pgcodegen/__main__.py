"""Command-line interface for pgcodegen."""

from __future__ import annotations

import click

from pgcodegen.cli import RichGroup
from pgcodegen.cli.commands import columns, resolve, validate


@click.group(cls=RichGroup)
@click.version_option(package_name="pgcodegen")
def cli() -> None:
    """Resolve PostgreSQL column types to Go types.

    Single type:

        $ pgcodegen resolve numeric --driver pgx/v4

    Whole catalog, using pgcodegen.yml:

        $ pgcodegen columns
    """
    pass


cli.add_command(resolve)
cli.add_command(columns)
cli.add_command(validate)


if __name__ == "__main__":
    cli()
