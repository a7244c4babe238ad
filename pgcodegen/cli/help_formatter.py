"""Click command classes with wider help output."""

from __future__ import annotations

import click

HELP_WIDTH = 88


class _WideHelpMixin:
    """Render help text at HELP_WIDTH instead of the terminal default."""

    def get_help(self, ctx: click.Context) -> str:
        formatter = click.HelpFormatter(width=HELP_WIDTH)
        self.format_help(ctx, formatter)  # type: ignore[attr-defined]
        return formatter.getvalue()


class RichCommand(_WideHelpMixin, click.Command):
    """Click command with wide help formatting."""


class RichGroup(_WideHelpMixin, click.Group):
    """Click group with wide help formatting."""
