"""Logging setup for the pgcodegen CLI.

Library modules only create loggers with ``logging.getLogger(__name__)``;
handlers are attached here, by the CLI.
"""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler

LOGGER_NAME = "pgcodegen"


def configure_logging(debug: bool = False, console: Console | None = None) -> logging.Logger:
    """Attach a Rich handler to the pgcodegen logger.

    Args:
        debug: Log at DEBUG instead of WARNING
        console: Console to write to (defaults to stderr)

    Returns:
        The configured package logger
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(logging.DEBUG if debug else logging.WARNING)

    for handler in list(logger.handlers):
        if isinstance(handler, RichHandler):
            logger.removeHandler(handler)

    logger.addHandler(
        RichHandler(
            console=console or Console(stderr=True),
            show_time=False,
            show_path=debug,
            markup=False,
        )
    )
    return logger
