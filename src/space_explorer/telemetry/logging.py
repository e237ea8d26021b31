"""Log sink configuration for the ``space_explorer`` logger tree."""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler

ROOT_LOGGER = "space_explorer"


def configure_logging(level: str = "WARNING", *, console: Console | None = None) -> logging.Logger:
    """Install a single rich handler on the package logger; safe to call repeatedly."""
    logger = logging.getLogger(ROOT_LOGGER)
    logger.setLevel(level.upper())
    for handler in list(logger.handlers):
        if isinstance(handler, RichHandler):
            logger.removeHandler(handler)

    handler = RichHandler(console=console or Console(stderr=True), show_path=False, rich_tracebacks=True)
    logger.addHandler(handler)
    logger.propagate = False
    return logger
