"""Logging setup for Syndox."""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler
from rich.theme import Theme

LOGGER_NAME = "syndox"


def _create_console() -> Console:
    theme = Theme(
        {
            "logging.level.debug": "cyan",
            "logging.level.info": "green",
            "logging.level.warning": "yellow",
            "logging.level.error": "red bold",
            "log.time": "dim cyan",
        }
    )
    return Console(theme=theme, stderr=True)


def setup_logging(level: str = "INFO", console: Console | None = None) -> logging.Logger:
    """Install a rich handler on the ``syndox`` logger.

    Calling it again replaces the previous handler.
    """
    logger = logging.getLogger(LOGGER_NAME)
    if logger.handlers:
        logger.handlers.clear()

    log_level = getattr(logging, level.upper())
    logger.setLevel(log_level)

    handler = RichHandler(
        console=console or _create_console(),
        show_time=True,
        show_level=True,
        show_path=False,
        markup=False,
        rich_tracebacks=True,
        log_time_format="[%H:%M:%S]",
    )
    handler.setLevel(log_level)
    logger.addHandler(handler)
    logger.propagate = False
    return logger
