"""Shared terminal output and logging setup."""

import logging

from rich.console import Console
from rich.logging import RichHandler

__all__ = ("configure_logging", "console", "logger")

console = Console()
logger = logging.getLogger("react_faststart")


def configure_logging(level: "str | int" = logging.WARNING) -> None:
    """Attach a rich handler to the package logger.

    Calling this more than once only updates the level.

    Args:
        level: Log level name or number.
    """
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.WARNING
    logger.setLevel(level)
    if not any(isinstance(handler, RichHandler) for handler in logger.handlers):
        handler = RichHandler(console=console, show_path=False, show_time=False)
        handler.setFormatter(logging.Formatter("%(message)s"))
        logger.addHandler(handler)
    logger.propagate = False
