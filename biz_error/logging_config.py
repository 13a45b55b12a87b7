"""Logging helpers shared by every biz_error module.

Modules obtain a logger with ``get_logger(__name__)``. The library itself only
installs a ``NullHandler``; applications (or the CLI) call ``setup_logging``
to get rich-formatted output.
"""

import logging

from rich.console import Console
from rich.logging import RichHandler

ROOT_LOGGER_NAME = "biz_error"

logging.getLogger(ROOT_LOGGER_NAME).addHandler(logging.NullHandler())


def get_logger(name: str) -> logging.Logger:
    """Return a logger for the given module name."""
    return logging.getLogger(name)


def setup_logging(level: str | int = "WARNING") -> logging.Logger:
    """Configure the package logger to render through rich on stderr.

    Args:
        level: Logging level name or number.

    Returns:
        The configured package root logger.
    """
    logger = logging.getLogger(ROOT_LOGGER_NAME)

    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.WARNING
    logger.setLevel(level)

    # Replace handlers installed by a previous call
    for handler in list(logger.handlers):
        if isinstance(handler, RichHandler):
            logger.removeHandler(handler)

    handler = RichHandler(
        console=Console(stderr=True),
        show_path=False,
        rich_tracebacks=True,
    )
    handler.setFormatter(logging.Formatter("%(message)s"))
    logger.addHandler(handler)
    return logger
