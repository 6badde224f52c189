"""Logging setup for the marklint command line."""

import logging

from rich.console import Console
from rich.logging import RichHandler

_LOGGER_NAME = "marklint"


def configure_logging(*, verbose: bool = False, console: Console | None = None) -> logging.Logger:
    """
    Route marklint log records to stderr through Rich.

    Args:
        verbose: log DEBUG and up instead of WARNING and up
        console: console to write to (stderr by default)

    Returns:
        the package logger
    """
    level = logging.DEBUG if verbose else logging.WARNING
    logger = logging.getLogger(_LOGGER_NAME)
    logger.setLevel(level)
    logger.propagate = False

    # Reset handlers so repeated invocations in one process do not duplicate output.
    for handler in list(logger.handlers):
        logger.removeHandler(handler)

    handler = RichHandler(
        console=console or Console(stderr=True),
        show_time=verbose,
        show_path=False,
    )
    handler.setLevel(level)
    logger.addHandler(handler)
    return logger
