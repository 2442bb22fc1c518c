"""Logging setup shared by the CLI and the rich renderer."""

import logging

from rich.console import Console
from rich.logging import RichHandler

# stderr so stdout carries only send_and_print output
console = Console(stderr=True)

PACKAGE_LOGGER = "progress_relay"


def configure_logging(level: str | int = logging.WARNING) -> logging.Logger:
    """Install a RichHandler on the package logger.

    Calling this more than once replaces the previous handler instead of
    stacking a second one.
    """
    if isinstance(level, str):
        resolved = logging.getLevelName(level.upper())
        if not isinstance(resolved, int):
            raise ValueError(f"Unknown log level: {level}")
        level = resolved

    logger = logging.getLogger(PACKAGE_LOGGER)
    for handler in list(logger.handlers):
        if isinstance(handler, RichHandler):
            logger.removeHandler(handler)

    handler = RichHandler(console=console, show_path=False, markup=False)
    handler.setFormatter(logging.Formatter("%(message)s"))
    logger.addHandler(handler)
    logger.setLevel(level)
    return logger
