"""Logging setup for lengthkit.

The package logs through the standard ``logging`` hierarchy under the
``lengthkit`` logger. Nothing is printed unless the application configures
logging itself or calls enable_console_logging(), which routes records to a
rich console on stderr.
"""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler

CONSOLE = Console(stderr=True)

LOGGER = logging.getLogger("lengthkit")
LOGGER.addHandler(logging.NullHandler())


def get_logger(name: str | None = None) -> logging.Logger:
    """Return the package logger or one of its children.

    Args:
        name: Child logger name such as ``"parser"``. None returns the
            package logger itself.

    Returns:
        logging.Logger: The requested logger.
    """
    if name is None:
        return LOGGER
    return LOGGER.getChild(name)


def enable_console_logging(level: int = logging.DEBUG, console: Console | None = None) -> RichHandler:
    """Attach a rich handler to the package logger.

    Calling this more than once reuses the existing handler and only updates
    its level.

    Args:
        level: Minimum level of records to show.
        console: Console to render into. Defaults to the shared stderr console.

    Returns:
        RichHandler: The handler attached to the package logger.
    """
    for handler in LOGGER.handlers:
        if isinstance(handler, RichHandler):
            handler.setLevel(level)
            LOGGER.setLevel(level)
            return handler

    handler = RichHandler(console=console or CONSOLE, show_path=False, rich_tracebacks=True)
    handler.setLevel(level)
    LOGGER.addHandler(handler)
    LOGGER.setLevel(level)
    return handler
