"""
Logging configuration for tfplugingen.

All modules obtain their logger through ``get_logger(__name__)``; output is
routed through a single rich handler installed by ``setup_logging``.
"""

import logging
from typing import Optional, Union

from rich.console import Console
from rich.logging import RichHandler

ROOT_LOGGER_NAME = "tfplugingen"

_configured = False


def setup_logging(
    level: Union[int, str] = logging.WARNING, console: Optional[Console] = None
) -> logging.Logger:
    """
    Configure the package logger with a rich handler.

    Calling this again replaces the previous handler, so the level and
    console can be changed at runtime.

    Args:
        level: Logging level name or number
        console: Console to write to (stderr when omitted)

    Returns:
        The package root logger
    """
    global _configured

    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.WARNING

    logger = logging.getLogger(ROOT_LOGGER_NAME)
    for handler in list(logger.handlers):
        if isinstance(handler, RichHandler):
            logger.removeHandler(handler)

    handler = RichHandler(
        console=console or Console(stderr=True),
        show_time=False,
        show_path=False,
        markup=False,
        rich_tracebacks=True,
    )
    handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))

    logger.addHandler(handler)
    logger.setLevel(level)
    _configured = True
    return logger


def get_logger(name: str) -> logging.Logger:
    """Return a logger under the package namespace."""
    if not name.startswith(ROOT_LOGGER_NAME):
        name = f"{ROOT_LOGGER_NAME}.{name}"
    return logging.getLogger(name)


def is_configured() -> bool:
    return _configured
