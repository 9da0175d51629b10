"""
Logging setup for CertLayout.

Library modules only create module loggers; handlers are attached by the
application (CLI or host service) through ``configure_logging``.
"""

import logging
import sys
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler

_VALID_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DEFAULT_DATEFMT = "%Y-%m-%d %H:%M:%S"


def get_logger(name: str) -> logging.Logger:
    """
    Get logger instance for module.

    Args:
        name: Logger name

    Returns:
        Logger instance
    """
    if not name or not isinstance(name, str):
        raise ValueError("Logger name must be a non-empty string")
    return logging.getLogger(name)


def configure_logging(
    level: str = "INFO",
    rich_output: bool = True,
    format_string: Optional[str] = None,
    console: Optional[Console] = None,
) -> logging.Logger:
    """
    Configure the ``certlayout`` logger hierarchy.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        rich_output: Use rich's colored handler instead of a plain stream handler
        format_string: Custom format string for the plain handler
        console: Rich console to write to (defaults to stderr)

    Returns:
        The configured package logger
    """
    if not isinstance(level, str) or level.upper() not in _VALID_LEVELS:
        raise ValueError(f"Invalid log level: {level}")

    numeric_level = getattr(logging, level.upper())
    logger = logging.getLogger("certlayout")
    logger.setLevel(numeric_level)
    logger.handlers.clear()

    if rich_output:
        handler: logging.Handler = RichHandler(
            console=console or Console(stderr=True),
            show_time=True,
            show_path=False,
            markup=False,
            rich_tracebacks=True,
        )
        handler.setFormatter(logging.Formatter(fmt="%(message)s", datefmt="[%X]"))
    else:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(format_string or DEFAULT_FORMAT, datefmt=DEFAULT_DATEFMT))

    handler.setLevel(numeric_level)
    logger.addHandler(handler)
    return logger
