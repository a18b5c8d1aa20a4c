"""Logging configuration for the JSON path toolkit."""

from __future__ import annotations

import logging
import sys
from typing import TextIO

LOGGER_NAME = "json_path_toolkit"

# Verbosity level constants for external use
VERBOSITY_SILENT = 0  # Only errors
VERBOSITY_INFO = 1  # Directory creation and lookups
VERBOSITY_DEBUG = 2  # Fallbacks and swallowed failures


def get_logger(name: str | None = None) -> logging.Logger:
    """Get the toolkit logger, or a child of it.

    Args:
        name: Optional child name, e.g. ``"reader"`` gives ``json_path_toolkit.reader``

    Returns:
        The logger instance
    """
    if name:
        return logging.getLogger(f"{LOGGER_NAME}.{name}")
    return logging.getLogger(LOGGER_NAME)


def setup_logger(verbosity: int, stream: TextIO | None = None) -> None:
    """Configure the toolkit logger with a verbosity level.

    Can be called multiple times to reconfigure the logger.

    Args:
        verbosity: 0=silent (errors only), 1=info, 2+=debug
        stream: Optional output stream (defaults to sys.stderr, useful for testing)
    """
    logger = get_logger()

    logger.handlers.clear()

    if verbosity <= VERBOSITY_SILENT:
        level = logging.ERROR
    elif verbosity == VERBOSITY_INFO:
        level = logging.INFO
    else:
        level = logging.DEBUG
    logger.setLevel(level)

    output_stream = stream if stream is not None else sys.stderr

    handler = logging.StreamHandler(output_stream)
    handler.setFormatter(logging.Formatter("%(levelname)s %(name)s: %(message)s"))
    logger.addHandler(handler)
    logger.propagate = False


def reset_logger() -> None:
    """Reset the logger to clean state.

    Useful for testing to ensure clean state between tests.
    """
    logger = get_logger()
    logger.handlers.clear()
    logger.setLevel(logging.NOTSET)
    logger.propagate = True
