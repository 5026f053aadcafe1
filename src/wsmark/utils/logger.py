"""Minimal logging utilities for wsmark.

Provides a simple get_logger function that wraps the standard library logging.

Example:
    >>> from wsmark.utils.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.debug("Parsing document")
"""

from __future__ import annotations

import logging


def get_logger(name: str) -> logging.Logger:
    """Get a logger for the given name.

    Returns a standard library logger with the "wsmark." prefix.

    Args:
        name: Logger name (typically __name__)

    Returns:
        logging.Logger instance

    Example:
        >>> logger = get_logger("mymodule")
        >>> logger.name
        'wsmark.mymodule'
    """
    if not (name == "wsmark" or name.startswith("wsmark.")):
        name = f"wsmark.{name}"
    return logging.getLogger(name)
