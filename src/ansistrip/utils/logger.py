"""Minimal logging utilities for ansistrip.

Provides a simple get_logger function that wraps the standard library logging.
The library never installs handlers; configuring output is the caller's job.

Example:
    >>> from ansistrip.utils.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.debug("Stripping input")
"""

from __future__ import annotations

import logging


def get_logger(name: str) -> logging.Logger:
    """Get a logger for the given name.

    Returns a standard library logger with the "ansistrip." prefix.

    Args:
        name: Logger name (typically __name__)

    Returns:
        logging.Logger instance

    Example:
        >>> logger = get_logger("mymodule")
        >>> logger.name
        'ansistrip.mymodule'
    """
    if not (name == "ansistrip" or name.startswith("ansistrip.")):
        name = f"ansistrip.{name}"
    return logging.getLogger(name)
