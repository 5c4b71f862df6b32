"""Minimal logging utilities for Notula.

Provides a simple get_logger function that wraps the standard library logging.
Notula never configures handlers; applications decide where records go.

Example:
    >>> from notula.utils.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.debug("Rendering footnotes")
"""

from __future__ import annotations

import logging


def get_logger(name: str) -> logging.Logger:
    """Get a logger for the given name.

    Returns a standard library logger with the "notula." prefix.

    Args:
        name: Logger name (typically __name__)

    Returns:
        logging.Logger instance

    Example:
        >>> logger = get_logger("collector")
        >>> logger.name
        'notula.collector'
    """
    if not (name == "notula" or name.startswith("notula.")):
        name = f"notula.{name}"
    return logging.getLogger(name)
