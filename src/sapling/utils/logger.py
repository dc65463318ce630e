"""Minimal logging utilities for Sapling.

Provides a simple get_logger function that wraps the standard library logging.
Library code never installs handlers; the host application decides where
records go.

Example:
    >>> from sapling.utils.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.debug("Rejected insert into %s", "array")
"""

from __future__ import annotations

import logging


def get_logger(name: str) -> logging.Logger:
    """Get a logger for the given name.

    Returns a standard library logger with the "sapling." prefix.

    Args:
        name: Logger name (typically __name__)

    Returns:
        logging.Logger instance

    Example:
        >>> logger = get_logger("editing")
        >>> logger.name
        'sapling.editing'
    """
    if not (name == "sapling" or name.startswith("sapling.")):
        name = f"sapling.{name}"
    return logging.getLogger(name)
