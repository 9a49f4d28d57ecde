"""Minimal logging utilities for mathsplice.

Provides a simple get_logger function that wraps the standard library logging.
The library never installs handlers; applications configure logging.

Example:
    >>> from mathsplice.utils.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.debug("Rendering %d spans", 3)
"""

from __future__ import annotations

import logging

_ROOT = "mathsplice"


def get_logger(name: str) -> logging.Logger:
    """Get a logger for the given name.

    Returns a standard library logger under the "mathsplice." namespace.

    Args:
        name: Logger name (typically __name__)

    Returns:
        logging.Logger instance

    Example:
        >>> logger = get_logger("splice")
        >>> logger.name
        'mathsplice.splice'
    """
    if not (name == _ROOT or name.startswith(f"{_ROOT}.")):
        name = f"{_ROOT}.{name}"
    return logging.getLogger(name)
