"""Minimal logging utilities for mdnote.

Provides a simple get_logger function that wraps the standard library logging.
The library never installs handlers; hosts configure logging themselves.

Example:
    >>> from mdnote.utils.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.debug("Rendering note")
"""

from __future__ import annotations

import logging


def get_logger(name: str) -> logging.Logger:
    """Get a logger for the given name.

    Returns a standard library logger with the "mdnote." prefix.

    Args:
        name: Logger name (typically __name__)

    Returns:
        logging.Logger instance

    Example:
        >>> logger = get_logger("mymodule")
        >>> logger.name
        'mdnote.mymodule'
    """
    if not (name == "mdnote" or name.startswith("mdnote.")):
        name = f"mdnote.{name}"
    return logging.getLogger(name)
