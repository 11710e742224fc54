"""Logging helpers for Stylify.

Example:
    >>> from stylify.utils.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.debug("Compiled 3 styles")
"""

import logging


def get_logger(name: str) -> logging.Logger:
    """Get a logger namespaced under ``stylify``.

    Args:
        name: Logger name (typically __name__)

    Returns:
        logging.Logger instance

    Example:
        >>> get_logger("catalog").name
        'stylify.catalog'
    """
    if not (name == "stylify" or name.startswith("stylify.")):
        name = f"stylify.{name}"
    return logging.getLogger(name)
