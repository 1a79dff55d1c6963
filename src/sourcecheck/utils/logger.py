"""Minimal logging utilities for sourcecheck.

Provides a simple get_logger function that wraps the standard library logging.
The library never installs handlers; the command line does that.

Example:
    >>> from sourcecheck.utils.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.debug("Scanning %s", "main.cpp")
"""

from __future__ import annotations

import logging

ROOT_LOGGER_NAME = "sourcecheck"


def get_logger(name: str) -> logging.Logger:
    """Get a logger for the given name.

    Returns a standard library logger with the "sourcecheck." prefix.

    Args:
        name: Logger name (typically __name__)

    Returns:
        logging.Logger instance

    Example:
        >>> logger = get_logger("mymodule")
        >>> logger.name
        'sourcecheck.mymodule'
    """
    if not (name == ROOT_LOGGER_NAME or name.startswith(f"{ROOT_LOGGER_NAME}.")):
        name = f"{ROOT_LOGGER_NAME}.{name}"
    return logging.getLogger(name)


def configure_cli_logging(verbose: bool = False) -> logging.Handler:
    """Attach a stderr handler to the package root logger.

    Used by the command line only. Returns the handler so callers (and tests)
    can detach it again.
    """
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter("%(levelname)s %(name)s: %(message)s"))
    root = logging.getLogger(ROOT_LOGGER_NAME)
    root.addHandler(handler)
    root.setLevel(logging.DEBUG if verbose else logging.WARNING)
    return handler
