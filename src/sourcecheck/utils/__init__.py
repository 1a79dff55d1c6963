"""Utility modules for sourcecheck.

Provides:
- logger: get_logger for namespaced logging
"""

from sourcecheck.utils.logger import configure_cli_logging, get_logger

__all__ = [
    "configure_cli_logging",
    "get_logger",
]
