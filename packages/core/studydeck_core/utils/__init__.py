"""Utility functions."""

from studydeck_core.utils.logging import get_logger, log_exceptions, set_package_level

__all__ = [
    "get_logger",
    "log_exceptions",
    "set_package_level",
]
