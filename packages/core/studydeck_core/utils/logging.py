"""Logging helpers shared by the extraction core, exporters and pipeline."""

import logging
import os
import sys
from functools import wraps
from typing import Any, Callable, TypeVar

PACKAGE_LOGGER = "studydeck_core"
_LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

F = TypeVar("F", bound=Callable[..., Any])


def _level_from_env() -> int:
    name = os.environ.get("STUDYDECK_LOG_LEVEL", "INFO").upper()
    return getattr(logging, name, logging.INFO)


def get_logger(name: str, level: int | None = None) -> logging.Logger:
    """Get a logger that writes to stdout.

    Args:
        name: Logger name (typically __name__)
        level: Optional log level override; defaults to STUDYDECK_LOG_LEVEL

    Returns:
        Configured logger
    """
    logger = logging.getLogger(name)

    if not logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter(_LOG_FORMAT))
        logger.addHandler(handler)
        logger.propagate = False

    if level is not None:
        logger.setLevel(level)
    elif logger.level == logging.NOTSET:
        logger.setLevel(_level_from_env())

    return logger


def set_package_level(level: int | str) -> None:
    """Change the level of every logger created under the package namespace.

    Args:
        level: Numeric level or level name such as "DEBUG"
    """
    if isinstance(level, str):
        level = getattr(logging, level.upper(), logging.INFO)

    for name, logger in logging.root.manager.loggerDict.items():
        if name == PACKAGE_LOGGER or name.startswith(f"{PACKAGE_LOGGER}."):
            if isinstance(logger, logging.Logger):
                logger.setLevel(level)


def log_exceptions(logger: logging.Logger) -> Callable[[F], F]:
    """Decorator that logs an exception with its traceback, then re-raises.

    Args:
        logger: Logger to use for exception logging

    Returns:
        Decorated function
    """

    def decorator(func: F) -> F:
        @wraps(func)
        def wrapper(*args: Any, **kwargs: Any) -> Any:
            try:
                return func(*args, **kwargs)
            except Exception as e:
                logger.exception(f"{func.__name__} failed: {e}")
                raise

        return wrapper  # type: ignore

    return decorator
