"""Package-wide logging for ksproute.

Every module asks for its logger through ``get_logger(__name__)``. Those
loggers carry no handlers of their own: records flow up to the ``ksproute``
logger, which owns the one handler and the level. The level defaults to INFO
and can be preset with the ``KSPROUTE_LOG_LEVEL`` environment variable, e.g.
``KSPROUTE_LOG_LEVEL=debug`` to trace every spur query of a search.
"""

import logging
import os
import sys
from typing import Optional, Union

ROOT_LOGGER_NAME = "ksproute"
LOG_LEVEL_ENV = "KSPROUTE_LOG_LEVEL"
DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

LevelLike = Union[int, str]

_configured = False


def _resolve_level(level: Optional[LevelLike]) -> int:
    """Turn a level number or name into a number.

    ``None`` means the ``KSPROUTE_LOG_LEVEL`` value, else INFO. Unknown names
    fall back to INFO.
    """
    if level is None:
        level = os.getenv(LOG_LEVEL_ENV) or logging.INFO
    if isinstance(level, str):
        value = getattr(logging, level.strip().upper(), logging.INFO)
        return value if isinstance(value, int) else logging.INFO
    return level


def setup_root_logger(
    level: Optional[LevelLike] = None,
    format_string: Optional[str] = None,
    handler: Optional[logging.Handler] = None,
) -> None:
    """Attach a single handler to the ``ksproute`` logger.

    Only the first call has an effect; ``reset_logging()`` re-arms it.

    Args:
        level: Level number or name. Defaults to ``KSPROUTE_LOG_LEVEL`` or INFO.
        format_string: Record format; ``DEFAULT_FORMAT`` when omitted.
        handler: Destination; a stdout ``StreamHandler`` when omitted.
    """
    global _configured
    if _configured:
        return

    package_logger = logging.getLogger(ROOT_LOGGER_NAME)
    package_logger.setLevel(_resolve_level(level))
    package_logger.handlers.clear()

    handler = handler if handler is not None else logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(format_string or DEFAULT_FORMAT))
    package_logger.addHandler(handler)
    # pytest's caplog listens on the interpreter root logger
    package_logger.propagate = True

    _configured = True


def get_logger(name: str) -> logging.Logger:
    """Return the logger ``name``, configuring the package logger if needed."""
    setup_root_logger()
    logger = logging.getLogger(name)
    logger.setLevel(logging.NOTSET)
    return logger


def set_global_log_level(level: LevelLike) -> None:
    """Set the level of the package logger and of its handlers.

    Args:
        level: Level number (``logging.DEBUG``) or name (``"debug"``).
    """
    setup_root_logger()
    value = _resolve_level(level)
    package_logger = logging.getLogger(ROOT_LOGGER_NAME)
    package_logger.setLevel(value)
    for handler in package_logger.handlers:
        handler.setLevel(value)


def enable_debug_logging() -> None:
    set_global_log_level(logging.DEBUG)


def disable_debug_logging() -> None:
    set_global_log_level(logging.INFO)


def reset_logging() -> None:
    """Drop the package handler and level so the next call reconfigures."""
    global _configured
    _configured = False
    package_logger = logging.getLogger(ROOT_LOGGER_NAME)
    package_logger.handlers.clear()
    package_logger.setLevel(logging.NOTSET)


setup_root_logger()
