"""Logging setup for tagged_text.

Every module obtains its logger through :func:`get_logger`. Module loggers
carry no handlers of their own: records propagate to the ``tagged_text``
package logger, which holds the one console handler and the level from
``TAGGED_TEXT_LOG_LEVEL``.
"""

import logging
import sys
from typing import Optional

from tagged_text.config import get_settings

PACKAGE_LOGGER = "tagged_text"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


class ConsoleHandler(logging.StreamHandler):
    """stderr handler that stays quiet once the host configures logging.

    Records still propagate to the root logger, so an application with its
    own root handlers sees each message exactly once.
    """

    def __init__(self) -> None:
        super().__init__(sys.stderr)

    def emit(self, record: logging.LogRecord) -> None:
        if logging.getLogger().handlers:
            return
        super().emit(record)


def _resolve_level(name: str) -> int:
    level = logging.getLevelName(name.upper())
    return level if isinstance(level, int) else logging.WARNING


def setup_logger(level: Optional[int] = None) -> logging.Logger:
    """Configure the package logger with a console handler.

    Args:
        level: Logger level; defaults to the configured log level

    Returns:
        The ``tagged_text`` package logger
    """
    logger = logging.getLogger(PACKAGE_LOGGER)

    # Avoid stacking handlers when called twice
    if any(isinstance(h, ConsoleHandler) for h in logger.handlers):
        return logger

    if level is None:
        level = _resolve_level(get_settings().log_level)
    logger.setLevel(level)

    handler = ConsoleHandler()
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
    logger.addHandler(handler)

    return logger


def get_logger(name: str) -> logging.Logger:
    """Get a module logger below the configured package logger."""
    setup_logger()
    return logging.getLogger(name)
