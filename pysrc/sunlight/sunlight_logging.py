"""
Host-aware logging for the sunlight engine.

The engine is embedded in rendering hosts that often have their own
console or overlay for diagnostics. Loggers route messages either to a
host feedback callable (installed with ``set_global_feedback``) or to the
standard ``logging`` module.

Usage:
    from sunlight.sunlight_logging import get_logger

    logger = get_logger(__name__)
    logger.info("Weather changed to overcast")
    logger.debug(f"Sun altitude {altitude_deg:.1f}°")

Routing to a host console:
    import sunlight.sunlight_logging as slog

    slog.set_global_feedback(lambda level, name, message: overlay.push(message))
"""

from __future__ import annotations

import logging
import sys
from collections.abc import Callable
from enum import IntEnum

# Host feedback signature: (level, logger name, message)
Feedback = Callable[[int, str, str], None]


class LogLevel(IntEnum):
    """Log levels matching Python logging."""

    DEBUG = 10
    INFO = 20
    WARNING = 30
    ERROR = 40


class SunlightLogger:
    """
    Logger that forwards to a host feedback callable when one is set and
    to the standard ``logging`` module otherwise.
    """

    def __init__(self, name: str, level: LogLevel = LogLevel.INFO):
        """
        Initialize logger.

        Args:
            name: Logger name (usually module name)
            level: Minimum log level to display
        """
        self.name = name
        self.level = level
        self._feedback: Feedback | None = None

    def set_feedback(self, feedback: Feedback | None) -> None:
        """
        Set (or clear) the host feedback callable.

        Args:
            feedback: Callable receiving (level, name, message), or None
                to route back to the ``logging`` module.
        """
        self._feedback = feedback

    def _log(self, level: LogLevel, message: str) -> None:
        """Internal logging method."""
        if level < self.level:
            return  # Below minimum level

        if self._feedback is not None:
            self._feedback(int(level), self.name, message)
        else:
            logging.getLogger(self.name).log(level, message)

    def debug(self, message: str) -> None:
        """Log debug message."""
        self._log(LogLevel.DEBUG, message)

    def info(self, message: str) -> None:
        """Log info message."""
        self._log(LogLevel.INFO, message)

    def warning(self, message: str) -> None:
        """Log warning message."""
        self._log(LogLevel.WARNING, message)

    def error(self, message: str) -> None:
        """Log error message."""
        self._log(LogLevel.ERROR, message)

    def set_level(self, level: LogLevel | int) -> None:
        """Set minimum log level."""
        self.level = LogLevel(level) if isinstance(level, int) else level


# Global logger registry
_loggers: dict[str, SunlightLogger] = {}
_global_feedback: Feedback | None = None


def get_logger(name: str, level: LogLevel | int = LogLevel.INFO) -> SunlightLogger:
    """
    Get or create a logger for the given name.

    Args:
        name: Logger name (usually module name or __name__)
        level: Minimum log level (default: INFO)

    Returns:
        SunlightLogger instance

    Example:
        >>> logger = get_logger(__name__)
        >>> logger.info("Engine created")
    """
    if name not in _loggers:
        logger = SunlightLogger(name, LogLevel(level) if isinstance(level, int) else level)
        logger.set_feedback(_global_feedback)
        _loggers[name] = logger
    return _loggers[name]


def set_global_level(level: LogLevel | int) -> None:
    """
    Set log level for all existing loggers.

    Args:
        level: Minimum log level (DEBUG, INFO, WARNING, ERROR)

    Example:
        >>> import sunlight.sunlight_logging as slog
        >>> slog.set_global_level(slog.LogLevel.DEBUG)  # Show per-update messages
    """
    level = LogLevel(level) if isinstance(level, int) else level
    for logger in _loggers.values():
        logger.set_level(level)


def set_global_feedback(feedback: Feedback | None) -> None:
    """
    Set the host feedback callable for all loggers, including ones created later.

    Args:
        feedback: Callable receiving (level, name, message), or None to reset.
    """
    global _global_feedback
    _global_feedback = feedback
    for logger in _loggers.values():
        logger.set_feedback(feedback)


# Configure Python logging to be less verbose by default
logging.basicConfig(
    level=logging.INFO,
    format="%(name)s: %(message)s",
    stream=sys.stdout,
)
