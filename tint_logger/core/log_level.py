"""
Log level enumeration

Severity is ordered by ordinal: ERROR is the most severe record level and
has the lowest value, TRACE the least severe and the highest.
"""

import logging
from enum import IntEnum
from typing import Dict


class LogLevel(IntEnum):
    """
    Log level enumeration.

    OFF is only meaningful as a filter minimum: a directive at OFF
    disables its targets. Records are never created at OFF.
    """

    OFF = 0         # Filter only, disables everything
    ERROR = 1       # Error messages
    WARN = 2        # Warning messages
    INFO = 3        # Informational messages
    DEBUG = 4       # Debug information
    TRACE = 5       # Most verbose, detailed tracing

    def __str__(self) -> str:
        """String representation of log level."""
        return self.name

    @property
    def is_record_level(self) -> bool:
        """Whether a record may be emitted at this level."""
        return self is not LogLevel.OFF

    @classmethod
    def from_string(cls, level_str: str) -> "LogLevel":
        """
        Convert string to LogLevel.

        Args:
            level_str: Level name (case-insensitive)

        Returns:
            LogLevel enum value

        Raises:
            ValueError: If level_str is not valid
        """
        level = LEVEL_FROM_NAME.get(level_str.strip().upper())
        if level is None:
            raise ValueError(f"Invalid log level: {level_str}")
        return level

    @classmethod
    def from_stdlib(cls, levelno: int) -> "LogLevel":
        """
        Convert a numeric level of the logging module.

        CRITICAL folds into ERROR; anything below DEBUG is TRACE.
        """
        if levelno >= logging.ERROR:
            return cls.ERROR
        if levelno >= logging.WARNING:
            return cls.WARN
        if levelno >= logging.INFO:
            return cls.INFO
        if levelno >= logging.DEBUG:
            return cls.DEBUG
        return cls.TRACE

    def to_stdlib(self) -> int:
        """Numeric level of the logging module for this level."""
        return STDLIB_LEVELS[self]


# Numeric level used for TRACE in the logging module
STDLIB_TRACE = 5

STDLIB_LEVELS: Dict[LogLevel, int] = {
    LogLevel.OFF: logging.CRITICAL + 10,
    LogLevel.ERROR: logging.ERROR,
    LogLevel.WARN: logging.WARNING,
    LogLevel.INFO: logging.INFO,
    LogLevel.DEBUG: logging.DEBUG,
    LogLevel.TRACE: STDLIB_TRACE,
}

# Mapping from log level to names
LEVEL_NAMES: Dict[LogLevel, str] = {
    LogLevel.OFF: "OFF",
    LogLevel.ERROR: "ERROR",
    LogLevel.WARN: "WARN",
    LogLevel.INFO: "INFO",
    LogLevel.DEBUG: "DEBUG",
    LogLevel.TRACE: "TRACE",
}

# Reverse mapping
LEVEL_FROM_NAME: Dict[str, LogLevel] = {v: k for k, v in LEVEL_NAMES.items()}
LEVEL_FROM_NAME["WARNING"] = LogLevel.WARN
