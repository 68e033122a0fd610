"""
Core module for logger system

This module contains the fundamental classes:
- Dispatcher: Filters records and hands them to writers
- Registry: Process-wide single-assignment dispatcher handle
- Logger: Target-bound logging facade
- LoggerBuilder: Builder pattern for dispatcher construction
- LogEntry: Log entry data structure
- LogLevel: Log level enumeration
- Options: Renderer configuration
"""

from tint_logger.core.dispatcher import Dispatcher
from tint_logger.core.errors import (
    AlreadyInitializedError,
    InvalidFormatError,
    LoggerError,
    OutputError,
    ParseError,
)
from tint_logger.core.log_entry import LogEntry
from tint_logger.core.log_level import LogLevel
from tint_logger.core.logger import Logger, get_logger
from tint_logger.core.logger_builder import LoggerBuilder
from tint_logger.core.options import Options
from tint_logger.core.registry import Registry

__all__ = [
    "AlreadyInitializedError",
    "Dispatcher",
    "InvalidFormatError",
    "LogEntry",
    "LogLevel",
    "Logger",
    "LoggerBuilder",
    "LoggerError",
    "Options",
    "OutputError",
    "ParseError",
    "Registry",
    "get_logger",
]
