"""
Logger facade - target-bound logging calls
"""

from __future__ import annotations
from typing import Any, Optional
import os
import sys

from tint_logger.core.dispatcher import Dispatcher
from tint_logger.core.log_entry import LogEntry
from tint_logger.core.log_level import LogLevel
from tint_logger.core.registry import Registry


class Logger:
    """
    Emit records for one target.

    Records go to the dispatcher given at construction, or else to the
    process-wide dispatcher. Without either, calls do nothing.

    Example:
        log = get_logger("my_app.db")
        log.info("connected", host="db1", port=5432)
    """

    def __init__(self, target: str, dispatcher: Optional[Dispatcher] = None):
        self.target = target
        self._dispatcher = dispatcher

    @property
    def dispatcher(self) -> Optional[Dispatcher]:
        return self._dispatcher or Registry.current()

    def is_enabled_for(self, level: LogLevel) -> bool:
        """Check whether records at level would be written."""
        dispatcher = self.dispatcher
        return dispatcher is not None and dispatcher.enabled(self.target, level)

    def _log(self, level: LogLevel, message: Any, fields: dict) -> None:
        dispatcher = self.dispatcher
        if dispatcher is None or not dispatcher.enabled(self.target, level):
            return

        # 0 is this frame, 1 the public method, 2 its caller
        frame = sys._getframe(2)
        entry = LogEntry(
            level=level,
            message=message,
            target=self.target,
            fields=fields,
            file_name=os.path.basename(frame.f_code.co_filename),
            line_number=frame.f_lineno,
        )
        dispatcher.dispatch(entry)

    def log(self, level: LogLevel, message: Any, **fields) -> None:
        """Log a message."""
        self._log(level, message, fields)

    def trace(self, message: Any, **fields) -> None:
        """Log trace message."""
        self._log(LogLevel.TRACE, message, fields)

    def debug(self, message: Any, **fields) -> None:
        """Log debug message."""
        self._log(LogLevel.DEBUG, message, fields)

    def info(self, message: Any, **fields) -> None:
        """Log info message."""
        self._log(LogLevel.INFO, message, fields)

    def warn(self, message: Any, **fields) -> None:
        """Log warning message."""
        self._log(LogLevel.WARN, message, fields)

    def error(self, message: Any, **fields) -> None:
        """Log error message."""
        self._log(LogLevel.ERROR, message, fields)

    def __repr__(self) -> str:
        """String representation."""
        return f"Logger(target='{self.target}')"


def get_logger(target: str) -> Logger:
    """Get a logger for a target bound to the process-wide dispatcher."""
    return Logger(target)
