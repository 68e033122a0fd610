"""
Bridge from the standard logging module

Registers the dispatcher as a handler on the root logger, so records from
any ``logging.getLogger(name)`` call reach it with the logger name as the
target.
"""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Any, Dict

from tint_logger.core.dispatcher import Dispatcher
from tint_logger.core.log_entry import LogEntry
from tint_logger.core.log_level import STDLIB_TRACE, LogLevel
from tint_logger.core.registry import Registry

# Attributes every LogRecord carries; anything else came in through extra=
_RESERVED = frozenset(vars(logging.makeLogRecord({}))) | {"message", "asctime"}

_formatter = logging.Formatter()


def entry_from_record(record: logging.LogRecord) -> LogEntry:
    """
    Convert a standard LogRecord into a LogEntry.

    Values passed through ``extra=`` become fields; exception info is
    appended to the message.
    """
    message = record.getMessage()
    if record.exc_info:
        message = f"{message}\n{_formatter.formatException(record.exc_info)}"
    if record.stack_info:
        message = f"{message}\n{_formatter.formatStack(record.stack_info)}"

    fields: Dict[str, Any] = {
        key: value for key, value in vars(record).items()
        if key not in _RESERVED and not key.startswith("_")
    }

    return LogEntry(
        level=LogLevel.from_stdlib(record.levelno),
        message=message,
        target=record.name,
        fields=fields,
        file_name=record.filename,
        line_number=record.lineno,
        timestamp=datetime.fromtimestamp(record.created),
    )


class DispatchHandler(logging.Handler):
    """
    Logging handler forwarding records to a dispatcher.

    handle() is overridden so that the handler's own lock is never taken:
    the dispatcher gates records itself and each writer serializes its own
    output. Filters attached with addFilter() still run before the
    directive gate.
    """

    def __init__(self, dispatcher: Dispatcher):
        super().__init__(level=logging.NOTSET)
        self.dispatcher = dispatcher

    def handle(self, record: logging.LogRecord) -> bool:
        if not self.filter(record):
            return False
        level = LogLevel.from_stdlib(record.levelno)
        if not self.dispatcher.enabled(record.name, level):
            return False
        self.emit(record)
        return True

    def emit(self, record: logging.LogRecord) -> None:
        try:
            entry = entry_from_record(record)
        except Exception:
            # Bad format arguments in the logging call
            self.handleError(record)
            return
        self.dispatcher.dispatch(entry)


def capture_stdlib(dispatcher: Dispatcher) -> DispatchHandler:
    """
    Attach a DispatchHandler to the root logger.

    The root level is lowered to TRACE so that the directive set is the
    only gate. Registry.reset() detaches the handler and restores the
    previous level.
    """
    logging.addLevelName(STDLIB_TRACE, "TRACE")
    root = logging.getLogger()
    previous = root.level

    handler = DispatchHandler(dispatcher)
    root.addHandler(handler)
    root.setLevel(STDLIB_TRACE)

    def detach() -> None:
        root.removeHandler(handler)
        root.setLevel(previous)

    Registry.on_reset(detach)
    return handler
