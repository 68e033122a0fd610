"""
Dispatcher - gates records through the directive set and hands enabled
ones to the writers
"""

from __future__ import annotations
from typing import Any, Iterable, List, Optional, Union
import threading

from tint_logger.core.errors import OutputError
from tint_logger.core.log_entry import LogEntry
from tint_logger.core.log_level import LogLevel
from tint_logger.filters.base_filter import BaseFilter
from tint_logger.filters.directive import DirectiveSet
from tint_logger.filters.level_filter import DirectiveFilter


class Dispatcher:
    """
    Synchronous record dispatcher.

    Disabled records return before any lock or stream is touched. Enabled
    records are written by every writer in turn; a writer that fails
    drops the record and is tried again on the next call.

    Thread Safety:
        The directive set is immutable and read without locking. Each
        writer serializes its own output.
    """

    def __init__(
        self,
        writers: Optional[Iterable[Any]] = None,
        directives: Union[DirectiveSet, str, None] = None
    ):
        """
        Initialize dispatcher.

        Args:
            writers: Writers with a write(entry) method
            directives: DirectiveSet or filter specification text
        """
        self._gate = DirectiveFilter(directives)
        self._writers: List[Any] = list(writers or [])
        self._filters: List[BaseFilter] = []
        self._metrics = {"written": 0, "dropped": 0}
        self._metrics_lock = threading.Lock()

    @property
    def directives(self) -> DirectiveSet:
        return self._gate.directives

    @property
    def writers(self) -> List[Any]:
        return list(self._writers)

    def add_writer(self, writer: Any) -> None:
        """Add a log writer."""
        self._writers.append(writer)

    def add_filter(self, log_filter: BaseFilter) -> None:
        """
        Add a log filter, consulted after the directive set.

        Args:
            log_filter: Filter instance with should_log(entry) method
        """
        self._filters.append(log_filter)

    def enabled(self, target: str, level: LogLevel) -> bool:
        """Check whether a record at (target, level) would be written."""
        return self._gate.enabled(target, level)

    def dispatch(self, entry: LogEntry) -> None:
        """
        Write an entry to all writers if it passes the filters.

        Never raises because of an output failure.
        """
        if not self._gate.should_log(entry):
            return

        for f in self._filters:
            if not f.should_log(entry):
                return

        for writer in self._writers:
            try:
                writer.write(entry)
            except (OutputError, OSError, ValueError):
                self._count("dropped")
            else:
                self._count("written")

    def _count(self, key: str) -> None:
        with self._metrics_lock:
            self._metrics[key] += 1

    def flush(self) -> None:
        """Flush all writers, ignoring output failures."""
        for writer in self._writers:
            if hasattr(writer, "flush"):
                try:
                    writer.flush()
                except (OSError, ValueError):
                    pass

    def close(self) -> None:
        """Close all writers that can be closed."""
        for writer in self._writers:
            if hasattr(writer, "close"):
                writer.close()

    def get_metrics(self) -> dict:
        """Get written and dropped record counts."""
        with self._metrics_lock:
            return self._metrics.copy()

    def __repr__(self) -> str:
        """String representation."""
        return f"Dispatcher(directives='{self.directives}', writers={len(self._writers)})"
