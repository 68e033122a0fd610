"""
Entry filter interface

The directive set is the primary gate. Filters added to a dispatcher are
consulted only for entries the directives already enabled, and can only
narrow what gets written.
"""

from abc import ABC, abstractmethod
from tint_logger.core.log_entry import LogEntry


class BaseFilter(ABC):
    """
    Abstract base class for entry filters.

    Subclasses veto entries by content (target, message, fields) after
    the level decision has been made. DirectiveFilter is the directive
    gate expressed as a filter.
    """

    @abstractmethod
    def should_log(self, entry: LogEntry) -> bool:
        """
        Decide whether an enabled entry reaches the writers.

        Returns:
            False to drop the entry
        """

    def __call__(self, entry: LogEntry) -> bool:
        return self.should_log(entry)
