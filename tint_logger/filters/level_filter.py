"""
Directive-based level filter

Decides per (target, level) whether a record is emitted.
"""

from typing import Union

from tint_logger.core.log_entry import LogEntry
from tint_logger.core.log_level import LogLevel
from tint_logger.filters.base_filter import BaseFilter
from tint_logger.filters.directive import DirectiveSet
from tint_logger.filters.directive_parser import parse


def enabled(target: str, level: LogLevel, directives: DirectiveSet) -> bool:
    """
    Check whether a record passes the directive set.

    Pure function: no I/O and no shared state, safe to call from any
    thread without locking.

    Args:
        target: Record target
        level: Record level
        directives: Parsed directive set

    Returns:
        True if level is at least as severe as the governing minimum
    """
    if level is LogLevel.OFF:
        return False
    return level <= directives.minimum_for(target)


class DirectiveFilter(BaseFilter):
    """
    Filter log entries through a directive set.

    Example:
        filter = DirectiveFilter("warn,my_app=debug")
        filter.should_log(LogEntry(LogLevel.INFO, "hi", target="my_app"))
    """

    def __init__(self, directives: Union[DirectiveSet, str, None] = None):
        """
        Initialize directive filter.

        Args:
            directives: DirectiveSet or specification text to parse
        """
        if not isinstance(directives, DirectiveSet):
            directives = parse(directives)
        self.directives = directives

    def enabled(self, target: str, level: LogLevel) -> bool:
        """Check a (target, level) pair."""
        return enabled(target, level, self.directives)

    def should_log(self, entry: LogEntry) -> bool:
        """
        Check if entry passes the directive set.

        Args:
            entry: Log entry to check

        Returns:
            True if entry should be logged
        """
        return enabled(entry.target, entry.level, self.directives)

    def __repr__(self) -> str:
        """String representation."""
        return f"DirectiveFilter('{self.directives}')"
