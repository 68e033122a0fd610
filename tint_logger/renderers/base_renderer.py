"""
Base renderer interface
"""

from abc import ABC, abstractmethod
from typing import Optional

from tint_logger.core.log_entry import LogEntry
from tint_logger.core.options import Options
from tint_logger.styles.color import ColorConfig, TextStyle, paint

# Marker introducing the body of a multi-line record
CONTINUATION = "⤷"

_PLAIN = TextStyle()


class BaseRenderer(ABC):
    """
    Abstract base class for record renderers.

    Renderers turn a LogEntry into the complete text of one record,
    newline included, so that a writer can emit it in a single write.
    """

    def __init__(self, options: Optional[Options] = None):
        self.options = options or Options.default()

    @property
    def colors(self) -> Optional[ColorConfig]:
        return self.options.color

    @abstractmethod
    def render(self, entry: LogEntry, colored: bool = False) -> str:
        """
        Render a log entry.

        Args:
            entry: The log entry to render
            colored: Whether to emit color codes

        Returns:
            Rendered text ending with a newline
        """
        pass

    def __call__(self, entry: LogEntry, colored: bool = False) -> str:
        """Allow renderers to be callable."""
        return self.render(entry, colored)

    def _paint(self, text: str, part: str, colored: bool) -> str:
        if not colored or self.colors is None:
            return text
        return paint(text, getattr(self.colors, part, _PLAIN))

    def _level(self, entry: LogEntry, colored: bool) -> str:
        text = f"{entry.level.name:<5}"
        if not colored or self.colors is None:
            return text
        return paint(text, self.colors.style_for(entry.level))

    def _timestamp(self, entry: LogEntry, colored: bool) -> Optional[str]:
        stamp = self.options.time.stamp(entry.timestamp)
        if stamp is None:
            return None
        return self._paint(stamp, "timestamp", colored)

    @staticmethod
    def _fields(entry: LogEntry):
        return [f"{key}={value}" for key, value in entry.fields.items()]
