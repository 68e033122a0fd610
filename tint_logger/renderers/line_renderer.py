"""
Single-line renderer

Produces one line per record:
    [timestamp ]LEVEL [target] message[ key=value ...]

Line breaks inside the message are written as a literal backslash-n, so
a record never spans more than one physical line.
"""

from tint_logger.core.log_entry import LogEntry
from tint_logger.renderers.base_renderer import BaseRenderer


class LineRenderer(BaseRenderer):
    """
    Render log entries as a single line.

    Example:
        renderer = LineRenderer(Options.compact())
        renderer.render(entry)  # "INFO  [app.db] connected\\n"
    """

    DELIMITER = " "
    NEWLINE_ESCAPE = "\\n"

    def render(self, entry: LogEntry, colored: bool = False) -> str:
        """
        Render log entry on one line.

        Args:
            entry: Log entry to render
            colored: Whether to emit color codes

        Returns:
            Rendered line ending with a newline
        """
        parts = []

        stamp = self._timestamp(entry, colored)
        if stamp is not None:
            parts.append(stamp)

        parts.append(self._level(entry, colored))
        parts.append(f"[{self._paint(entry.target, 'target', colored)}]")
        message = self.NEWLINE_ESCAPE.join(entry.message.splitlines())
        parts.append(self._paint(message, "message", colored))
        parts.extend(self._fields(entry))

        return self.DELIMITER.join(parts) + "\n"

    def __repr__(self) -> str:
        """String representation."""
        return f"LineRenderer(time={self.options.time!r})"
