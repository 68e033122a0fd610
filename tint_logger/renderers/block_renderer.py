"""
Multi-line renderer

Produces a block per record:

    LEVEL [timestamp]
      ⤷ target
        message line
        key=value
        at file:line
    <blank line>

Body lines are always indented, so the only blank line is the one ending
the block.
"""

from tint_logger.core.log_entry import LogEntry
from tint_logger.renderers.base_renderer import CONTINUATION, BaseRenderer


class BlockRenderer(BaseRenderer):
    """Render log entries as an indented multi-line block."""

    HEADER_INDENT = "  "
    BODY_INDENT = "    "

    def render(self, entry: LogEntry, colored: bool = False) -> str:
        """
        Render log entry as a block.

        Args:
            entry: Log entry to render
            colored: Whether to emit color codes

        Returns:
            Rendered block including its trailing blank line
        """
        header = self._level(entry, colored)
        stamp = self._timestamp(entry, colored)
        if stamp is not None:
            header = f"{header} {stamp}"
        lines = [header]

        marker = self._paint(CONTINUATION, "continuation", colored)
        lines.append(f"{self.HEADER_INDENT}{marker} {self._paint(entry.target, 'target', colored)}")

        # splitlines() drops a lone empty message, keep one body line for it
        for line in entry.message.splitlines() or [""]:
            lines.append(self.BODY_INDENT + self._paint(line, "message", colored))

        for item in self._fields(entry):
            lines.append(self.BODY_INDENT + item)

        if entry.source:
            lines.append(f"{self.BODY_INDENT}at {entry.source}")

        return "\n".join(lines) + "\n\n"

    def __repr__(self) -> str:
        """String representation."""
        return f"BlockRenderer(time={self.options.time!r})"
