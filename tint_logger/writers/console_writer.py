"""Console writer with ANSI colors"""

import sys
import threading
from typing import Optional

from tint_logger.core.errors import OutputError
from tint_logger.core.log_entry import LogEntry
from tint_logger.core.options import Options
from tint_logger.renderers import BaseRenderer, renderer_for
from tint_logger.styles.color import supports_color


class ConsoleWriter:
    """
    Write logs to a terminal stream with optional colors.

    Thread Safety:
        Each record is rendered, written and flushed while holding the
        writer's lock, so records from concurrent callers never
        interleave and stateful clocks see them in output order.
    """

    def __init__(
        self,
        options: Optional[Options] = None,
        stream=None,
        renderer: Optional[BaseRenderer] = None
    ):
        """
        Initialize console writer.

        Args:
            options: Renderer options (default: Options.default())
            stream: Output stream (default: sys.stderr)
            renderer: Renderer override (default: chosen by options.style)
        """
        self.options = options or Options.default()
        self.stream = stream or sys.stderr
        self.renderer = renderer or renderer_for(self.options)
        self.colored = self.options.colors_enabled and supports_color(
            self.stream, self.options.color_choice
        )
        self._lock = threading.Lock()

    def write(self, entry: LogEntry) -> None:
        """
        Write log entry to the stream.

        Raises:
            OutputError: If the stream rejects the write
        """
        with self._lock:
            text = self.renderer.render(entry, self.colored)
            try:
                self.stream.write(text)
                self.stream.flush()
            except (OSError, ValueError) as e:
                raise OutputError(f"console write failed: {e}", e) from e

    def flush(self):
        """Flush stream."""
        with self._lock:
            self.stream.flush()

    def __repr__(self) -> str:
        """String representation."""
        return f"ConsoleWriter(renderer={self.renderer!r}, colored={self.colored})"
