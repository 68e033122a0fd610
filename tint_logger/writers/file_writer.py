"""File writer"""

import threading
import time
from pathlib import Path
from typing import Optional, Union

from tint_logger.core.errors import OutputError
from tint_logger.core.log_entry import LogEntry
from tint_logger.core.options import Options
from tint_logger.renderers import BaseRenderer, renderer_for


class FileWriter:
    """
    Write logs to a file, never colored.

    Use the truncate(), append() or timestamped() constructors to open a
    path, or pass any text stream to the initializer.
    """

    def __init__(
        self,
        file,
        options: Optional[Options] = None,
        path: Optional[Path] = None,
        renderer: Optional[BaseRenderer] = None
    ):
        """
        Initialize file writer.

        Args:
            file: Open text stream to write to
            options: Renderer options (default: Options.default())
            path: Path the stream was opened from, if any
            renderer: Renderer override (default: chosen by options.style)
        """
        self.options = options or Options.default()
        self.renderer = renderer or renderer_for(self.options)
        self._file = file
        self._path = path
        self._lock = threading.Lock()

    @classmethod
    def _open(cls, path: Union[str, Path], mode: str, options: Optional[Options]) -> "FileWriter":
        path = Path(path)
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            file = open(path, mode, encoding="utf-8")
        except OSError as e:
            raise OutputError(f"cannot open log file {path}: {e}", e) from e
        return cls(file, options, path=path)

    @classmethod
    def truncate(cls, path: Union[str, Path], options: Optional[Options] = None) -> "FileWriter":
        """Open a log file, truncating it first."""
        return cls._open(path, "w", options)

    @classmethod
    def append(cls, path: Union[str, Path], options: Optional[Options] = None) -> "FileWriter":
        """Open a log file for appending."""
        return cls._open(path, "a", options)

    @classmethod
    def timestamped(
        cls,
        path: Union[str, Path],
        options: Optional[Options] = None,
        now: Optional[float] = None
    ) -> "FileWriter":
        """
        Open a new log file with the current Unix time in its name.

        Example:
            ``out.log`` becomes ``out_1587429534.log``
            ``out`` becomes ``out_1587429534``

        Raises:
            OutputError: If the path has no file name or the file exists
        """
        path = Path(path)
        if not path.stem:
            raise OutputError(f"no file name in {path}")
        seconds = int(time.time() if now is None else now)
        return cls._open(path.with_name(f"{path.stem}_{seconds}{path.suffix}"), "x", options)

    @property
    def path(self) -> Optional[Path]:
        """Path of the log file, if opened from one."""
        return self._path

    def write(self, entry: LogEntry) -> None:
        """
        Write log entry to file.

        Raises:
            OutputError: If the file is closed or the write fails
        """
        with self._lock:
            if self._file is None:
                raise OutputError("log file is closed")
            text = self.renderer.render(entry, colored=False)
            try:
                self._file.write(text)
                self._file.flush()
            except (OSError, ValueError) as e:
                raise OutputError(f"file write failed: {e}", e) from e

    def flush(self):
        """Flush file buffer."""
        with self._lock:
            if self._file:
                self._file.flush()

    def close(self):
        """Close file."""
        with self._lock:
            if self._file:
                self._file.close()
                self._file = None

    def __repr__(self) -> str:
        """String representation."""
        return f"FileWriter(path={self._path})"
