"""Dispatcher builder pattern"""

from typing import List, Optional, Union
from pathlib import Path

from tint_logger.core.dispatcher import Dispatcher
from tint_logger.core.options import Options
from tint_logger.filters.base_filter import BaseFilter
from tint_logger.filters.directive import DirectiveSet
from tint_logger.filters.directive_parser import ENV_VAR, from_env, parse
from tint_logger.styles.color import ColorChoice, ColorConfig
from tint_logger.styles.style import StyleConfig
from tint_logger.styles.time import TimeConfig
from tint_logger.writers.console_writer import ConsoleWriter
from tint_logger.writers.file_writer import FileWriter


class LoggerBuilder:
    """Builder pattern for dispatcher construction."""

    def __init__(self):
        self._options = Options.default()
        self._directives: Optional[DirectiveSet] = None
        self._console_enabled = False
        self._console_stream = None
        self._file_path: Optional[Path] = None
        self._file_mode = "append"
        self._custom_writers = []
        self._custom_filters: List[BaseFilter] = []

    def with_options(self, options: Options) -> "LoggerBuilder":
        """Replace all renderer options."""
        self._options = options
        return self

    def with_style(self, style: StyleConfig) -> "LoggerBuilder":
        """Set the layout style."""
        self._options = self._options.with_style(style)
        return self

    def with_color(self, color: Optional[ColorConfig]) -> "LoggerBuilder":
        """Set the color policy, or None to disable colors."""
        self._options = self._options.with_color(color)
        return self

    def with_color_choice(self, choice: ColorChoice) -> "LoggerBuilder":
        """Set when colors are emitted."""
        self._options = self._options.with_color_choice(choice)
        return self

    def with_time(self, time: TimeConfig) -> "LoggerBuilder":
        """Set the timestamp configuration."""
        self._options = self._options.with_time(time)
        return self

    def with_directives(self, directives: Union[DirectiveSet, str]) -> "LoggerBuilder":
        """
        Set the level filter.

        Args:
            directives: DirectiveSet or filter specification text

        Raises:
            ParseError: If the specification text is malformed
        """
        if not isinstance(directives, DirectiveSet):
            directives = parse(directives)
        self._directives = directives
        return self

    def with_env_directives(self, var: str = ENV_VAR, strict: bool = True) -> "LoggerBuilder":
        """Read the level filter from an environment variable."""
        self._directives = from_env(var, strict=strict)
        return self

    def with_console(self, stream=None) -> "LoggerBuilder":
        """Enable console output (default stream: sys.stderr)."""
        self._console_enabled = True
        self._console_stream = stream
        return self

    def with_file(self, filepath: Union[str, Path], mode: str = "append") -> "LoggerBuilder":
        """
        Enable file output.

        Args:
            filepath: Path to the log file
            mode: "append", "truncate" or "timestamped"
        """
        if mode not in ("append", "truncate", "timestamped"):
            raise ValueError(f"unknown file mode: {mode}")
        self._file_path = Path(filepath)
        self._file_mode = mode
        return self

    def with_filter(self, log_filter: BaseFilter) -> "LoggerBuilder":
        """Add a log filter consulted after the directives."""
        self._custom_filters.append(log_filter)
        return self

    def add_writer(self, writer) -> "LoggerBuilder":
        """
        Add a custom writer.

        Args:
            writer: Writer instance with write(entry) method

        Returns:
            Self for method chaining
        """
        self._custom_writers.append(writer)
        return self

    def build(self) -> Dispatcher:
        """
        Build and return the configured dispatcher.

        Without explicit directives the filter is read from the
        environment. Without any writer, console output is used.
        """
        directives = self._directives
        if directives is None:
            directives = from_env()

        dispatcher = Dispatcher(directives=directives)

        if self._console_enabled or not (self._file_path or self._custom_writers):
            dispatcher.add_writer(ConsoleWriter(self._options, stream=self._console_stream))

        if self._file_path:
            opener = getattr(FileWriter, self._file_mode)
            dispatcher.add_writer(opener(self._file_path, self._options))

        for writer in self._custom_writers:
            dispatcher.add_writer(writer)

        for log_filter in self._custom_filters:
            dispatcher.add_filter(log_filter)

        return dispatcher
