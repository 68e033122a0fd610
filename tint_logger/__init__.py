"""
BSD 3-Clause License

Copyright (c) 2021, 🍀☀🌕🌥 🌊
All rights reserved.

Tint Logger - colorful single-line and multi-line terminal logging with
directive-based level filtering

Filtering:
    Set TINT_LOG to a comma-separated list of ``target=level`` directives
    and an optional bare default level, e.g.
    ``TINT_LOG="warn,my_app=info,my_app.db=trace"``
"""

__version__ = "1.0.0"
__author__ = "kcenon"
__email__ = "kcenon@naver.com"

from typing import Optional, Union

from tint_logger.core.dispatcher import Dispatcher
from tint_logger.core.errors import (
    AlreadyInitializedError,
    InvalidFormatError,
    LoggerError,
    OutputError,
    ParseError,
)
from tint_logger.core.log_entry import LogEntry
from tint_logger.core.log_level import LogLevel
from tint_logger.core.logger import Logger, get_logger
from tint_logger.core.logger_builder import LoggerBuilder
from tint_logger.core.options import Options
from tint_logger.core.registry import Registry
from tint_logger.filters.directive import DirectiveSet
from tint_logger.handler import capture_stdlib
from tint_logger.styles import Color, ColorChoice, ColorConfig, StyleConfig, TimeConfig

# Import submodules (not all classes by default)
from tint_logger import filters
from tint_logger import renderers
from tint_logger import styles
from tint_logger import writers


def init(dispatcher: Dispatcher, stdlib: bool = True) -> None:
    """
    Install the process-wide dispatcher.

    Args:
        dispatcher: Dispatcher receiving every record
        stdlib: Also route records of the logging module to it

    Raises:
        AlreadyInitializedError: If called more than once
    """
    Registry.install(dispatcher)
    if stdlib:
        capture_stdlib(dispatcher)


def init_term_logger(
    options: Optional[Options] = None,
    directives: Union[DirectiveSet, str, None] = None,
    stream=None
) -> Dispatcher:
    """
    Build a console dispatcher and install it.

    Example:
        tint_logger.init_term_logger(
            Options.default()
                .with_style(StyleConfig.SINGLE_LINE)
                .with_time(TimeConfig.relative_now())
                .with_color(ColorConfig.only_levels())
        )

    Args:
        options: Renderer options (default: Options.default())
        directives: DirectiveSet or filter text (default: read TINT_LOG)
        stream: Output stream (default: sys.stderr)

    Returns:
        The installed dispatcher

    Raises:
        ParseError: If the filter specification is malformed
        AlreadyInitializedError: If a dispatcher is already installed
    """
    builder = LoggerBuilder().with_options(options or Options.default())
    if directives is not None:
        builder.with_directives(directives)
    dispatcher = builder.with_console(stream).build()
    init(dispatcher)
    return dispatcher


__all__ = [
    "AlreadyInitializedError",
    "Color",
    "ColorChoice",
    "ColorConfig",
    "DirectiveSet",
    "Dispatcher",
    "InvalidFormatError",
    "LogEntry",
    "LogLevel",
    "Logger",
    "LoggerBuilder",
    "LoggerError",
    "Options",
    "OutputError",
    "ParseError",
    "Registry",
    "StyleConfig",
    "TimeConfig",
    "filters",
    "get_logger",
    "init",
    "init_term_logger",
    "renderers",
    "styles",
    "writers",
]
