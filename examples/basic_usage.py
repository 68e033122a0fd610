#!/usr/bin/env python3
"""Basic usage example"""

import logging
import os
from dataclasses import replace

import tint_logger
from tint_logger import ColorConfig, Color, LoggerBuilder, StyleConfig, TimeConfig, get_logger
from tint_logger.styles import TextStyle


def main():
    os.environ.setdefault("TINT_LOG", "info,example=trace")

    colors = replace(ColorConfig.only_levels(), timestamp=TextStyle(Color.ansi256(55)))

    # Console plus a timestamped file: logs/example_<unix time>.log
    dispatcher = (LoggerBuilder()
        .with_style(StyleConfig.SINGLE_LINE)
        .with_time(TimeConfig.date_time_format("%c"))
        .with_color(colors)
        .with_console()
        .with_file("logs/example.log", mode="timestamped")
        .build())
    tint_logger.init(dispatcher)

    log = get_logger("example")
    log.trace("hello world")
    log.debug("hello world")
    log.info("hello world", user="ann")
    log.warn("hello world")
    log.error("hello world")

    # The logging module goes through the same filter and renderer
    logging.getLogger("example.stdlib").info("from logging")
    logging.getLogger("other").debug("filtered out")


if __name__ == "__main__":
    main()
