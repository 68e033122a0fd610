"""Writers module - Log output handlers"""

from tint_logger.writers.console_writer import ConsoleWriter
from tint_logger.writers.file_writer import FileWriter

__all__ = ["ConsoleWriter", "FileWriter"]
