"""
Log entry data structure

A single record as delivered by a logging call. Entries are ephemeral:
they are rendered synchronously and never stored.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict

from tint_logger.core.log_level import LogLevel


@dataclass
class LogEntry:
    """
    Log entry data structure.

    Contains all information about a single log message.
    """

    level: LogLevel
    message: str
    target: str = ""
    fields: Dict[str, Any] = field(default_factory=dict)
    file_name: str = ""
    line_number: int = 0
    timestamp: datetime = field(default_factory=datetime.now)

    def __post_init__(self):
        """Validate log entry after initialization."""
        if not isinstance(self.level, LogLevel):
            raise TypeError("level must be LogLevel enum")
        if not self.level.is_record_level:
            raise ValueError("records cannot be created at level OFF")
        if not isinstance(self.message, str):
            self.message = str(self.message)

    @property
    def source(self) -> str:
        """Source location as ``file:line``, or empty when unknown."""
        if not self.file_name:
            return ""
        if self.line_number:
            return f"{self.file_name}:{self.line_number}"
        return self.file_name

    def __str__(self) -> str:
        """String representation."""
        return f"{self.level.name:<5} [{self.target}] {self.message}"
