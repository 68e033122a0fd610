"""Basic tests for levels and log entries"""

import pytest

from tint_logger import LogEntry, LogLevel


class TestLogLevel:
    """Test log level functionality."""

    def test_log_levels(self):
        assert LogLevel.ERROR < LogLevel.WARN
        assert LogLevel.WARN < LogLevel.INFO
        assert LogLevel.INFO < LogLevel.DEBUG
        assert LogLevel.DEBUG < LogLevel.TRACE

    def test_from_string(self):
        assert LogLevel.from_string("DEBUG") == LogLevel.DEBUG
        assert LogLevel.from_string("info") == LogLevel.INFO
        assert LogLevel.from_string(" Warning ") == LogLevel.WARN
        assert LogLevel.from_string("off") == LogLevel.OFF

    def test_from_string_invalid(self):
        with pytest.raises(ValueError):
            LogLevel.from_string("loud")

    def test_stdlib_mapping(self):
        assert LogLevel.from_stdlib(50) == LogLevel.ERROR
        assert LogLevel.from_stdlib(40) == LogLevel.ERROR
        assert LogLevel.from_stdlib(30) == LogLevel.WARN
        assert LogLevel.from_stdlib(20) == LogLevel.INFO
        assert LogLevel.from_stdlib(10) == LogLevel.DEBUG
        assert LogLevel.from_stdlib(5) == LogLevel.TRACE
        assert LogLevel.TRACE.to_stdlib() == 5
        assert LogLevel.WARN.to_stdlib() == 30


class TestLogEntry:
    """Test log entry structure."""

    def test_create_entry(self):
        entry = LogEntry(level=LogLevel.INFO, message="Test message")
        assert entry.level == LogLevel.INFO
        assert entry.message == "Test message"
        assert entry.target == ""
        assert entry.fields == {}

    def test_message_coerced(self):
        entry = LogEntry(level=LogLevel.DEBUG, message=42)
        assert entry.message == "42"

    def test_level_type_checked(self):
        with pytest.raises(TypeError):
            LogEntry(level=3, message="x")

    def test_off_rejected(self):
        with pytest.raises(ValueError):
            LogEntry(level=LogLevel.OFF, message="x")

    def test_source(self):
        assert LogEntry(LogLevel.INFO, "x").source == ""
        assert LogEntry(LogLevel.INFO, "x", file_name="a.py").source == "a.py"
        assert LogEntry(LogLevel.INFO, "x", file_name="a.py", line_number=3).source == "a.py:3"

    def test_str(self):
        entry = LogEntry(LogLevel.WARN, "careful", target="app")
        assert str(entry) == "WARN  [app] careful"
