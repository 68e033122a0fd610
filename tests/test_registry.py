"""Tests for process-wide initialization and the logging module bridge"""

import io
import logging
import sys
import threading

import pytest

import tint_logger
from tint_logger import (
    AlreadyInitializedError,
    Dispatcher,
    LogLevel,
    Options,
    Registry,
    get_logger,
)
from tint_logger.handler import DispatchHandler, entry_from_record
from tint_logger.writers import ConsoleWriter


def console_dispatcher(stream, directives="trace"):
    return Dispatcher([ConsoleWriter(Options.compact(), stream=stream)], directives)


class TestRegistry:
    """Test single-assignment registration."""

    def setup_method(self):
        Registry.reset()

    def teardown_method(self):
        Registry.reset()

    def test_install(self):
        dispatcher = Dispatcher()
        Registry.install(dispatcher)
        assert Registry.is_initialized()
        assert Registry.current() is dispatcher

    def test_double_init_keeps_first(self):
        first = console_dispatcher(io.StringIO())
        tint_logger.init(first, stdlib=False)

        with pytest.raises(AlreadyInitializedError):
            tint_logger.init(console_dispatcher(io.StringIO(), "error"), stdlib=False)

        assert Registry.current() is first

    def test_concurrent_init_single_winner(self):
        results = []
        lock = threading.Lock()
        barrier = threading.Barrier(8)

        def attempt():
            barrier.wait()
            try:
                Registry.install(Dispatcher())
                outcome = "ok"
            except AlreadyInitializedError:
                outcome = "already"
            with lock:
                results.append(outcome)

        threads = [threading.Thread(target=attempt) for _ in range(8)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert results.count("ok") == 1
        assert results.count("already") == 7

    def test_get_logger_without_init(self):
        # no dispatcher installed: silently ignored
        get_logger("app").error("nobody listens")

    def test_get_logger_uses_installed(self):
        stream = io.StringIO()
        tint_logger.init(console_dispatcher(stream, "info"), stdlib=False)
        get_logger("app").info("hello", user="ann")
        get_logger("app").debug("hidden")
        assert stream.getvalue() == "INFO  [app] hello user=ann\n"

    def test_init_term_logger(self):
        stream = io.StringIO()
        dispatcher = tint_logger.init_term_logger(Options.plain(), "warn", stream=stream)
        assert Registry.current() is dispatcher
        get_logger("app").warn("careful")
        assert stream.getvalue() == "WARN  [app] careful\n"

        with pytest.raises(AlreadyInitializedError):
            tint_logger.init_term_logger(Options.plain(), "warn", stream=stream)


class TestStdlibBridge:
    """Test records coming from the logging module."""

    def setup_method(self):
        Registry.reset()

    def teardown_method(self):
        Registry.reset()

    def test_captures_logging_calls(self):
        stream = io.StringIO()
        tint_logger.init(console_dispatcher(stream, "info,app.db=debug"))

        logging.getLogger("app.db").debug("query %d", 7)
        logging.getLogger("app.web").debug("hidden")
        logging.getLogger("app.web").warning("slow", extra={"ms": 900})

        assert stream.getvalue().splitlines() == [
            "DEBUG [app.db] query 7",
            "WARN  [app.web] slow ms=900",
        ]

    def test_trace_level(self):
        stream = io.StringIO()
        tint_logger.init(console_dispatcher(stream, "error,deep=trace"))
        logging.getLogger("deep").log(5, "tiny detail")
        assert stream.getvalue() == "TRACE [deep] tiny detail\n"

    def test_reset_detaches_handler(self):
        root = logging.getLogger()
        level = root.level
        tint_logger.init(console_dispatcher(io.StringIO()))

        assert any(isinstance(h, DispatchHandler) for h in root.handlers)
        Registry.reset()
        assert not any(isinstance(h, DispatchHandler) for h in root.handlers)
        assert root.level == level

    def test_entry_from_record(self):
        try:
            raise RuntimeError("bad")
        except RuntimeError:
            record = logging.getLogger("svc").makeRecord(
                "svc", logging.CRITICAL, "svc.py", 12, "failed %s", ("job",),
                exc_info=sys.exc_info(), extra={"job_id": 4},
            )

        entry = entry_from_record(record)
        assert entry.level == LogLevel.ERROR
        assert entry.target == "svc"
        assert entry.message.startswith("failed job\nTraceback")
        assert "RuntimeError: bad" in entry.message
        assert entry.fields == {"job_id": 4}
        assert entry.file_name == "svc.py"
        assert entry.line_number == 12

    def test_bad_format_args_do_not_raise(self, monkeypatch):
        monkeypatch.setattr(logging, "raiseExceptions", False)
        stream = io.StringIO()
        tint_logger.init(console_dispatcher(stream))
        logging.getLogger("app").info("%d items", "many")
        assert stream.getvalue() == ""

    def test_handler_filters_respected(self):
        stream = io.StringIO()
        tint_logger.init(console_dispatcher(stream))
        handler = next(h for h in logging.getLogger().handlers if isinstance(h, DispatchHandler))
        handler.addFilter(lambda record: "password" not in record.getMessage())

        logging.getLogger("app").info("password is hunter2")
        logging.getLogger("app").info("login ok")

        assert stream.getvalue() == "INFO  [app] login ok\n"

    def test_entry_keeps_record_time(self):
        record = logging.getLogger("svc").makeRecord(
            "svc", logging.INFO, "svc.py", 1, "tick", (), None,
        )
        record.created = 1587429534.5
        entry = entry_from_record(record)
        assert entry.timestamp.timestamp() == pytest.approx(1587429534.5)
