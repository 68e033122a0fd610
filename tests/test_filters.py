"""Tests for directive parsing and level filtering"""

import pytest

from tint_logger import LogLevel, LogEntry, ParseError
from tint_logger.filters import (
    BaseFilter,
    DEFAULT_LEVEL,
    Directive,
    DirectiveSet,
    DirectiveFilter,
    enabled,
    from_env,
    parse,
)


class TestParse:
    """Test the filter specification parser."""

    def test_two_directives(self):
        directives = parse("x=error,y=trace")
        assert directives.directives == (
            Directive("x", LogLevel.ERROR),
            Directive("y", LogLevel.TRACE),
        )
        assert directives.default == DEFAULT_LEVEL

    def test_default_level_is_info(self):
        assert DEFAULT_LEVEL == LogLevel.INFO

    def test_empty_and_absent(self):
        for spec in ("", None, "  ", ",,"):
            directives = parse(spec)
            assert len(directives) == 0
            assert directives.default == LogLevel.INFO

    def test_bare_level_sets_default(self):
        assert parse("debug").default == LogLevel.DEBUG

    def test_last_bare_level_wins(self):
        assert parse("debug,foo=info,warn").default == LogLevel.WARN

    def test_whitespace_and_empty_clauses(self):
        directives = parse(" foo = Info ,, bar=TRACE, ")
        assert directives.directives == (
            Directive("foo", LogLevel.INFO),
            Directive("bar", LogLevel.TRACE),
        )

    def test_order_preserved(self):
        directives = parse("b=info,a=warn,b=debug")
        assert [d.target for d in directives.directives] == ["b", "a", "b"]

    def test_rejects_unknown_level(self):
        with pytest.raises(ParseError) as exc_info:
            parse("x=notalevel")
        assert exc_info.value.clause == "x=notalevel"

    def test_rejects_unknown_bare_level(self):
        with pytest.raises(ParseError) as exc_info:
            parse("info,loud")
        assert exc_info.value.clause == "loud"

    def test_rejects_missing_target(self):
        with pytest.raises(ParseError):
            parse("=info")

    def test_rejects_missing_level(self):
        with pytest.raises(ParseError):
            parse("foo=")

    def test_parse_error_is_value_error(self):
        with pytest.raises(ValueError):
            parse("foo=bar=baz")

    def test_str_round_trip(self):
        directives = parse("warn,a=info,a.b=trace")
        assert parse(str(directives)) == directives


class TestFromEnv:
    """Test reading the specification from the environment."""

    def test_reads_variable(self):
        directives = from_env(environ={"TINT_LOG": "app=debug"})
        assert directives.directives == (Directive("app", LogLevel.DEBUG),)

    def test_missing_variable(self):
        assert from_env(environ={}) == DirectiveSet()

    def test_custom_variable(self, monkeypatch):
        monkeypatch.setenv("MY_FILTER", "error")
        assert from_env("MY_FILTER").default == LogLevel.ERROR

    def test_malformed_strict(self):
        with pytest.raises(ParseError):
            from_env(environ={"TINT_LOG": "app=nope"})

    def test_malformed_lenient(self):
        directives = from_env(environ={"TINT_LOG": "app=nope"}, strict=False)
        assert directives == DirectiveSet()


class TestEnabled:
    """Test the level filter."""

    def test_longest_prefix_wins(self):
        directives = DirectiveSet(
            (Directive("a", LogLevel.WARN), Directive("a::b", LogLevel.TRACE)),
            LogLevel.INFO,
        )
        assert enabled("a::b::c", LogLevel.TRACE, directives) is True
        assert enabled("a::x", LogLevel.TRACE, directives) is False
        assert enabled("a::x", LogLevel.WARN, directives) is True

    def test_longest_prefix_independent_of_order(self):
        directives = DirectiveSet(
            (Directive("a::b", LogLevel.TRACE), Directive("a", LogLevel.WARN)),
            LogLevel.INFO,
        )
        assert enabled("a::b::c", LogLevel.TRACE, directives) is True

    def test_default_only(self):
        directives = parse("")
        assert enabled("anything", LogLevel.INFO, directives) is True
        assert enabled("anything", LogLevel.ERROR, directives) is True
        assert enabled("anything", LogLevel.DEBUG, directives) is False

    def test_prefix_not_segment_aware(self):
        directives = parse("error,foo=trace")
        assert enabled("foobar", LogLevel.TRACE, directives) is True
        assert enabled("fo", LogLevel.TRACE, directives) is False

    def test_last_identical_prefix_wins(self):
        directives = parse("foo=error,foo=debug")
        assert enabled("foo", LogLevel.DEBUG, directives) is True
        directives = parse("foo=debug,foo=error")
        assert enabled("foo", LogLevel.DEBUG, directives) is False

    def test_off_directive(self):
        directives = parse("trace,noisy=off")
        assert enabled("noisy.module", LogLevel.ERROR, directives) is False
        assert enabled("quiet", LogLevel.TRACE, directives) is True

    def test_off_record_never_enabled(self):
        assert enabled("x", LogLevel.OFF, parse("trace")) is False

    def test_pure(self):
        directives = parse("warn,app=debug,app.db=trace")
        cases = [
            (target, level)
            for target in ("app", "app.db.pool", "other", "")
            for level in LogLevel
        ]
        first = [enabled(t, l, directives) for t, l in cases]
        second = [enabled(t, l, directives) for t, l in cases]
        assert first == second

    def test_mixed_specification(self):
        directives = parse("debug,foo::bar=off,foo::baz=trace,foo=info,baz=off,quux=error")
        assert directives.minimum_for("foo::bar") == LogLevel.OFF
        assert directives.minimum_for("foo::baz") == LogLevel.TRACE
        assert directives.minimum_for("foo") == LogLevel.INFO
        assert directives.minimum_for("baz") == LogLevel.OFF
        assert directives.minimum_for("quux") == LogLevel.ERROR
        assert directives.minimum_for("something") == LogLevel.DEBUG
        assert directives.minimum_for("another::thing") == LogLevel.DEBUG


class TestDirectiveFilter:
    """Test the entry filter wrapper."""

    def test_from_text(self):
        f = DirectiveFilter("warn,app=debug")
        assert f.should_log(LogEntry(LogLevel.DEBUG, "x", target="app.db"))
        assert not f.should_log(LogEntry(LogLevel.INFO, "x", target="lib"))

    def test_callable(self):
        f = DirectiveFilter(parse("error"))
        assert f(LogEntry(LogLevel.ERROR, "x", target="any")) is True

    def test_repr(self):
        assert "app=debug" in repr(DirectiveFilter("app=debug"))

    def test_content_filter_narrows_enabled_entries(self):
        class DropTarget(BaseFilter):
            def should_log(self, entry):
                return entry.target != "noisy"

        f = DropTarget()
        assert f(LogEntry(LogLevel.INFO, "x", target="app")) is True
        assert f(LogEntry(LogLevel.INFO, "x", target="noisy")) is False
        with pytest.raises(TypeError):
            BaseFilter()
