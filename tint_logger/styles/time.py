"""
Timestamp configuration

A TimeConfig wraps an optional clock: a callable taking the record's
creation time and returning the text to print in the timestamp field.
Renderers ask for a stamp on every record and omit the field when there
is none.
"""

from __future__ import annotations

import threading
import time
from datetime import datetime, timezone
from typing import Callable, Optional

from tint_logger.core.errors import InvalidFormatError

Clock = Callable[[datetime], str]


def _format_elapsed(seconds: float) -> str:
    whole = int(seconds)
    nanos = int(round((seconds - whole) * 1_000_000_000))
    if nanos >= 1_000_000_000:
        whole += 1
        nanos -= 1_000_000_000
    return f"{whole:04}.{nanos:09}s"


class TimeConfig:
    """
    How the timestamp should be displayed.

    Use the factory methods:
        - none(): no timestamp (default)
        - relative_now(): seconds since the config was created
        - relative_local(): seconds since the previous record
        - unix(): seconds since the epoch at which the record was created
        - date_time_format(fmt): record creation time in UTC, strftime
        - custom(clock): any callable taking the record time, returning text

    relative_local() keeps state between records. Call stamp() while
    holding the lock that orders output, so the deltas follow the order
    in which records are written.
    """

    def __init__(self, clock: Optional[Clock] = None, kind: str = "custom"):
        """
        Initialize time config.

        Args:
            clock: Callable taking the record time and returning the
                   timestamp text, or None for no timestamp
            kind: Short name used in repr
        """
        self._clock = clock
        self.kind = kind if clock is not None else "none"

    @property
    def enabled(self) -> bool:
        """Whether a timestamp field is rendered."""
        return self._clock is not None

    def stamp(self, when: Optional[datetime] = None) -> Optional[str]:
        """
        Timestamp text for a record.

        Args:
            when: Record creation time (default: now)

        Returns:
            Timestamp text, or None if timestamps are disabled
        """
        if self._clock is None:
            return None
        return self._clock(when if when is not None else datetime.now())

    @classmethod
    def none(cls) -> "TimeConfig":
        """No timestamp."""
        return cls(None)

    @classmethod
    def relative_now(cls, monotonic: Callable[[], float] = time.monotonic) -> "TimeConfig":
        """Seconds elapsed since now, e.g. ``0012.500000000s``."""
        start = monotonic()

        def clock(when: datetime) -> str:
            return _format_elapsed(monotonic() - start)

        return cls(clock, "relative")

    @classmethod
    def relative_local(cls, monotonic: Callable[[], float] = time.monotonic) -> "TimeConfig":
        """
        Seconds elapsed since the previous record.

        The first record shows ``0000.000000000s``.
        """
        lock = threading.Lock()
        previous: Optional[float] = None

        def clock(when: datetime) -> str:
            nonlocal previous
            with lock:
                now = monotonic()
                last, previous = previous, now
            return _format_elapsed(0.0 if last is None else now - last)

        return cls(clock, "timing")

    @classmethod
    def unix(cls) -> "TimeConfig":
        """Whole seconds since the Unix epoch."""

        def clock(when: datetime) -> str:
            return f"{int(when.timestamp()):04}s"

        return cls(clock, "unix")

    @classmethod
    def date_time_format(cls, fmt: str) -> "TimeConfig":
        """
        Record time in UTC formatted with strftime.

        Naive record times are taken as local time.

        Raises:
            InvalidFormatError: If fmt is empty or rejected by strftime
        """
        if not fmt:
            raise InvalidFormatError("timestamp format must not be empty")
        try:
            datetime.now(timezone.utc).strftime(fmt)
        except (ValueError, TypeError) as e:
            raise InvalidFormatError(f"invalid timestamp format {fmt!r}: {e}") from e

        def clock(when: datetime) -> str:
            return when.astimezone(timezone.utc).strftime(fmt)

        return cls(clock, "datetime")

    @classmethod
    def custom(cls, clock: Clock) -> "TimeConfig":
        """Timestamp text supplied by any callable taking the record time."""
        if not callable(clock):
            raise TypeError("clock must be callable")
        return cls(clock, "custom")

    def __repr__(self) -> str:
        """String representation."""
        return f"TimeConfig(kind={self.kind})"
