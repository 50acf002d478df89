"""Clock capability.

All "now" lookups in the package go through a ``Clock`` so callers and tests
can pin the current instant instead of depending on wall-clock time.
"""

from __future__ import annotations

import time
from dataclasses import dataclass
from datetime import UTC, datetime, timedelta
from typing import Protocol

from .errors import EpochRangeError
from .global_config import ONE_SECOND_MILLIS

EPOCH = datetime(1970, 1, 1, tzinfo=UTC)


class Clock(Protocol):
    """Source of the current instant."""

    def epoch_millis(self) -> int:
        """Return milliseconds since the epoch."""
        ...

    def now_utc(self) -> datetime:
        """Return the current instant as a tz-aware UTC datetime."""
        ...


class SystemClock:
    """Clock backed by the process clock."""

    def epoch_millis(self) -> int:
        return time.time_ns() // 1_000_000

    def now_utc(self) -> datetime:
        return datetime.now(UTC)

    def __repr__(self) -> str:
        return "SystemClock()"


@dataclass(frozen=True)
class FixedClock:
    """Clock that always reports the same instant.

    Args:
        millis: Instant in milliseconds since the epoch.
    """

    millis: int

    @classmethod
    def at(cls, dt: datetime) -> FixedClock:
        """Build a FixedClock from a tz-aware datetime."""
        if dt.tzinfo is None:
            raise ValueError(f"Cannot pin clock to naive datetime {dt}")
        return cls(millis_from_datetime(dt))

    def epoch_millis(self) -> int:
        return self.millis

    def now_utc(self) -> datetime:
        return datetime_from_millis(self.millis)


SYSTEM_CLOCK = SystemClock()


def resolve_clock(clock: Clock | None) -> Clock:
    """Return ``clock`` or the process-wide system clock."""
    return SYSTEM_CLOCK if clock is None else clock


def datetime_from_millis(millis: int) -> datetime:
    """Convert epoch milliseconds to a tz-aware UTC datetime.

    Uses integer timedelta arithmetic, so negative instants and millisecond
    precision are preserved exactly.

    Raises:
        EpochRangeError: If the instant falls outside years 1-9999.
    """
    try:
        return EPOCH + timedelta(milliseconds=millis)
    except OverflowError as e:
        raise EpochRangeError(f"Epoch {millis} ms is outside the supported range (years 1-9999)") from e


def millis_from_datetime(dt: datetime) -> int:
    """Convert a tz-aware datetime to epoch milliseconds (sub-millisecond part dropped)."""
    return timedelta_millis(dt - EPOCH)


def timedelta_millis(delta: timedelta) -> int:
    """Return a timedelta as whole milliseconds, flooring any sub-millisecond part."""
    return (delta.days * 86_400 + delta.seconds) * ONE_SECOND_MILLIS + delta.microseconds // 1000


def trunc_div(value: int, divisor: int) -> int:
    """Integer division truncating toward zero."""
    quotient = abs(value) // abs(divisor)
    return quotient if (value >= 0) == (divisor > 0) else -quotient
