"""Epoch/calendar conversion.

Converts civil date/time fields to UTC epoch seconds, reads "now" from a
``Clock`` and normalizes epoch seconds to coarser units.

Civil fields are lenient by default: out-of-range values roll over into the
neighbouring unit (month 13 is January of the next year, day 0 is the last day
of the previous month, hour 24 is midnight of the next day). Pass
``strict=True`` to reject them instead.
"""

from __future__ import annotations

import logging
import re
from datetime import datetime, timedelta

from .clock import Clock, millis_from_datetime, resolve_clock, trunc_div
from .errors import InvalidFieldError, ParseError
from .global_config import (
    COMPACT_FIELD_WIDTHS,
    COMPACT_FORMAT_LENGTH,
    ONE_SECOND_MILLIS,
    TIMEZONE_ID_UTC,
)
from .timezones import current_timezone, resolve_timezone

logger = logging.getLogger(__name__)

COMPACT_PATTERN = re.compile(r"[0-9]{%d}" % COMPACT_FORMAT_LENGTH)


def _lenient_wall_time(
    year: int, month: int, day: int, hour: int, minute: int, second: int
) -> datetime:
    # Months carry into years first, everything below a month is a plain offset
    # from the first of that month.
    carry, month_index = divmod(month - 1, 12)
    first_of_month = datetime(year + carry, month_index + 1, 1)
    return first_of_month + timedelta(
        days=day - 1, hours=hour, minutes=minute, seconds=second
    )


def civil_to_datetime(
    year: int,
    month: int,
    day: int,
    hour: int = 0,
    minute: int = 0,
    second: int = 0,
    timezone: str | None = TIMEZONE_ID_UTC,
    *,
    strict: bool = False,
) -> datetime:
    """Build a tz-aware datetime from civil fields.

    Only the supplied fields contribute; microseconds are always zero. The wall
    time is placed in ``timezone`` with ``fold=0``: a wall time that occurs
    twice resolves to the earlier instant and a wall time inside a DST gap uses
    the offset in force before the transition.

    Args:
        year: Year.
        month: Month, 1-based.
        day: Day of month.
        hour: Hour in 24-hour clock.
        minute: Minute.
        second: Second.
        timezone: IANA timezone id. None or "" means UTC.
        strict: Reject out-of-range fields instead of rolling them over.

    Returns:
        Tz-aware datetime in ``timezone``.

    Raises:
        InvalidFieldError: If a field is out of range and ``strict`` is set, or
            if the rolled-over date falls outside years 1-9999.
    """
    zone = resolve_timezone(timezone)
    try:
        if strict:
            wall = datetime(year, month, day, hour, minute, second)
        else:
            wall = _lenient_wall_time(year, month, day, hour, minute, second)
    except (ValueError, OverflowError) as e:
        raise InvalidFieldError(
            f"Invalid civil date/time {year:04d}-{month:02d}-{day:02d} "
            f"{hour:02d}:{minute:02d}:{second:02d}: {e}"
        ) from e

    return wall.replace(tzinfo=zone, fold=0)


def civil_to_epoch_second(
    year: int,
    month: int,
    day: int,
    hour: int,
    minute: int,
    second: int,
    timezone: str | None = TIMEZONE_ID_UTC,
    *,
    strict: bool = False,
) -> int:
    """Convert civil fields in ``timezone`` to UTC epoch seconds.

    Args:
        year: Year.
        month: Month value from 1 to 12 (rolls over when lenient).
        day: Day of month.
        hour: Hour in 24-hour clock.
        minute: Minute.
        second: Second.
        timezone: IANA timezone id of the fields. Defaults to UTC.
        strict: Reject out-of-range fields with InvalidFieldError.

    Returns:
        Epoch seconds.
    """
    local = civil_to_datetime(
        year, month, day, hour, minute, second, timezone, strict=strict
    )
    epoch_second = trunc_div(millis_from_datetime(local), ONE_SECOND_MILLIS)
    logger.debug("Civil %s in %s -> epoch second %d", local.isoformat(), timezone, epoch_second)
    return epoch_second


def compact_string_to_epoch_second(value: str, *, strict: bool = False) -> int:
    """Convert a compact ``yyyyMMddHHmmss`` string (UTC) to epoch seconds.

    Args:
        value: Exactly 14 ASCII digits.
        strict: Reject out-of-range fields instead of rolling them over.

    Returns:
        Epoch seconds.

    Raises:
        ParseError: If the string is not exactly 14 digits.
    """
    if not isinstance(value, str) or not COMPACT_PATTERN.fullmatch(value):
        raise ParseError(
            f"Expected {COMPACT_FORMAT_LENGTH} digits (yyyyMMddHHmmss), got: {value!r}",
            text=value if isinstance(value, str) else None,
            pattern="yyyyMMddHHmmss",
        )

    fields = []
    pos = 0
    for width in COMPACT_FIELD_WIDTHS:
        fields.append(int(value[pos : pos + width]))
        pos += width

    year, month, day, hour, minute, second = fields
    return civil_to_epoch_second(
        year, month, day, hour, minute, second, TIMEZONE_ID_UTC, strict=strict
    )


def current_epoch_millis(*, clock: Clock | None = None) -> int:
    """Return current epoch milliseconds. Epoch is UTC by construction."""
    return resolve_clock(clock).epoch_millis()


def current_epoch_second(*, clock: Clock | None = None) -> int:
    """Return current epoch seconds."""
    return trunc_div(current_epoch_millis(clock=clock), ONE_SECOND_MILLIS)


def epoch_second_now(*, clock: Clock | None = None) -> int:
    """Return current epoch seconds computed through the UTC calendar.

    Agrees with ``current_epoch_second`` for the same clock reading.
    """
    now = resolve_clock(clock).now_utc()
    return trunc_div(millis_from_datetime(now), ONE_SECOND_MILLIS)


def normalized_epoch_second(unit: int, *, clock: Clock | None = None) -> int:
    """Floor the current epoch second to a multiple of ``unit``.

    For example, with ``unit=5`` the result is divisible by 5 and not greater
    than the current epoch second.

    Args:
        unit: Normalize unit in seconds. Must be a positive integer.

    Returns:
        Normalized epoch second.

    Raises:
        ValueError: If ``unit`` is not a positive integer.
    """
    if isinstance(unit, bool) or not isinstance(unit, int) or unit <= 0:
        raise ValueError(f"Normalize unit must be a positive integer, got: {unit!r}")

    second = epoch_second_now(clock=clock)
    return second - second % unit


def _now_local(timezone: str | None, clock: Clock | None) -> datetime:
    zone = current_timezone() if timezone is None else resolve_timezone(timezone)
    return resolve_clock(clock).now_utc().astimezone(zone)


def current_year(*, clock: Clock | None = None) -> int:
    """Return the current year in the host default timezone."""
    return _now_local(None, clock).year


def current_month(*, clock: Clock | None = None) -> int:
    """Return the current month (1-12) in the host default timezone."""
    return _now_local(None, clock).month


def current_day(*, clock: Clock | None = None) -> int:
    """Return the current day of month in the host default timezone."""
    return _now_local(None, clock).day


def local_day(timezone_id: str, *, clock: Clock | None = None) -> int:
    """Return the current day of month in ``timezone_id``."""
    return _now_local(timezone_id, clock).day
