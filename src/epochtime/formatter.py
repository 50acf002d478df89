"""Epoch <-> date string conversion.

Each conversion binds a pattern and up to two timezone ids:

- ``interpret_tz``: the zone the instant is interpreted in. Instants are UTC
  by construction, so this zone is resolved but never changes the result.
- ``render_tz``: the zone whose clock face is rendered (epoch -> string), or
  the zone the string's fields are read in (string -> epoch). When empty, the
  epoch -> string direction uses the host default zone and the string -> epoch
  direction falls back to ``interpret_tz``.

Patterns are letter patterns (``yyyy-MM-dd HH:mm:ss``) or strftime patterns,
see ``epochtime.patterns``. Nothing is shared between calls: every call
translates its own pattern and formats/parses fresh datetime objects, so the
functions are safe to call from several threads at once.
"""

from __future__ import annotations

import logging
from datetime import datetime

from .clock import Clock, datetime_from_millis, millis_from_datetime, resolve_clock, trunc_div
from .errors import EpochRangeError, ParseError
from .global_config import MISSING_FIELD_YEAR, ONE_SECOND_MILLIS, TIMEZONE_ID_UTC
from .patterns import MILLIS_DIRECTIVE, has_year_field, is_strftime_pattern, to_strftime
from .timezones import current_timezone, resolve_timezone

logger = logging.getLogger(__name__)


def epoch_to_string(
    epoch: int,
    pattern: str,
    interpret_tz: str | None,
    render_tz: str | None = None,
) -> str:
    """Convert epoch milliseconds to a date string.

    Args:
        epoch: Epoch in milliseconds.
        pattern: Date pattern.
        interpret_tz: Timezone id of the input epoch.
        render_tz: Timezone id of the result string. None or "" means the host
            default timezone.

    Returns:
        Formatted date string.

    Raises:
        EpochRangeError: If the instant cannot be represented (years 1-9999).
        PatternError: If the pattern cannot be translated.
    """
    resolve_timezone(interpret_tz)
    render_zone = resolve_timezone(render_tz) if render_tz else current_timezone()
    fmt = to_strftime(pattern)
    instant = datetime_from_millis(epoch)
    try:
        local = instant.astimezone(render_zone)
    except OverflowError as e:
        raise EpochRangeError(f"Epoch {epoch} ms is outside the supported range in {render_zone}") from e

    if not is_strftime_pattern(pattern):
        fmt = fmt.replace(MILLIS_DIRECTIVE, f"{local.microsecond // 1000:03d}")
    formatted = local.strftime(fmt)
    logger.debug("Formatted epoch %d with %r in %s -> %r", epoch, fmt, render_zone, formatted)
    return formatted


def epoch_to_utc_string(epoch: int, pattern: str) -> str:
    """Convert epoch milliseconds to a UTC date string."""
    return epoch_to_string(epoch, pattern, TIMEZONE_ID_UTC, TIMEZONE_ID_UTC)


def epoch_to_current_string(epoch: int, pattern: str) -> str:
    """Convert epoch milliseconds to a date string in the host default timezone."""
    return epoch_to_string(epoch, pattern, TIMEZONE_ID_UTC, None)


def local_epoch_to_string(epoch: int, pattern: str, timezone_id: str) -> str:
    """Convert epoch milliseconds to the wall-clock date string of ``timezone_id``."""
    return epoch_to_string(epoch, pattern, timezone_id, timezone_id)


def epoch_second_to_string(
    epoch_second: int,
    pattern: str,
    interpret_tz: str | None,
    render_tz: str | None = None,
) -> str:
    """Convert epoch seconds to a date string, see ``epoch_to_string``."""
    return epoch_to_string(epoch_second * ONE_SECOND_MILLIS, pattern, interpret_tz, render_tz)


def epoch_second_to_utc_string(epoch_second: int, pattern: str) -> str:
    return epoch_to_utc_string(epoch_second * ONE_SECOND_MILLIS, pattern)


def epoch_second_to_current_string(epoch_second: int, pattern: str) -> str:
    return epoch_to_current_string(epoch_second * ONE_SECOND_MILLIS, pattern)


def epoch_second_to_local_string(epoch_second: int, pattern: str, timezone_id: str) -> str:
    return local_epoch_to_string(epoch_second * ONE_SECOND_MILLIS, pattern, timezone_id)


def current_date_string(pattern: str, *, clock: Clock | None = None) -> str:
    """Return the current instant formatted in the host default timezone."""
    return epoch_to_current_string(resolve_clock(clock).epoch_millis(), pattern)


def string_to_epoch(
    date_string: str,
    pattern: str,
    interpret_tz: str | None = TIMEZONE_ID_UTC,
    render_tz: str | None = None,
) -> int:
    """Convert a date string to epoch milliseconds.

    The string's fields are read in ``render_tz`` when it is given, otherwise
    in ``interpret_tz``. The resulting instant is returned as is: passing a
    different ``interpret_tz`` alongside a ``render_tz`` does not shift it.
    Fields the pattern does not contain default to 1970-01-01 00:00:00. An
    offset parsed from the string (``Z`` letter / ``%z``) takes precedence over
    the zone.

    Args:
        date_string: Date string to convert.
        pattern: Pattern of the date string.
        interpret_tz: Timezone id of the date.
        render_tz: Timezone id of the date pattern.

    Returns:
        Epoch milliseconds.

    Raises:
        ParseError: If the string does not match the pattern.
    """
    resolve_timezone(interpret_tz)
    parse_zone = resolve_timezone(render_tz if render_tz else interpret_tz)
    fmt = to_strftime(pattern)

    try:
        parsed = datetime.strptime(date_string, fmt)
    except ValueError as e:
        raise ParseError(
            f"Cannot parse {date_string!r} with pattern {pattern!r}: {e}",
            text=date_string,
            pattern=pattern,
        ) from e

    if not has_year_field(fmt):
        parsed = parsed.replace(year=MISSING_FIELD_YEAR)
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=parse_zone)

    epoch = millis_from_datetime(parsed)
    logger.debug("Parsed %r with %r in %s -> epoch %d", date_string, fmt, parse_zone, epoch)
    return epoch


def string_to_epoch_second(
    date_string: str,
    pattern: str,
    interpret_tz: str | None = TIMEZONE_ID_UTC,
    render_tz: str | None = None,
) -> int:
    """Convert a date string to epoch seconds, see ``string_to_epoch``."""
    return trunc_div(string_to_epoch(date_string, pattern, interpret_tz, render_tz), ONE_SECOND_MILLIS)
