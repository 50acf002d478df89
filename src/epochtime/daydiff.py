"""Number of calendar days between two dates.

Time of day never matters: every input is reduced to a calendar date first
(instants are floored onto their UTC day). The count is accumulated year by
year using each year's real length, so spans crossing Feb 29 are exact.
"""

from __future__ import annotations

import calendar
import logging
from datetime import UTC, date, datetime

from .clock import datetime_from_millis
from .formatter import string_to_epoch
from .global_config import ONE_SECOND_MILLIS
from .timezones import current_timezone_id

logger = logging.getLogger(__name__)


def _as_date(day: date | datetime) -> date:
    if isinstance(day, datetime):
        return day.date()
    return day


def _day_of_year(day: date) -> int:
    return day.timetuple().tm_yday


def days_in_year(year: int) -> int:
    """Return 366 for leap years, 365 otherwise."""
    return 366 if calendar.isleap(year) else 365


def days_between(day1: date | datetime, day2: date | datetime) -> int:
    """Calculate days between two dates.

    Argument order does not matter. Datetimes contribute only their date
    (convert aware values to the zone of interest before calling).

    Args:
        day1: Day to calculate.
        day2: Day to calculate.

    Returns:
        Non-negative number of days between the two dates.
    """
    day_one, day_two = _as_date(day1), _as_date(day2)

    if day_one.year == day_two.year:
        return abs(_day_of_year(day_one) - _day_of_year(day_two))

    # day_one holds the later year
    if day_two.year > day_one.year:
        day_one, day_two = day_two, day_one

    day_one_original_year_days = _day_of_year(day_one)
    year = day_one.year
    extra_days = 0
    while year > day_two.year:
        year -= 1
        # length of the year just stepped into, 366 for leap years
        extra_days += days_in_year(year)

    return extra_days - _day_of_year(day_two) + day_one_original_year_days


def utc_day(epoch: int) -> date:
    """Return the UTC calendar day of epoch milliseconds."""
    return datetime_from_millis(epoch).astimezone(UTC).date()


def days_between_epoch(epoch1: int, epoch2: int) -> int:
    """Calculate days between the UTC days of two epoch millisecond values.

    Raises:
        EpochRangeError: If either instant falls outside years 1-9999.
    """
    return days_between(utc_day(epoch1), utc_day(epoch2))


def days_between_epoch_second(epoch_second1: int, epoch_second2: int) -> int:
    """Calculate days between the UTC days of two epoch second values."""
    return days_between_epoch(epoch_second1 * ONE_SECOND_MILLIS, epoch_second2 * ONE_SECOND_MILLIS)


def days_between_strings(
    day1: str,
    day2: str,
    pattern: str,
    tz1: str | None = None,
    tz2: str | None = None,
) -> int:
    """Calculate days between two date strings.

    Each string is parsed in its own timezone to an instant, and the instants
    are compared by UTC calendar day.

    Args:
        day1: Day to calculate.
        day2: Day to calculate.
        pattern: Pattern of both strings.
        tz1: Timezone id of ``day1``. Defaults to the host default timezone.
        tz2: Timezone id of ``day2``. Defaults to ``tz1`` when given, else the
            host default timezone. An omitted ``tz2`` follows ``tz1``,
            not the host zone.

    Returns:
        Non-negative number of days between the two dates.

    Raises:
        ParseError: If either string does not match the pattern.
    """
    zone1 = tz1 or current_timezone_id()
    zone2 = tz2 or zone1
    epoch1 = string_to_epoch(day1, pattern, render_tz=zone1)
    epoch2 = string_to_epoch(day2, pattern, render_tz=zone2)
    days = days_between_epoch(epoch1, epoch2)
    logger.debug("Days between %r (%s) and %r (%s): %d", day1, zone1, day2, zone2, days)
    return days
