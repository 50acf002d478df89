"""Timezone resolution and offset queries.

Timezone ids are IANA identifiers resolved through ``zoneinfo``. Resolution
follows the reference tz-database convention: an unknown id silently becomes
UTC (logged at WARNING). Setting ``EPOCHTIME_STRICT_TZ`` (or passing
``strict=True``) turns that fallback into ``InvalidTimezoneError``.

Offsets depend on the instant, not only on the zone, so every offset query is
evaluated at the clock's current instant.
"""

from __future__ import annotations

import logging
import os
from datetime import datetime, timedelta, tzinfo
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

import tzlocal

from .clock import Clock, resolve_clock, timedelta_millis, trunc_div
from .errors import InvalidTimezoneError
from .global_config import (
    DEFAULT_TZ_ENV,
    ONE_HOUR_SECONDS,
    ONE_SECOND_MILLIS,
    POSIX_TZ_ENV,
    STRICT_TZ_ENV,
    TIMEZONE_ID_UTC,
    TRUTHY_ENV_VALUES,
)

logger = logging.getLogger(__name__)


def strict_timezones_enabled() -> bool:
    """Return True when ``EPOCHTIME_STRICT_TZ`` holds a truthy value."""
    return os.environ.get(STRICT_TZ_ENV, "").strip().lower() in TRUTHY_ENV_VALUES


def resolve_timezone(timezone_id: str | None, *, strict: bool | None = None) -> tzinfo:
    """Resolve a timezone id to a tzinfo.

    Args:
        timezone_id: IANA identifier (e.g. "Asia/Taipei"). None or "" means UTC.
        strict: Raise instead of falling back to UTC. Defaults to the
            ``EPOCHTIME_STRICT_TZ`` setting.

    Returns:
        ZoneInfo for the id, or the UTC ZoneInfo when the id is unknown.

    Raises:
        InvalidTimezoneError: If the id is unknown and strict resolution is on.
    """
    if not timezone_id:
        return ZoneInfo(TIMEZONE_ID_UTC)

    try:
        return ZoneInfo(timezone_id)
    except (ZoneInfoNotFoundError, IsADirectoryError, ValueError) as e:
        if strict is None:
            strict = strict_timezones_enabled()
        if strict:
            raise InvalidTimezoneError(f"Unknown timezone id: {timezone_id}") from e
        logger.warning("Unknown timezone id %r, falling back to %s", timezone_id, TIMEZONE_ID_UTC)
        return ZoneInfo(TIMEZONE_ID_UTC)


def current_timezone_id() -> str:
    """Return the host default timezone id.

    Lookup order: ``EPOCHTIME_DEFAULT_TZ``, then ``TZ`` (a leading ":" is
    stripped), then the system configuration as reported by ``tzlocal``
    (``/etc/localtime``, ``/etc/timezone``, the Windows registry). A host with
    no usable configuration gets "UTC".
    """
    for var in (DEFAULT_TZ_ENV, POSIX_TZ_ENV):
        value = os.environ.get(var, "").strip()
        if value.startswith(":"):
            value = value[1:]
        if value:
            return value

    try:
        name = tzlocal.get_localzone_name()
    except (ZoneInfoNotFoundError, ValueError) as e:
        logger.warning("Cannot determine host timezone (%s), falling back to %s", e, TIMEZONE_ID_UTC)
        return TIMEZONE_ID_UTC
    return name or TIMEZONE_ID_UTC


def current_timezone() -> tzinfo:
    """Return the tzinfo of the host default timezone."""
    return resolve_timezone(current_timezone_id())


def _millis(delta: timedelta | None) -> int:
    return 0 if delta is None else timedelta_millis(delta)


def _to_hours(millis: int) -> int:
    # milliseconds -> seconds -> hour
    return trunc_div(trunc_div(millis, ONE_SECOND_MILLIS), ONE_HOUR_SECONDS)


def daylight_saving_offset_millis_at(zone: tzinfo, when: datetime) -> int:
    """Return the DST adjustment of ``zone`` at instant ``when`` in milliseconds."""
    return _millis(when.astimezone(zone).dst())


def timezone_offset_millis_at(zone: tzinfo, when: datetime) -> int:
    """Return the standard (raw) UTC offset of ``zone`` at ``when`` in milliseconds.

    This is the total offset minus the DST adjustment.
    """
    local = when.astimezone(zone)
    return _millis(local.utcoffset()) - _millis(local.dst())


def local_timezone_offset_millis(timezone_id: str, *, clock: Clock | None = None) -> int:
    """Return the standard offset of ``timezone_id`` now, in milliseconds."""
    zone = resolve_timezone(timezone_id)
    return timezone_offset_millis_at(zone, resolve_clock(clock).now_utc())


def local_timezone_offset_hour(timezone_id: str, *, clock: Clock | None = None) -> int:
    """Return the standard offset of ``timezone_id`` now, in whole hours."""
    return _to_hours(local_timezone_offset_millis(timezone_id, clock=clock))


def current_timezone_offset_millis(*, clock: Clock | None = None) -> int:
    """Return the standard offset of the host default zone now, in milliseconds."""
    return local_timezone_offset_millis(current_timezone_id(), clock=clock)


def current_timezone_offset_hour(*, clock: Clock | None = None) -> int:
    """Return the standard offset of the host default zone now, in whole hours."""
    return _to_hours(current_timezone_offset_millis(clock=clock))


def local_daylight_saving_offset_millis(timezone_id: str, *, clock: Clock | None = None) -> int:
    """Return the DST adjustment of ``timezone_id`` now, in milliseconds."""
    zone = resolve_timezone(timezone_id)
    return daylight_saving_offset_millis_at(zone, resolve_clock(clock).now_utc())


def local_daylight_saving_offset_hour(timezone_id: str, *, clock: Clock | None = None) -> int:
    """Return the DST adjustment of ``timezone_id`` now, in whole hours."""
    return _to_hours(local_daylight_saving_offset_millis(timezone_id, clock=clock))


def current_daylight_saving_offset_millis(*, clock: Clock | None = None) -> int:
    """Return the DST adjustment of the host default zone now, in milliseconds."""
    return local_daylight_saving_offset_millis(current_timezone_id(), clock=clock)


def current_daylight_saving_offset_hour(*, clock: Clock | None = None) -> int:
    """Return the DST adjustment of the host default zone now, in whole hours."""
    return _to_hours(current_daylight_saving_offset_millis(clock=clock))
