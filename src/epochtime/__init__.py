"""
epochtime core package.

Timezone-aware conversion between civil date/time fields, date strings and
UTC epoch values:
- Epoch/calendar conversion and "now" lookups (`epochtime.converter`)
- Timezone and DST offset queries (`epochtime.timezones`)
- Pattern-based epoch <-> string conversion (`epochtime.formatter`)
- Leap-aware day counting (`epochtime.daydiff`)

Configuration:
- Shared constants and environment variable names live in
  `epochtime.global_config`.
- "Now" is read from an injectable clock (`epochtime.clock`).
"""

from .clock import Clock, FixedClock, SystemClock
from .converter import (
    civil_to_datetime,
    civil_to_epoch_second,
    compact_string_to_epoch_second,
    current_day,
    current_epoch_millis,
    current_epoch_second,
    current_month,
    current_year,
    epoch_second_now,
    local_day,
    normalized_epoch_second,
)
from .daydiff import (
    days_between,
    days_between_epoch,
    days_between_epoch_second,
    days_between_strings,
)
from .errors import (
    EpochRangeError,
    EpochTimeError,
    InvalidFieldError,
    InvalidTimezoneError,
    ParseError,
    PatternError,
)
from .formatter import (
    current_date_string,
    epoch_second_to_current_string,
    epoch_second_to_local_string,
    epoch_second_to_string,
    epoch_second_to_utc_string,
    epoch_to_current_string,
    epoch_to_string,
    epoch_to_utc_string,
    local_epoch_to_string,
    string_to_epoch,
    string_to_epoch_second,
)
from .log import configure_logging, get_logger
from .timezones import (
    current_daylight_saving_offset_hour,
    current_daylight_saving_offset_millis,
    current_timezone_id,
    current_timezone_offset_hour,
    current_timezone_offset_millis,
    local_daylight_saving_offset_hour,
    local_daylight_saving_offset_millis,
    local_timezone_offset_hour,
    local_timezone_offset_millis,
    resolve_timezone,
)

__all__ = [
    # Clock
    "Clock",
    "FixedClock",
    "SystemClock",
    # Converter
    "civil_to_datetime",
    "civil_to_epoch_second",
    "compact_string_to_epoch_second",
    "current_day",
    "current_epoch_millis",
    "current_epoch_second",
    "current_month",
    "current_year",
    "epoch_second_now",
    "local_day",
    "normalized_epoch_second",
    # Day difference
    "days_between",
    "days_between_epoch",
    "days_between_epoch_second",
    "days_between_strings",
    # Errors
    "EpochRangeError",
    "EpochTimeError",
    "InvalidFieldError",
    "InvalidTimezoneError",
    "ParseError",
    "PatternError",
    # Formatter
    "current_date_string",
    "epoch_second_to_current_string",
    "epoch_second_to_local_string",
    "epoch_second_to_string",
    "epoch_second_to_utc_string",
    "epoch_to_current_string",
    "epoch_to_string",
    "epoch_to_utc_string",
    "local_epoch_to_string",
    "string_to_epoch",
    "string_to_epoch_second",
    # Logging
    "configure_logging",
    "get_logger",
    # Timezones
    "current_daylight_saving_offset_hour",
    "current_daylight_saving_offset_millis",
    "current_timezone_id",
    "current_timezone_offset_hour",
    "current_timezone_offset_millis",
    "local_daylight_saving_offset_hour",
    "local_daylight_saving_offset_millis",
    "local_timezone_offset_hour",
    "local_timezone_offset_millis",
    "resolve_timezone",
]
