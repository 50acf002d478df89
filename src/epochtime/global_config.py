"""Global, project-wide configuration constants.

This module intentionally contains **no business logic** – only shared
constants and the names of the environment variables the package reads.
Environment values are looked up at call time by the modules that need them,
never cached here.
"""

# Core Names
PACKAGE_NAME = "epochtime"

# Timezone identifiers
TIMEZONE_ID_UTC = "UTC"

# Unit sizes
ONE_SECOND_MILLIS = 1000
ONE_HOUR_SECONDS = 3600

# Compact date strings: yyyyMMddHHmmss
COMPACT_FORMAT_LENGTH = 14
COMPACT_FIELD_WIDTHS = (4, 2, 2, 2, 2, 2)

# Year used when a parse pattern has no year field
MISSING_FIELD_YEAR = 1970

# Environment variables
# Overrides the host default timezone (checked before TZ)
DEFAULT_TZ_ENV = "EPOCHTIME_DEFAULT_TZ"
# POSIX timezone variable, used when DEFAULT_TZ_ENV is unset
POSIX_TZ_ENV = "TZ"
# Truthy values turn unknown timezone ids into InvalidTimezoneError
STRICT_TZ_ENV = "EPOCHTIME_STRICT_TZ"
TRUTHY_ENV_VALUES = frozenset({"1", "true", "yes", "on"})
