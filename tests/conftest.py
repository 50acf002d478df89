from __future__ import annotations

import pytest
import tzlocal

from epochtime.clock import FixedClock
from epochtime.global_config import DEFAULT_TZ_ENV, POSIX_TZ_ENV, STRICT_TZ_ENV, TIMEZONE_ID_UTC

# 2017-08-07T14:00:40.291Z
FIXED_EPOCH_MILLIS = 1502114440291


@pytest.fixture(autouse=True)
def clean_timezone_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """
    Removes host timezone settings so every test starts from the UTC default.
    The system zone reported by tzlocal is pinned to UTC as well.
    Tests that need a host zone use the `host_tz` or `system_tz` fixtures.
    """
    for var in (DEFAULT_TZ_ENV, POSIX_TZ_ENV, STRICT_TZ_ENV):
        monkeypatch.delenv(var, raising=False)
    monkeypatch.setattr(tzlocal, "get_localzone_name", lambda: TIMEZONE_ID_UTC)


@pytest.fixture
def host_tz(monkeypatch: pytest.MonkeyPatch):
    """
    Returns a setter for the host default timezone.
    """

    def _set(timezone_id: str) -> None:
        monkeypatch.setenv(DEFAULT_TZ_ENV, timezone_id)

    return _set


@pytest.fixture
def system_tz(monkeypatch: pytest.MonkeyPatch):
    """
    Returns a setter for the zone the operating system reports (None means unconfigured).
    """

    def _set(timezone_id: str | None) -> None:
        monkeypatch.setattr(tzlocal, "get_localzone_name", lambda: timezone_id)

    return _set


@pytest.fixture
def fixed_clock() -> FixedClock:
    """
    A clock pinned to 2017-08-07T14:00:40.291Z.
    """
    return FixedClock(FIXED_EPOCH_MILLIS)
