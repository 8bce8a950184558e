from __future__ import annotations

from datetime import date, datetime, timedelta

import pytz

from ..core.constants import MINUTES_PER_HOUR


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    return datetime.strptime(value, "%Y-%m-%d").date()


def parse_iso_datetime(value: str) -> datetime:
    """Parse an ISO-8601 timestamp; a trailing 'Z' is read as UTC."""
    v = value.strip()
    if v.endswith("Z"):
        v = v[:-1] + "+00:00"
    return datetime.fromisoformat(v)


def get_timezone(name: str):
    try:
        return pytz.timezone(name)
    except pytz.UnknownTimeZoneError:
        raise ValueError(f"Unknown timezone: {name!r}")


def to_utc(value: datetime, tz) -> datetime:
    """Naive values are wall-clock time in `tz`; aware values keep their instant."""
    if value.tzinfo is None:
        value = tz.localize(value)
    return value.astimezone(pytz.utc)


def to_local(value: datetime, tz) -> datetime:
    return to_utc(value, tz).astimezone(tz)


def floor_to_quarter_hour(value: datetime) -> datetime:
    return value.replace(minute=(value.minute // 15) * 15, second=0, microsecond=0)


def next_quarter_hour(value: datetime) -> datetime:
    """First quarter-hour boundary strictly after `value`.

    Local date and hour never change inside one UTC quarter hour, since every
    real timezone offset is a multiple of 15 minutes.
    """
    return floor_to_quarter_hour(value) + timedelta(minutes=15)


def format_hours(minutes: int) -> str:
    """Minutes as decimal hours with 2 dp, e.g. 90 -> '1.50'."""
    return f"{minutes / MINUTES_PER_HOUR:.2f}"
