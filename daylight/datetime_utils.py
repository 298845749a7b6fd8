"""Shared datetime parsing and conversion utilities."""

from __future__ import annotations

import re
from datetime import UTC, date, datetime, time, tzinfo

# "6:32:00 AM", "12:05:09 pm"; seconds optional
_CLOCK_PATTERN = re.compile(r"^(\d{1,2}):(\d{2})(?::(\d{2}))?\s*([AaPp][Mm])$")


def local_now() -> datetime:
    """Get current datetime in local timezone."""
    return datetime.now().astimezone()


def ensure_local(dt: datetime) -> datetime:
    """Ensure datetime is in local timezone."""
    return dt.astimezone()


def parse_clock_time(value: str) -> time:
    """Parse a 12-hour clock string (``H:MM:SS AM``). Raises ValueError if invalid."""
    match = _CLOCK_PATTERN.match(value.strip())
    if not match:
        raise ValueError(f"Invalid 12-hour time '{value}'")
    hour = int(match.group(1))
    minute = int(match.group(2))
    second = int(match.group(3) or 0)
    suffix = match.group(4).lower()
    if not 1 <= hour <= 12 or minute >= 60 or second >= 60:
        raise ValueError(f"Invalid 12-hour time '{value}'")
    if hour == 12:
        hour = 0
    if suffix == "pm":
        hour += 12
    return time(hour, minute, second)


def anchor_utc_time(day: date, clock: time, target_tz: tzinfo | None = None) -> datetime:
    """Combine ``day`` and ``clock`` as a UTC instant, then convert to ``target_tz``.

    With no ``target_tz`` the system local timezone is used.
    """
    anchored = datetime.combine(day, clock, tzinfo=UTC)
    if target_tz is None:
        return anchored.astimezone()
    return anchored.astimezone(target_tz)
