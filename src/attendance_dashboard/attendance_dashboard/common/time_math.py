"""Wall-clock arithmetic for punch times.

Times are plain time-of-day values (no date, no timezone). A logout whose
clock value is earlier than its login is taken to fall on the next calendar
day (night shifts).
"""

from __future__ import annotations

import re
from datetime import time
from decimal import ROUND_HALF_UP, Decimal
from typing import Union

from ..core.constants import MINUTES_PER_DAY
from ..core.exceptions import MalformedTimeError

ClockValue = Union[str, time]

_CLOCK_RE = re.compile(r"^([0-9]{2}):([0-9]{2})(?::([0-9]{2}))?$")


def parse_clock(value: ClockValue) -> time:
    """Parse ``HH:MM`` (or ``HH:MM:SS``, seconds dropped) into a time."""

    if isinstance(value, time):
        return value.replace(second=0, microsecond=0)
    if not isinstance(value, str):
        raise MalformedTimeError(f"Invalid time value: {value!r}")

    match = _CLOCK_RE.match(value.strip())
    if not match:
        raise MalformedTimeError(f"Invalid time string: {value!r}")

    hours, minutes = int(match.group(1)), int(match.group(2))
    seconds = int(match.group(3) or 0)
    if hours > 23 or minutes > 59 or seconds > 59:
        raise MalformedTimeError(f"Time out of range: {value!r}")
    return time(hour=hours, minute=minutes)


def format_clock(value: time) -> str:
    return f"{value.hour:02d}:{value.minute:02d}"


def minute_of_day(value: ClockValue) -> int:
    t = parse_clock(value)
    return t.hour * 60 + t.minute


def add_minutes(value: ClockValue, delta_minutes: int) -> str:
    """Shift a clock time by ``delta_minutes``; wraps around midnight."""

    total = (minute_of_day(value) + int(delta_minutes)) % MINUTES_PER_DAY
    return f"{total // 60:02d}:{total % 60:02d}"


def round_hours(value: float) -> float:
    """Round to 2 decimals, half away from zero."""

    return float(Decimal(str(value)).quantize(Decimal("0.01"), rounding=ROUND_HALF_UP))


def hours_between(login: ClockValue, logout: ClockValue) -> float:
    """Elapsed hours from login to logout, with the overnight correction."""

    diff = minute_of_day(logout) - minute_of_day(login)
    if diff < 0:
        diff += MINUTES_PER_DAY
    return round_hours(diff / 60)
