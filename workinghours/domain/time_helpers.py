"""
Pure helper functions for timestamp manipulation.

Every function returns a new value; caller-supplied timestamps are never
modified.
"""

from datetime import datetime

import pendulum
from pendulum import DateTime

SATURDAY = 6
SUNDAY = 7


def to_datetime(value: datetime) -> DateTime:
    """
    Normalize any datetime into a pendulum DateTime.

    Naive values are interpreted as UTC, aware values keep their zone.

    Raises:
        TypeError: If value is not a datetime
    """
    if isinstance(value, DateTime):
        return value

    if isinstance(value, datetime):
        return pendulum.instance(value)

    raise TypeError(f"Can't create DateTime from instance of {type(value).__name__}")


def add_days(dt: DateTime, days: int) -> DateTime:
    """Shift by whole calendar days (negative values go backwards)."""
    if days == 0:
        return dt
    return dt.add(days=days)


def day_of_week(dt: DateTime) -> int:
    """Return the ISO-8601 weekday, 1 = Monday ... 7 = Sunday."""
    return dt.isoweekday()


def hour(dt: DateTime) -> int:
    return dt.hour


def minute(dt: DateTime) -> int:
    return dt.minute


def set_time(dt: DateTime, hour: int, minute: int) -> DateTime:
    """Replace the time of day, keeping the calendar day."""
    return dt.set(hour=hour, minute=minute, second=0, microsecond=0)


def is_same_day(a: DateTime, b: DateTime) -> bool:
    """Check if both values share a calendar date, each in its own zone."""
    return a.date() == b.date()


def is_weekday(iso_day_of_week: int) -> bool:
    """Default working-day predicate: Monday to Friday."""
    return iso_day_of_week not in (SATURDAY, SUNDAY)
