"""
Core business logic for calculating elapsed working hours.

No I/O and no shared state; timestamps are pendulum values.
"""

import logging
from datetime import datetime
from typing import Callable

from pendulum import DateTime

from .exceptions import InvalidWindowError
from .models import Span, WorkingWindow
from .time_helpers import (
    add_days,
    day_of_week,
    hour,
    is_same_day,
    is_weekday,
    minute,
    set_time,
    to_datetime,
)

logger = logging.getLogger(__name__)


class WorkingHoursCalculator:
    """
    Calculates the working hours elapsed between two timestamps.

    Algorithm:
    1. Spans within one calendar day are measured directly (window ignored)
    2. Otherwise clamp both endpoints into the working window
    3. Count the whole working days strictly between the two dates
    4. Add the partial first day, the whole days and the partial last day
    """

    def __init__(
        self,
        start_hour: int,
        start_minute: int,
        end_hour: int,
        end_minute: int,
        *,
        is_working_day: Callable[[int], bool] = is_weekday,
    ):
        self.window = WorkingWindow(
            start_hour=start_hour,
            start_minute=start_minute,
            end_hour=end_hour,
            end_minute=end_minute,
        )
        if not any(is_working_day(day) for day in range(1, 8)):
            raise InvalidWindowError("is_working_day must accept at least one day of the week")
        self._is_working_day = is_working_day

    @classmethod
    def from_window(
        cls,
        window: WorkingWindow,
        *,
        is_working_day: Callable[[int], bool] = is_weekday,
    ) -> "WorkingHoursCalculator":
        """Create a calculator for an existing working window."""
        return cls(
            window.start_hour,
            window.start_minute,
            window.end_hour,
            window.end_minute,
            is_working_day=is_working_day,
        )

    def get_working_hours(self, start: datetime, end: datetime) -> float:
        """
        Calculate the working hours between start and end.

        Args:
            start: Start of the span
            end: End of the span

        Returns:
            Elapsed working hours

        Raises:
            InvalidSpanError: If start is after end
        """
        span = Span(start=to_datetime(start), end=to_datetime(end))

        # Same-day spans are trusted as-is, even outside the window
        if span.is_same_day():
            logger.debug("Same-day span %s -> %s", span.start, span.end)
            return span.total_hours()

        clamped_start = self.clamp(span.start)
        clamped_end = self.clamp(span.end)

        start_day_hours = self._hours_until_close(clamped_start)
        end_day_hours = self._hours_since_open(clamped_end)

        days_between = self.whole_working_days_between(clamped_start, clamped_end)
        logger.debug(
            "Multi-day span %s -> %s: %d whole working day(s) between",
            clamped_start,
            clamped_end,
            days_between,
        )

        if days_between < 1:
            return start_day_hours + end_day_hours

        return start_day_hours + days_between * self.window.daily_hours() + end_day_hours

    def whole_working_days_between(self, start: DateTime, end: DateTime) -> int:
        """
        Count the working days strictly between two dates.

        Neither the start date nor the end date is counted.
        """
        current = set_time(start, 0, 0)
        end = set_time(end, 0, 0)

        if end < current:
            return 0

        current = self._next_working_day(current)
        if is_same_day(current, end) or current >= end:
            return 0

        days = 0
        while True:
            current = self._next_working_day(current)
            days += 1
            if is_same_day(current, end) or current > end:
                break

        return days

    def is_working_day(self, dt: DateTime) -> bool:
        """Check if a given datetime falls on a working day."""
        return self._is_working_day(day_of_week(dt))

    def clamp(self, dt: DateTime) -> DateTime:
        """
        Snap the time of day into the working window.

        The calendar day never changes.
        """
        return self._limit_upper(self._limit_lower(dt))

    def _limit_lower(self, dt: DateTime) -> DateTime:
        window = self.window
        if (hour(dt), minute(dt)) >= (window.start_hour, window.start_minute):
            return dt
        return set_time(dt, window.start_hour, window.start_minute)

    def _limit_upper(self, dt: DateTime) -> DateTime:
        window = self.window
        if (hour(dt), minute(dt)) < (window.end_hour, window.end_minute):
            return dt
        return set_time(dt, window.end_hour, window.end_minute)

    def _next_working_day(self, dt: DateTime) -> DateTime:
        dt = add_days(dt, 1)
        while not self.is_working_day(dt):
            dt = add_days(dt, 1)
        return dt

    def _hours_until_close(self, dt: DateTime) -> float:
        close = set_time(dt, self.window.end_hour, self.window.end_minute)
        return Span(start=dt, end=close).total_hours()

    def _hours_since_open(self, dt: DateTime) -> float:
        opening = set_time(dt, self.window.start_hour, self.window.start_minute)
        return Span(start=opening, end=dt).total_hours()

    def __repr__(self) -> str:
        return f"WorkingHoursCalculator(window={self.window})"
