"""
Domain models for working window and span calculations.
"""

from dataclasses import dataclass
from datetime import time

from pendulum import DateTime

from .exceptions import InvalidSpanError, InvalidWindowError
from .time_helpers import is_same_day


@dataclass(frozen=True)
class WorkingWindow:
    """
    Immutable daily working window, e.g. 09:00 - 17:30.

    Invariant: the window opens strictly before it closes on the same day.
    """
    start_hour: int
    start_minute: int
    end_hour: int
    end_minute: int

    def __post_init__(self):
        for name in ("start_hour", "end_hour"):
            value = getattr(self, name)
            if not 0 <= value <= 23:
                raise InvalidWindowError(f"{name} must be between 0 and 23, got {value}")

        for name in ("start_minute", "end_minute"):
            value = getattr(self, name)
            if not 0 <= value <= 59:
                raise InvalidWindowError(f"{name} must be between 0 and 59, got {value}")

        if self.start_minutes >= self.end_minutes:
            raise InvalidWindowError(
                f"Window start {self.start_time():%H:%M} must be before end {self.end_time():%H:%M}"
            )

    @property
    def start_minutes(self) -> int:
        """Minutes since midnight at which the window opens."""
        return self.start_hour * 60 + self.start_minute

    @property
    def end_minutes(self) -> int:
        """Minutes since midnight at which the window closes."""
        return self.end_hour * 60 + self.end_minute

    def daily_hours(self) -> float:
        """Return the length of one full working day in hours."""
        return (self.end_minutes - self.start_minutes) / 60

    def start_time(self) -> time:
        return time(hour=self.start_hour, minute=self.start_minute)

    def end_time(self) -> time:
        return time(hour=self.end_hour, minute=self.end_minute)

    def __str__(self) -> str:
        return f"{self.start_time():%H:%M} - {self.end_time():%H:%M}"


@dataclass(frozen=True)
class Span:
    """
    The (start, end) pair under measurement.

    Invariant: start is not after end, compared as absolute instants.
    """
    start: DateTime
    end: DateTime

    def __post_init__(self):
        if self.start > self.end:
            raise InvalidSpanError(f"Start {self.start} is after end {self.end}")

    def is_same_day(self) -> bool:
        """Check if start and end fall on the same calendar date."""
        return is_same_day(self.start, self.end)

    def total_hours(self) -> float:
        """Return the elapsed wall time in hours."""
        return (self.end - self.start).total_seconds() / 3600
