"""
Domain-specific exception hierarchy for the working hours calculator.
"""


class WorkingHoursError(Exception):
    """Base class for all application-level errors."""


class InvalidSpanError(WorkingHoursError, ValueError):
    """Raised when a span starts after it ends."""


class InvalidWindowError(WorkingHoursError, ValueError):
    """Raised when a working window does not open before it closes."""
