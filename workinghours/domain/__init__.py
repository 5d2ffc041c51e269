"""
Domain layer - working window models and the working hours calculator.
"""

from .calculator import WorkingHoursCalculator
from .exceptions import InvalidSpanError, InvalidWindowError, WorkingHoursError
from .models import Span, WorkingWindow

__all__ = [
    "WorkingHoursCalculator",
    "WorkingWindow",
    "Span",
    "WorkingHoursError",
    "InvalidSpanError",
    "InvalidWindowError",
]
