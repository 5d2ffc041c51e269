"""
Working hours elapsed between two timestamps, excluding nights and weekends.
"""

from .domain import (
    InvalidSpanError,
    InvalidWindowError,
    WorkingHoursCalculator,
    WorkingHoursError,
    WorkingWindow,
)

__version__ = "0.1.0"

__all__ = [
    "WorkingHoursCalculator",
    "WorkingWindow",
    "WorkingHoursError",
    "InvalidSpanError",
    "InvalidWindowError",
    "__version__",
]
