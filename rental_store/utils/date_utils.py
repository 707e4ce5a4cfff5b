"""Date manipulation utilities"""

from datetime import date
from typing import Callable

# Source of the reference date ("today") for elapsed-day computations
Clock = Callable[[], date]


def elapsed_days(rented_at: date, as_of: date) -> int:
    """Whole days between rented_at and as_of; future rental dates count as 0"""
    return max(0, (as_of - rented_at).days)


def fixed_clock(day: date) -> Clock:
    """Clock that always reports the same day (reproducible statements)"""
    return lambda: day
