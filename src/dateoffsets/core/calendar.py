"""
Calendar facts: month lengths, leap years and weekday names.

Month/year boundary offsets resolve day counts through these lookups
instead of relying on fixed-duration arithmetic.
"""

from enum import IntEnum
from typing import Dict


# Days per month in a common (non-leap) year
MONTH_DAYS: Dict[int, int] = {
    1: 31,
    2: 28,
    3: 31,
    4: 30,
    5: 31,
    6: 30,
    7: 31,
    8: 31,
    9: 30,
    10: 31,
    11: 30,
    12: 31,
}


class Weekday(IntEnum):
    """Days of the week, numbered as ``datetime.weekday()`` numbers them."""

    MON = 0
    TUE = 1
    WED = 2
    THU = 3
    FRI = 4
    SAT = 5
    SUN = 6


# Symbolic name -> weekday number (used in frequency strings)
DAYS_OF_WEEK: Dict[str, int] = {day.name: day.value for day in Weekday}


def is_leap_year(year: int) -> bool:
    """Check if a year is a Gregorian leap year."""
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def days_in_month(year: int, month: int) -> int:
    """
    Get the number of days in a month.

    Args:
        year: Calendar year (only consulted for February)
        month: Month number, 1-12

    Returns:
        Number of days in the month

    Raises:
        ValueError: If month is outside 1-12
    """
    if month not in MONTH_DAYS:
        raise ValueError(f"Month must be in 1..12, got {month}")

    days = MONTH_DAYS[month]
    if month == 2 and is_leap_year(year):
        days += 1
    return days
