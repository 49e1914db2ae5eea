"""
Date Offsets - calendar-aware date arithmetic.

Shift points in time by symbolic durations that respect the calendar:
- Fixed-duration ticks (seconds, minutes, hours, days) with exact rational steps
- Whole-month and whole-year steps with day-of-month clamping
- Month/year begin and end anchors that handle leap years
- Weekday targeting (n-th next Monday, previous Friday, ...)
- Negation and offset-driven schedule generation

Example:
    >>> from datetime import datetime
    >>> from dateoffsets import DateOffset, MonthEnd
    >>> datetime(2012, 5, 3) + DateOffset(weeks=3)
    datetime.datetime(2012, 5, 24, 0, 0)
    >>> datetime(2012, 5, 5) + MonthEnd()
    datetime.datetime(2012, 5, 31, 0, 0)
    >>> datetime(2012, 5, 5) - MonthEnd()
    datetime.datetime(2012, 4, 30, 0, 0)
"""

__version__ = "0.1.0"

from dateoffsets.exceptions import OffsetError, UnconfiguredOffsetError, DateRangeError

from dateoffsets.core import (
    Weekday,
    days_in_month,
    is_leap_year,
    Schedule,
    generate_schedule,
)

from dateoffsets.offsets import (
    Offset,
    NegatedOffset,
    Tick,
    Second,
    Minute,
    Hour,
    Day,
    Month,
    Year,
    MonthBegin,
    MonthEnd,
    YearBegin,
    YearEnd,
    Week,
    OffsetConfig,
    DateOffset,
    load_date_offset,
)

__all__ = [
    # Version
    "__version__",
    # Errors
    "OffsetError",
    "UnconfiguredOffsetError",
    "DateRangeError",
    # Calendar
    "Weekday",
    "days_in_month",
    "is_leap_year",
    "Schedule",
    "generate_schedule",
    # Offsets
    "Offset",
    "NegatedOffset",
    "Tick",
    "Second",
    "Minute",
    "Hour",
    "Day",
    "Month",
    "Year",
    "MonthBegin",
    "MonthEnd",
    "YearBegin",
    "YearEnd",
    "Week",
    # Configuration
    "OffsetConfig",
    "DateOffset",
    "load_date_offset",
]
