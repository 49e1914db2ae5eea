"""Core utilities: calendar facts, datetime primitives and schedules."""

from dateoffsets.core.calendar import (
    DAYS_OF_WEEK,
    MONTH_DAYS,
    Weekday,
    days_in_month,
    is_leap_year,
)
from dateoffsets.core.datetime_ops import as_datetime, rebuild, shift_days, shift_months
from dateoffsets.core.schedule import Schedule, generate_schedule

__all__ = [
    "DAYS_OF_WEEK",
    "MONTH_DAYS",
    "Weekday",
    "days_in_month",
    "is_leap_year",
    "as_datetime",
    "rebuild",
    "shift_days",
    "shift_months",
    "Schedule",
    "generate_schedule",
]
