"""Offset definitions: ticks, calendar steps, boundary anchors and weeks."""

from dateoffsets.offsets.base import AnchoredOffset, NegatedOffset, Offset, RepeatingOffset
from dateoffsets.offsets.tick import Tick, Second, Minute, Hour, Day
from dateoffsets.offsets.calendar_step import CalendarStep, Month, Year
from dateoffsets.offsets.anchored import MonthBegin, MonthEnd, YearBegin, YearEnd
from dateoffsets.offsets.week import Week
from dateoffsets.offsets.schema import (
    DURATION_PRIORITY,
    OffsetConfig,
    load_offset_config,
    validate_offset_config,
)
from dateoffsets.offsets.date_offset import DateOffset, build_offset, load_date_offset

__all__ = [
    "Offset",
    "RepeatingOffset",
    "AnchoredOffset",
    "NegatedOffset",
    "Tick",
    "Second",
    "Minute",
    "Hour",
    "Day",
    "CalendarStep",
    "Month",
    "Year",
    "MonthBegin",
    "MonthEnd",
    "YearBegin",
    "YearEnd",
    "Week",
    "DURATION_PRIORITY",
    "OffsetConfig",
    "load_offset_config",
    "validate_offset_config",
    "DateOffset",
    "build_offset",
    "load_date_offset",
]
