"""
Whole-month and whole-year offsets.

These step the calendar month number and clamp the day of month to the
target month's length; they never snap to a month or year boundary.
"""

from datetime import datetime

from dateoffsets.core.datetime_ops import DateLike, shift_months
from dateoffsets.offsets.base import RepeatingOffset


class CalendarStep(RepeatingOffset):
    """Offset of ``n`` steps of ``months_per_step`` calendar months."""

    months_per_step: int = 1

    def forward(self, point: DateLike) -> datetime:
        return shift_months(point, self._n * self.months_per_step)

    def backward(self, point: DateLike) -> datetime:
        return shift_months(point, -self._n * self.months_per_step)


class Month(CalendarStep):
    """
    Months offset.

    Example:
        >>> Month(5) + datetime(2012, 5, 1, 4, 3)
        datetime.datetime(2012, 10, 1, 4, 3)
        >>> Month() + datetime(2012, 1, 31)
        datetime.datetime(2012, 2, 29, 0, 0)
    """

    FREQ = "MONTH"
    months_per_step = 1


class Year(CalendarStep):
    """
    Years offset.

    Example:
        >>> Year(2) + datetime(2012, 5, 1, 4, 3)
        datetime.datetime(2014, 5, 1, 4, 3)
    """

    FREQ = "YEAR"
    months_per_step = 12
