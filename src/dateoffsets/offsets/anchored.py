"""
Month and year boundary offsets.

MonthBegin, MonthEnd, YearBegin and YearEnd snap to (or step between)
calendar boundaries. Day counts come from the calendar facts table so the
result stays exact across month lengths and leap years.
"""

from datetime import datetime

from dateoffsets.core.calendar import days_in_month
from dateoffsets.core.datetime_ops import (
    DateLike,
    as_datetime,
    rebuild,
    shift_days,
    shift_months,
)
from dateoffsets.offsets.base import AnchoredOffset


def _days_to_month_end(point: datetime) -> int:
    """Days from point to the last day of its month."""
    return days_in_month(point.year, point.month) - point.day


class MonthBegin(AnchoredOffset):
    """
    Month begin offset.

    Example:
        >>> MonthBegin(2) + datetime(2012, 5, 5)
        datetime.datetime(2012, 7, 1, 0, 0)
    """

    FREQ = "MB"

    def forward(self, point: DateLike) -> datetime:
        """Move to the first day of the following month, n times."""
        current = as_datetime(point)
        for _ in range(self._n):
            current = shift_days(current, _days_to_month_end(current) + 1)
        return current

    def backward(self, point: DateLike) -> datetime:
        """
        Move to the start of the current month, n times.

        A point already on a month begin moves to the previous month's
        first day instead.
        """
        current = as_datetime(point)
        for _ in range(self._n):
            if self.on_offset(current):
                current = shift_months(current, -1)
            current = rebuild(current, current.year, current.month, 1)
        return current

    def on_offset(self, point: DateLike) -> bool:
        return point.day == 1


class MonthEnd(AnchoredOffset):
    """
    Month end offset.

    Example:
        >>> MonthEnd() + datetime(2012, 5, 5)
        datetime.datetime(2012, 5, 31, 0, 0)
    """

    FREQ = "ME"

    def forward(self, point: DateLike) -> datetime:
        """Move to the end of the current month (next month if already there), n times."""
        current = as_datetime(point)
        for _ in range(self._n):
            if self.on_offset(current):
                current = shift_months(current, 1)
            current = shift_days(current, _days_to_month_end(current))
        return current

    def backward(self, point: DateLike) -> datetime:
        """Move to the end of the previous month, n times."""
        current = as_datetime(point)
        for _ in range(self._n):
            current = shift_months(current, -1)
            current = shift_days(current, _days_to_month_end(current))
        return current

    def on_offset(self, point: DateLike) -> bool:
        # Last day of the month, i.e. the next day is a first
        return point.day == days_in_month(point.year, point.month)


class YearBegin(AnchoredOffset):
    """
    Year begin offset.

    Example:
        >>> YearBegin(3) + datetime(2012, 5, 5)
        datetime.datetime(2015, 1, 1, 0, 0)
    """

    FREQ = "YB"

    def forward(self, point: DateLike) -> datetime:
        point = as_datetime(point)
        return rebuild(point, point.year + self._n, 1, 1)

    def backward(self, point: DateLike) -> datetime:
        point = as_datetime(point)
        if self.on_offset(point):
            return rebuild(point, point.year - self._n, 1, 1)
        # Off-boundary points land on midnight
        return rebuild(point, point.year - (self._n - 1), 1, 1, keep_time=False)

    def on_offset(self, point: DateLike) -> bool:
        return point.month == 1 and point.day == 1


class YearEnd(AnchoredOffset):
    """
    Year end offset.

    Example:
        >>> YearEnd() + datetime(2012, 5, 5)
        datetime.datetime(2012, 12, 31, 0, 0)
    """

    FREQ = "YE"

    def forward(self, point: DateLike) -> datetime:
        point = as_datetime(point)
        if self.on_offset(point):
            return rebuild(point, point.year + self._n, 12, 31)
        return rebuild(point, point.year + (self._n - 1), 12, 31)

    def backward(self, point: DateLike) -> datetime:
        """Move to December 31 of the previous year at midnight, whatever n is."""
        point = as_datetime(point)
        return rebuild(point, point.year - 1, 12, 31, keep_time=False)

    def on_offset(self, point: DateLike) -> bool:
        return point.month == 12 and point.day == 31
