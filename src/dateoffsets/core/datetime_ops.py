"""
Point-in-time primitives used by every offset.

Offsets never touch ``datetime`` arithmetic directly: they shift by a
(rational) number of days, step whole calendar months, or rebuild a value
from explicit fields. Failures of the host type surface as DateRangeError.
"""

from datetime import date, datetime, timedelta
from fractions import Fraction
from numbers import Rational
from typing import Union

from dateoffsets.core.calendar import days_in_month
from dateoffsets.exceptions import DateRangeError


MICROSECONDS_PER_DAY = 24 * 60 * 60 * 1_000_000

DateLike = Union[date, datetime]
DayCount = Union[int, Rational, float]


def as_datetime(point: DateLike) -> datetime:
    """Promote a date to a datetime at midnight; datetimes pass through."""
    if isinstance(point, datetime):
        return point
    if isinstance(point, date):
        return datetime(point.year, point.month, point.day)
    raise TypeError(f"Expected date or datetime, got {type(point).__name__}")


def shift_days(point: DateLike, days: DayCount) -> datetime:
    """
    Shift a point in time by a number of days.

    Fractional days are kept exact as a Fraction and only rounded to
    whole microseconds (the datetime resolution) when applied.

    Args:
        point: Point in time to shift
        days: Number of days, negative to shift backward

    Returns:
        Shifted datetime

    Raises:
        DateRangeError: If the result falls outside the datetime range
    """
    point = as_datetime(point)
    microseconds = round(Fraction(days) * MICROSECONDS_PER_DAY)

    try:
        return point + timedelta(microseconds=microseconds)
    except OverflowError as exc:
        raise DateRangeError(f"Shifting {point} by {days} days is out of range") from exc


def shift_months(point: DateLike, months: int) -> datetime:
    """
    Shift a point in time by whole calendar months.

    The day of month is clamped to the length of the target month, so
    Jan 31 shifted by one month gives Feb 28 (or Feb 29 in a leap year).
    Time of day is preserved.
    """
    point = as_datetime(point)
    total = point.month - 1 + months
    year = point.year + total // 12
    month = total % 12 + 1
    day = min(point.day, days_in_month(year, month))

    return rebuild(point, year, month, day)


def rebuild(
    point: DateLike,
    year: int,
    month: int,
    day: int,
    keep_time: bool = True
) -> datetime:
    """
    Construct a new datetime from explicit date fields.

    Args:
        point: Source of the time of day and tzinfo
        year: Target year
        month: Target month
        day: Target day of month
        keep_time: Keep the time of day of ``point``; otherwise midnight

    Raises:
        DateRangeError: If the fields do not form a representable datetime
    """
    point = as_datetime(point)

    try:
        if keep_time:
            return point.replace(year=year, month=month, day=day)
        return datetime(year, month, day, tzinfo=point.tzinfo)
    except (OverflowError, ValueError) as exc:
        raise DateRangeError(
            f"Cannot build datetime {year:04d}-{month:02d}-{day:02d}: {exc}"
        ) from exc
