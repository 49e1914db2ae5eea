"""
Fixed-duration offsets: seconds, minutes, hours and days.

Every tick is a rational multiple of one day, so all of them share a
single rule: shift the point in time by ``n * multiplier`` days.
"""

from datetime import datetime
from fractions import Fraction

from dateoffsets.core.datetime_ops import DateLike, shift_days
from dateoffsets.offsets.base import RepeatingOffset


class Tick(RepeatingOffset):
    """
    Offset with an equal duration between every step.

    Two ticks are equal when they span the same period, whatever unit
    built them::

        >>> Second(60) == Minute(1)
        True
    """

    multiplier: Fraction = Fraction(1)

    @property
    def period(self) -> Fraction:
        """Length of the offset in days."""
        return self._n * self.multiplier

    def forward(self, point: DateLike) -> datetime:
        return shift_days(point, self.period)

    def backward(self, point: DateLike) -> datetime:
        return shift_days(point, -self.period)

    def __eq__(self, other):
        if not isinstance(other, Tick):
            return NotImplemented
        return self.period == other.period

    def __hash__(self) -> int:
        return hash(self.period)


class Second(Tick):
    """
    Seconds offset.

    Example:
        >>> Second(5) + datetime(2012, 5, 1, 4, 3)
        datetime.datetime(2012, 5, 1, 4, 3, 5)
    """

    FREQ = "S"
    multiplier = Fraction(1, 24 * 60 * 60)


class Minute(Tick):
    """
    Minutes offset.

    Example:
        >>> Minute(8) + datetime(2012, 5, 1, 4, 3)
        datetime.datetime(2012, 5, 1, 4, 11)
    """

    FREQ = "M"
    multiplier = Fraction(1, 24 * 60)


class Hour(Tick):
    """
    Hours offset.

    Example:
        >>> Hour(8) + datetime(2012, 5, 1, 4, 3)
        datetime.datetime(2012, 5, 1, 12, 3)
    """

    FREQ = "H"
    multiplier = Fraction(1, 24)


class Day(Tick):
    """
    Days offset.

    Example:
        >>> Day(2) + datetime(2012, 5, 1, 4, 3)
        datetime.datetime(2012, 5, 3, 4, 3)
    """

    FREQ = "D"
    multiplier = Fraction(1)
