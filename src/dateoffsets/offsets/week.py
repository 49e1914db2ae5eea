"""
Weekday-targeting offset.
"""

from datetime import datetime
from typing import Union

from dateoffsets.core.calendar import DAYS_OF_WEEK, Weekday
from dateoffsets.core.datetime_ops import DateLike, shift_days
from dateoffsets.offsets.base import AnchoredOffset


class Week(AnchoredOffset):
    """
    Offset to the n-th occurrence of a weekday.

    The start date never counts as an occurrence, so moving forward from a
    Monday to ``weekday=0`` lands on the following Monday.

    Example:
        >>> Week(2, weekday="FRI") + datetime(2012, 5, 3)   # a Thursday
        datetime.datetime(2012, 5, 11, 0, 0)
    """

    FREQ = "W"

    def __init__(self, n: int = 1, weekday: Union[int, str, Weekday] = Weekday.MON) -> None:
        """
        Initialize week offset.

        Args:
            n: Which occurrence of the weekday to move to
            weekday: Target weekday as 0-6 (Monday=0) or a name like "MON"

        Raises:
            ValueError: If weekday is not a valid weekday
        """
        super().__init__(n)
        if isinstance(weekday, str):
            if weekday.upper() not in DAYS_OF_WEEK:
                raise ValueError(f"Unknown weekday name: {weekday!r}")
            weekday = DAYS_OF_WEEK[weekday.upper()]
        self._weekday = Weekday(weekday)

    @property
    def weekday(self) -> Weekday:
        return self._weekday

    def forward(self, point: DateLike) -> datetime:
        current = point.weekday()
        distance = abs(self._weekday - current)
        whole_weeks = 7 * (self._n - 1)

        if self._weekday > current:
            return shift_days(point, distance + whole_weeks)
        return shift_days(point, (7 - distance) + whole_weeks)

    def backward(self, point: DateLike) -> datetime:
        current = point.weekday()
        distance = abs(self._weekday - current)
        whole_weeks = 7 * (self._n - 1)

        if self._weekday >= current:
            return shift_days(point, -((7 - distance) + whole_weeks))
        return shift_days(point, -(distance + whole_weeks))

    def on_offset(self, point: DateLike) -> bool:
        return point.weekday() == self._weekday

    @property
    def freq_string(self) -> str:
        return f"{'' if self._n == 1 else self._n}W-{self._weekday.name}"

    def __eq__(self, other):
        if not isinstance(other, Week):
            return NotImplemented
        return self._n == other._n and self._weekday == other._weekday

    def __hash__(self) -> int:
        return hash(("Week", self._n, int(self._weekday)))

    def __repr__(self) -> str:
        return f"Week(n={self._n}, weekday={self._weekday.name})"
