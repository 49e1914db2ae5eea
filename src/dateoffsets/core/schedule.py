"""
Schedule generation from date offsets.

Generates regular or calendar-anchored date sequences by repeatedly
applying an offset to a start date.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import TYPE_CHECKING, Iterator, List, Optional
import logging

import numpy as np

from dateoffsets.core.datetime_ops import DateLike, as_datetime

if TYPE_CHECKING:
    from dateoffsets.offsets.base import Offset

logger = logging.getLogger(__name__)


@dataclass
class Schedule:
    """
    A sequence of dates produced by an offset.

    Attributes:
        dates: Generated points in time, strictly increasing
        freq: Frequency code of the generating offset
    """

    dates: List[datetime] = field(default_factory=list)
    freq: Optional[str] = None

    def __len__(self) -> int:
        return len(self.dates)

    def __iter__(self) -> Iterator[datetime]:
        return iter(self.dates)

    def __getitem__(self, idx: int) -> datetime:
        return self.dates[idx]

    def to_numpy(self) -> np.ndarray:
        """Get dates as a ``datetime64[us]`` array."""
        return np.array(self.dates, dtype="datetime64[us]")


def generate_schedule(
    start: DateLike,
    offset: "Offset",
    end: Optional[DateLike] = None,
    periods: Optional[int] = None
) -> Schedule:
    """
    Generate a schedule of dates by stepping an offset forward.

    A start date that is not on the offset's grid (e.g. May 5 for a
    MonthEnd offset) is first rolled forward onto it.

    Args:
        start: First candidate date
        offset: Offset applied between consecutive dates
        end: Last date allowed in the schedule (inclusive)
        periods: Number of dates to generate

    Returns:
        Schedule of dates

    Raises:
        ValueError: If not exactly one of end/periods is given, periods is
            negative, or the offset does not move dates forward

    Examples:
        >>> from dateoffsets import MonthEnd
        >>> generate_schedule(datetime(2012, 1, 15), MonthEnd(), periods=3).dates
        [datetime.datetime(2012, 1, 31, 0, 0), datetime.datetime(2012, 2, 29, 0, 0), datetime.datetime(2012, 3, 31, 0, 0)]
    """
    if (end is None) == (periods is None):
        raise ValueError("Exactly one of end or periods must be given")
    if periods is not None and periods < 0:
        raise ValueError(f"periods must be >= 0, got {periods}")

    current = as_datetime(start)
    if not offset.on_offset(current):
        current = offset.forward(current)

    limit = as_datetime(end) if end is not None else None
    dates: List[datetime] = []

    while periods is None or len(dates) < periods:
        if limit is not None and current > limit:
            break

        dates.append(current)
        if periods is not None and len(dates) == periods:
            break

        following = offset.forward(current)
        if following <= current:
            raise ValueError(f"Offset {offset!r} does not advance from {current}")
        current = following

    logger.debug(f"Generated {len(dates)} dates with {offset.freq_string} from {start}")

    return Schedule(dates=dates, freq=offset.freq_string)
