"""
Shared pytest fixtures for offset tests.

Provides reference dates used across tick, anchored and weekday tests.
"""

import pytest
from datetime import datetime
from typing import List

from dateoffsets import (
    Day,
    Hour,
    Minute,
    Month,
    MonthBegin,
    MonthEnd,
    Offset,
    Second,
    Week,
    Year,
    YearBegin,
    YearEnd,
    DateOffset,
)


@pytest.fixture
def thursday() -> datetime:
    """Thursday 3 May 2012."""
    return datetime(2012, 5, 3)


@pytest.fixture
def saturday() -> datetime:
    """Saturday 5 May 2012, mid-month."""
    return datetime(2012, 5, 5)


@pytest.fixture
def monday() -> datetime:
    """Monday 7 May 2012."""
    return datetime(2012, 5, 7)


@pytest.fixture
def days_of_2020() -> List[datetime]:
    """Every day of the leap year 2020 at 06:30."""
    start = datetime(2020, 1, 1, 6, 30)
    return [Day(i).forward(start) for i in range(366)]


@pytest.fixture
def all_offsets() -> List[Offset]:
    """One of every offset kind."""
    return [
        Second(90),
        Minute(7),
        Hour(5),
        Day(3),
        Month(2),
        Year(1),
        MonthBegin(2),
        MonthEnd(3),
        YearBegin(1),
        YearEnd(2),
        Week(2, weekday=4),
        DateOffset(weeks=3),
        DateOffset(mins=2, n=5),
    ]


# Helper functions for test assertions

def assert_on_month_end(point: datetime) -> None:
    """Assert that the day after point is the first of a month."""
    following = Day(1).forward(point)
    assert following.day == 1, f"{point} is not a month end"
