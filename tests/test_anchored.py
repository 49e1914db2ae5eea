"""Tests for month and year boundary offsets."""

import logging
import pytest
from datetime import datetime
from typing import List

from dateoffsets import DateRangeError, MonthBegin, MonthEnd, YearBegin, YearEnd

from conftest import assert_on_month_end


class TestMonthBegin:
    """Tests for the MonthBegin offset."""

    def test_forward_two_months(self, saturday: datetime) -> None:
        assert MonthBegin(2) + saturday == datetime(2012, 7, 1)

    def test_forward_from_month_begin(self) -> None:
        """A point on the boundary moves to the next month's first."""
        assert MonthBegin() + datetime(2012, 5, 1) == datetime(2012, 6, 1)

    def test_forward_keeps_time(self) -> None:
        assert MonthBegin() + datetime(2012, 5, 5, 13, 30) == datetime(2012, 6, 1, 13, 30)

    def test_forward_february(self) -> None:
        assert MonthBegin() + datetime(2020, 2, 10) == datetime(2020, 3, 1)
        assert MonthBegin() + datetime(2020, 2, 29) == datetime(2020, 3, 1)

    def test_forward_crosses_year(self) -> None:
        assert MonthBegin() + datetime(2012, 12, 15) == datetime(2013, 1, 1)

    def test_forward_always_lands_on_first(self, days_of_2020: List[datetime]) -> None:
        offset = MonthBegin()
        for point in days_of_2020:
            result = offset.forward(point)
            assert result.day == 1
            assert result > point

    def test_backward_to_current_month(self, saturday: datetime) -> None:
        assert saturday - MonthBegin() == datetime(2012, 5, 1)

    def test_backward_from_month_begin(self) -> None:
        """A point on the boundary moves to the previous month's first."""
        assert datetime(2012, 5, 1) - MonthBegin() == datetime(2012, 4, 1)
        assert datetime(2012, 1, 1) - MonthBegin() == datetime(2011, 12, 1)

    def test_backward_repeated(self, saturday: datetime) -> None:
        assert saturday - MonthBegin(2) == datetime(2012, 4, 1)

    def test_backward_keeps_time(self) -> None:
        assert datetime(2012, 5, 5, 10, 15) - MonthBegin() == datetime(2012, 5, 1, 10, 15)

    def test_on_offset(self) -> None:
        offset = MonthBegin()
        assert offset.on_offset(datetime(2012, 5, 1, 8))
        assert not offset.on_offset(datetime(2012, 5, 2))

    def test_freq_string(self) -> None:
        assert MonthBegin().freq_string == "MB"
        assert MonthBegin(3).freq_string == "3MB"


class TestMonthEnd:
    """Tests for the MonthEnd offset."""

    def test_forward_to_current_month_end(self, saturday: datetime) -> None:
        assert MonthEnd() + saturday == datetime(2012, 5, 31)

    def test_forward_from_month_end(self) -> None:
        assert MonthEnd() + datetime(2012, 5, 31) == datetime(2012, 6, 30)

    def test_forward_leap_february(self) -> None:
        assert MonthEnd() + datetime(2020, 2, 1) == datetime(2020, 2, 29)

    def test_forward_common_february(self) -> None:
        assert MonthEnd() + datetime(2021, 2, 1) == datetime(2021, 2, 28)

    def test_forward_from_january_end(self) -> None:
        assert MonthEnd() + datetime(2020, 1, 31) == datetime(2020, 2, 29)

    def test_forward_repeated(self) -> None:
        assert MonthEnd(3) + datetime(2021, 1, 15) == datetime(2021, 3, 31)

    def test_forward_keeps_time(self) -> None:
        assert MonthEnd() + datetime(2012, 5, 5, 9, 45) == datetime(2012, 5, 31, 9, 45)

    def test_forward_always_lands_on_month_end(self, days_of_2020: List[datetime]) -> None:
        offset = MonthEnd()
        for point in days_of_2020:
            result = offset.forward(point)
            assert_on_month_end(result)
            assert result > point

    def test_backward_to_previous_month_end(self, saturday: datetime) -> None:
        assert saturday - MonthEnd() == datetime(2012, 4, 30)

    def test_backward_from_month_end(self) -> None:
        """Backward always moves to the previous month, boundary or not."""
        assert datetime(2012, 5, 31) - MonthEnd() == datetime(2012, 4, 30)

    def test_backward_into_leap_february(self) -> None:
        assert datetime(2020, 3, 31) - MonthEnd() == datetime(2020, 2, 29)

    def test_backward_repeated(self, saturday: datetime) -> None:
        assert saturday - MonthEnd(2) == datetime(2012, 3, 31)

    def test_on_offset(self) -> None:
        offset = MonthEnd()
        assert offset.on_offset(datetime(2020, 2, 29))
        assert not offset.on_offset(datetime(2020, 2, 28))
        assert offset.on_offset(datetime(2021, 2, 28))
        assert offset.on_offset(datetime(9999, 12, 31))

    def test_freq_string(self) -> None:
        assert MonthEnd().freq_string == "ME"


class TestYearBegin:
    """Tests for the YearBegin offset."""

    def test_forward(self, saturday: datetime) -> None:
        assert YearBegin(3) + saturday == datetime(2015, 1, 1)

    def test_forward_from_year_begin_keeps_time(self) -> None:
        assert YearBegin(3) + datetime(2020, 1, 1, 6, 30) == datetime(2023, 1, 1, 6, 30)

    def test_backward_on_boundary_keeps_time(self) -> None:
        assert datetime(2020, 1, 1, 10) - YearBegin() == datetime(2019, 1, 1, 10)
        assert datetime(2020, 1, 1, 10) - YearBegin(3) == datetime(2017, 1, 1, 10)

    def test_backward_off_boundary_resets_time(self) -> None:
        """Off-boundary points land on the current year's start at midnight."""
        assert datetime(2012, 5, 5, 15) - YearBegin() == datetime(2012, 1, 1)

    def test_backward_off_boundary_repeated(self) -> None:
        assert datetime(2012, 5, 5, 15) - YearBegin(2) == datetime(2011, 1, 1)

    def test_on_offset(self) -> None:
        offset = YearBegin()
        assert offset.on_offset(datetime(2012, 1, 1, 23))
        assert not offset.on_offset(datetime(2012, 1, 2))
        assert not offset.on_offset(datetime(2012, 2, 1))

    def test_out_of_range(self) -> None:
        with pytest.raises(DateRangeError):
            YearBegin().forward(datetime(9999, 5, 5))

    def test_freq_string(self) -> None:
        assert YearBegin(2).freq_string == "2YB"


class TestYearEnd:
    """Tests for the YearEnd offset."""

    def test_forward_to_current_year_end(self, saturday: datetime) -> None:
        assert YearEnd() + saturday == datetime(2012, 12, 31)

    def test_forward_repeated(self, saturday: datetime) -> None:
        assert YearEnd(2) + saturday == datetime(2013, 12, 31)

    def test_forward_from_year_end_keeps_time(self) -> None:
        assert YearEnd() + datetime(2012, 12, 31, 8) == datetime(2013, 12, 31, 8)

    def test_backward_to_previous_year_end(self, saturday: datetime) -> None:
        assert saturday - YearEnd() == datetime(2011, 12, 31)

    def test_backward_ignores_count_and_time(self) -> None:
        assert datetime(2012, 12, 31, 12) - YearEnd(3) == datetime(2011, 12, 31)

    def test_on_offset(self) -> None:
        offset = YearEnd()
        assert offset.on_offset(datetime(2012, 12, 31))
        assert not offset.on_offset(datetime(2012, 12, 30))

    def test_freq_string(self) -> None:
        assert YearEnd().freq_string == "YE"


class TestNonPositiveCounts:
    """Tests for anchored offsets built with n < 1."""

    def test_warns_on_construction(self, caplog) -> None:
        with caplog.at_level(logging.WARNING, logger="dateoffsets.offsets.base"):
            MonthBegin(0)
        assert "non-positive" in caplog.text

    def test_zero_count_loop_is_identity(self, saturday: datetime) -> None:
        assert MonthBegin(0).forward(saturday) == saturday
        assert MonthEnd(0).backward(saturday) == saturday

    def test_no_warning_for_positive_count(self, caplog) -> None:
        with caplog.at_level(logging.WARNING, logger="dateoffsets.offsets.base"):
            MonthEnd(2)
        assert caplog.text == ""
