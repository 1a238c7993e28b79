"""Tests for month, quarter and year calculations."""

from __future__ import annotations

import calendar as std_calendar
import math
from datetime import date, datetime, timezone

import pytest

from datecalc.calc.months import get_count_days_in_month, get_quarter, is_leap_year


class TestGetCountDaysInMonth:
    """Tests for get_count_days_in_month."""

    def test_examples(self) -> None:
        """Test documented month lengths."""
        assert get_count_days_in_month(1, 2024) == 31
        assert get_count_days_in_month(2, 2024) == 29

    @pytest.mark.parametrize("year", [1900, 2000, 2022, 2023, 2024, 2100])
    def test_matches_gregorian_table(self, year: int) -> None:
        """Test every month against the standard library calendar."""
        for month in range(1, 13):
            expected = std_calendar.monthrange(year, month)[1]
            assert get_count_days_in_month(month, year) == expected

    @pytest.mark.parametrize("year", [1900, 2000, 2023, 2024])
    def test_february_follows_leap_rule(self, year: int) -> None:
        """Test that February has 29 days exactly in leap years."""
        assert (get_count_days_in_month(2, year) == 29) is is_leap_year(year)

    def test_month_13_rolls_over(self) -> None:
        """Test that month 13 is January of the next year."""
        assert get_count_days_in_month(13, 2023) == 31

    def test_month_0_rolls_back(self) -> None:
        """Test that month 0 is December of the previous year."""
        assert get_count_days_in_month(0, 2024) == 31

    def test_month_14_in_leap_following_year(self) -> None:
        """Test that month 14 of 2023 is February 2024."""
        assert get_count_days_in_month(14, 2023) == 29


class TestGetQuarter:
    """Tests for get_quarter."""

    @pytest.mark.parametrize(
        "value,expected",
        [
            (datetime(2024, 2, 13), 1),
            (datetime(2024, 6, 1), 2),
            (datetime(2024, 11, 10), 4),
            (date(2024, 1, 1), 1),
            (date(2024, 3, 31), 1),
            (date(2024, 4, 1), 2),
            (date(2024, 7, 1), 3),
            (date(2024, 9, 30), 3),
            (date(2024, 10, 1), 4),
            (date(2024, 12, 31), 4),
        ],
    )
    def test_quarters(self, value: date, expected: int) -> None:
        """Test quarter boundaries."""
        assert get_quarter(value) == expected

    def test_reference_zone(self, plus_three: timezone) -> None:
        """Test that the month is read in the reference zone."""
        value = datetime(2024, 3, 31, 22, 0, tzinfo=timezone.utc)
        assert get_quarter(value) == 1
        assert get_quarter(value, tz=plus_three) == 2

    def test_invalid_is_nan(self) -> None:
        """Test that unparseable input yields NaN."""
        assert math.isnan(get_quarter("Q3"))


class TestIsLeapYear:
    """Tests for is_leap_year."""

    @pytest.mark.parametrize(
        "year,expected",
        [(2024, True), (2022, False), (2000, True), (1900, False), (2020, True)],
    )
    def test_plain_years(self, year: int, expected: bool) -> None:
        """Test the Gregorian rule on plain years."""
        assert is_leap_year(year) is expected

    @pytest.mark.parametrize(
        "value,expected",
        [
            (datetime(2024, 3, 1), True),
            (datetime(2022, 3, 1), False),
            ("2000-06-15", True),
            (date(1900, 1, 1), False),
        ],
    )
    def test_dates(self, value: object, expected: bool) -> None:
        """Test that the year is taken from a date."""
        assert is_leap_year(value) is expected  # type: ignore[arg-type]

    def test_invalid_is_false(self) -> None:
        """Test that unparseable input yields False."""
        assert is_leap_year("leap") is False
