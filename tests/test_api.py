"""End-to-end tests of the public datecalc API."""

from __future__ import annotations

import math
from datetime import datetime, timezone

import pytest

import datecalc


class TestDocumentedBehaviour:
    """The documented examples, through top-level imports."""

    def test_timestamps(self) -> None:
        """Test timestamp conversion."""
        assert datecalc.date_to_timestamp("01 Jan 1970 00:00:00 UTC") == 0
        assert datecalc.date_to_timestamp("04 Dec 1995 00:12:00 UTC") == 818035920000

    def test_day_name(self) -> None:
        """Test the epoch weekday."""
        assert datecalc.get_day_name("01 Jan 1970 00:00:00 UTC") == "Thursday"

    def test_leap_years(self) -> None:
        """Test the leap-year table."""
        assert [datecalc.is_leap_year(y) for y in (2024, 2022, 2000, 1900)] == [
            True,
            False,
            True,
            False,
        ]

    def test_work_schedule(self) -> None:
        """Test the 1-on-3-off schedule."""
        assert datecalc.get_work_schedule({"start": "01-01-2024", "end": "15-01-2024"}, 1, 3) == [
            "01-01-2024",
            "05-01-2024",
            "09-01-2024",
            "13-01-2024",
        ]

    def test_weekends(self) -> None:
        """Test January 2024 weekends."""
        assert datecalc.get_count_weekends_in_month(1, 2024) == 8

    def test_period_reflexive_at_boundaries(self) -> None:
        """Test that both boundaries are inside the period."""
        period = datecalc.Period("2024-02-02T10:00:00Z", "2024-03-02T10:00:00Z")
        assert datecalc.is_date_in_period(period.start, period)
        assert datecalc.is_date_in_period(period.end, period)

    def test_days_on_equal_bounds(self) -> None:
        """Test the single-day period."""
        assert datecalc.get_count_days_on_period("2024-02-01", "2024-02-01") == 1


class TestSentinels:
    """Unparseable strings produce sentinels, never exceptions."""

    BAD = "32 Foo 2024"

    def test_numbers_are_nan(self) -> None:
        """Test numeric results."""
        assert math.isnan(datecalc.date_to_timestamp(self.BAD))
        assert math.isnan(datecalc.get_count_days_on_period(self.BAD, "2024-01-01"))
        assert math.isnan(datecalc.get_week_number_by_date(self.BAD))
        assert math.isnan(datecalc.get_quarter(self.BAD))

    def test_strings_and_instants_are_none(self) -> None:
        """Test string and instant results."""
        assert datecalc.get_day_name(self.BAD) is None
        assert datecalc.get_time(self.BAD) is None
        assert datecalc.format_date(self.BAD) is None
        assert datecalc.get_next_friday(self.BAD) is None
        assert datecalc.get_next_friday_the_13th(self.BAD) is None

    def test_predicates_are_false(self) -> None:
        """Test boolean results."""
        assert datecalc.is_leap_year(self.BAD) is False
        assert datecalc.is_date_in_period(self.BAD, {"start": "2024-01-01", "end": "2024-12-31"}) is False

    def test_sequences_are_empty(self) -> None:
        """Test list results."""
        assert datecalc.get_work_schedule({"start": self.BAD, "end": "01-01-2024"}, 1, 1) == []

    def test_parse_error_is_public(self) -> None:
        """Test that strict callers can use the parser directly."""
        with pytest.raises(datecalc.ParseError):
            datecalc.parse_instant(self.BAD)


class TestConsistentZone:
    """Every field of a rendering comes from one reference zone."""

    @pytest.mark.parametrize("hour", [0, 5, 12, 19, 23])
    def test_format_date_matches_strftime_fields(self, hour: int) -> None:
        """Test format_date against the datetime's own fields."""
        value = datetime(2024, 7, 4, hour, 7, 9, tzinfo=timezone.utc)
        rendered = datecalc.format_date(value)
        twelve = hour % 12 or 12
        meridiem = "AM" if hour < 12 else "PM"
        assert rendered == f"7/4/2024, {twelve}:07:09 {meridiem}"
