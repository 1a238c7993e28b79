"""Tests for work schedule generation."""

from __future__ import annotations

import pytest

from datecalc.calc.schedule import get_work_schedule
from datecalc.errors import ValidationError


class TestGetWorkSchedule:
    """Tests for get_work_schedule."""

    def test_one_on_three_off(self) -> None:
        """Test a 1/3 cycle over half a month."""
        result = get_work_schedule({"start": "01-01-2024", "end": "15-01-2024"}, 1, 3)
        assert result == ["01-01-2024", "05-01-2024", "09-01-2024", "13-01-2024"]

    def test_one_on_one_off(self) -> None:
        """Test alternating days."""
        result = get_work_schedule({"start": "01-01-2024", "end": "10-01-2024"}, 1, 1)
        assert result == ["01-01-2024", "03-01-2024", "05-01-2024", "07-01-2024", "09-01-2024"]

    def test_multi_day_blocks_cross_month(self) -> None:
        """Test a 2/1 cycle across a leap-February month boundary."""
        result = get_work_schedule({"start": "27-02-2024", "end": "05-03-2024"}, 2, 1)
        assert result == [
            "27-02-2024",
            "28-02-2024",
            "01-03-2024",
            "02-03-2024",
            "04-03-2024",
            "05-03-2024",
        ]

    def test_end_is_inclusive(self) -> None:
        """Test that the last day is emitted when it is a working day."""
        result = get_work_schedule({"start": "01-01-2024", "end": "03-01-2024"}, 1, 1)
        assert result[-1] == "03-01-2024"

    def test_single_day_period(self) -> None:
        """Test a period of one day."""
        assert get_work_schedule({"start": "29-02-2024", "end": "29-02-2024"}, 3, 4) == ["29-02-2024"]

    def test_no_off_days_is_every_day(self) -> None:
        """Test that zero off days lists every day."""
        result = get_work_schedule({"start": "30-12-2023", "end": "02-01-2024"}, 5, 0)
        assert result == ["30-12-2023", "31-12-2023", "01-01-2024", "02-01-2024"]

    def test_negative_off_days_count_as_zero(self) -> None:
        """Test that negative off days behave like zero."""
        period = {"start": "01-01-2024", "end": "04-01-2024"}
        assert get_work_schedule(period, 1, -3) == get_work_schedule(period, 1, 0)

    @pytest.mark.parametrize("work_days", [0, -1])
    def test_no_work_days_is_empty(self, work_days: int) -> None:
        """Test that a cycle without working days yields nothing."""
        assert get_work_schedule({"start": "01-01-2024", "end": "15-01-2024"}, work_days, 3) == []

    def test_end_before_start_is_empty(self) -> None:
        """Test an inverted period."""
        assert get_work_schedule({"start": "15-01-2024", "end": "01-01-2024"}, 1, 1) == []

    def test_unparseable_bound_is_empty(self) -> None:
        """Test that an ISO bound is not accepted."""
        assert get_work_schedule({"start": "2024-01-01", "end": "15-01-2024"}, 1, 1) == []

    def test_missing_bound_raises(self) -> None:
        """Test that a missing key raises ValidationError."""
        with pytest.raises(ValidationError, match="missing start"):
            get_work_schedule({"end": "15-01-2024"}, 1, 1)

    def test_result_is_a_fresh_list(self) -> None:
        """Test that results do not share state between calls."""
        first = get_work_schedule({"start": "2024-01-01", "end": "x"}, 1, 1)
        first.append("mutated")
        assert get_work_schedule({"start": "2024-01-01", "end": "x"}, 1, 1) == []
