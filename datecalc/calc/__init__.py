"""Calendar calculations.

This module provides the weekday, month, period and schedule
calculations:
    - get_day_name, get_next_weekday, get_next_friday,
      get_next_friday_the_13th, get_count_weekends_in_month,
      get_week_number_by_date
    - get_count_days_in_month, get_quarter, is_leap_year
    - get_count_days_on_period, is_date_in_period
    - get_work_schedule
"""

from __future__ import annotations

from datecalc.calc.months import get_count_days_in_month, get_quarter, is_leap_year
from datecalc.calc.periods import get_count_days_on_period, is_date_in_period
from datecalc.calc.schedule import get_work_schedule
from datecalc.calc.weekdays import (
    get_count_weekends_in_month,
    get_day_name,
    get_next_friday,
    get_next_friday_the_13th,
    get_next_weekday,
    get_week_number_by_date,
)

__all__: list[str] = [
    # Weekdays
    "get_day_name",
    "get_next_weekday",
    "get_next_friday",
    "get_next_friday_the_13th",
    "get_count_weekends_in_month",
    "get_week_number_by_date",
    # Months
    "get_count_days_in_month",
    "get_quarter",
    "is_leap_year",
    # Periods
    "get_count_days_on_period",
    "is_date_in_period",
    # Schedules
    "get_work_schedule",
]
