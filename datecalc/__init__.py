"""datecalc: stateless calendar calculations.

datecalc provides small, pure date helpers: timestamp conversion, weekday
lookup, period containment, work-schedule generation and Gregorian
calendar rules. Every calculation reads all of its fields from a single
reference zone (UTC unless a tz= is passed; the host's local zone is
datetime.now().astimezone().tzinfo).

Calculations:
    date_to_timestamp: Date string to Unix milliseconds
    get_time: HH:MM:SS
    get_day_name: Weekday name
    get_next_friday: Next Friday strictly after a date
    get_next_weekday: Next given weekday strictly after a date
    get_count_days_in_month: Days in a month
    get_count_days_on_period: Days in a period, both ends counted
    is_date_in_period: Inclusive period containment
    format_date: M/D/YYYY, h:mm:ss AM|PM
    get_count_weekends_in_month: Saturdays and Sundays in a month
    get_week_number_by_date: Week of the year, week 1 from January 1
    get_next_friday_the_13th: Next Friday the 13th
    get_quarter: Quarter of the year
    get_work_schedule: Working days of a work/off cycle
    is_leap_year: Gregorian leap-year test

Types:
    Period: Inclusive range between two instants
    Weekday: Day of the week, Sunday=0 through Saturday=6

Parsing:
    parse_instant: Recognized date string to aware datetime
    parse_day_month_year: DD-MM-YYYY to date
    format_day_month_year: date to DD-MM-YYYY

Exceptions:
    DateCalcError: Base exception
    ParseError: Unrecognized or out-of-calendar date string
    ValidationError: Invalid period
    ScanLimitError: Forward scan exceeded its step limit

Unparseable strings never raise from a calculation: they produce an
invalid-result sentinel (math.nan, None, False or []).

Example:
    >>> from datecalc import date_to_timestamp, get_day_name
    >>> date_to_timestamp("04 Dec 1995 00:12:00 UTC")
    818035920000
    >>> get_day_name("01 Jan 1970 00:00:00 UTC")
    'Thursday'
"""

from __future__ import annotations

import logging

__version__ = "0.1.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())

# Exceptions
from datecalc.errors import (
    DateCalcError,
    ParseError,
    ScanLimitError,
    ValidationError,
)

# Types
from datecalc.core.period import Period
from datecalc.units.weekday import Weekday

# Parsing
from datecalc.parse import format_day_month_year, parse_day_month_year, parse_instant

# Calculations
from datecalc.calc import (
    get_count_days_in_month,
    get_count_days_on_period,
    get_count_weekends_in_month,
    get_day_name,
    get_next_friday,
    get_next_friday_the_13th,
    get_next_weekday,
    get_quarter,
    get_week_number_by_date,
    get_work_schedule,
    is_date_in_period,
    is_leap_year,
)
from datecalc.convert import date_to_timestamp
from datecalc.format import format_date, get_time

__all__: list[str] = [
    "__version__",
    # Calculations
    "date_to_timestamp",
    "get_time",
    "get_day_name",
    "get_next_friday",
    "get_next_weekday",
    "get_count_days_in_month",
    "get_count_days_on_period",
    "is_date_in_period",
    "format_date",
    "get_count_weekends_in_month",
    "get_week_number_by_date",
    "get_next_friday_the_13th",
    "get_quarter",
    "get_work_schedule",
    "is_leap_year",
    # Types
    "Period",
    "Weekday",
    # Parsing
    "parse_instant",
    "parse_day_month_year",
    "format_day_month_year",
    # Exceptions
    "DateCalcError",
    "ParseError",
    "ValidationError",
    "ScanLimitError",
]
