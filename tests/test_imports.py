"""Tests for datecalc package imports.

These tests verify that the package structure is correct and all
modules are importable.
"""

from __future__ import annotations

import logging


def test_import_datecalc() -> None:
    """Import datecalc package succeeds."""
    import datecalc

    assert hasattr(datecalc, "__version__")
    assert datecalc.__version__ == "0.1.0"


def test_public_surface_is_exported() -> None:
    """Every name in __all__ resolves on the package."""
    import datecalc

    for name in datecalc.__all__:
        assert hasattr(datecalc, name), name


def test_all_calculations_exported() -> None:
    """The fourteen calculations are importable from the top level."""
    from datecalc import (  # noqa: F401
        date_to_timestamp,
        format_date,
        get_count_days_in_month,
        get_count_days_on_period,
        get_count_weekends_in_month,
        get_day_name,
        get_next_friday,
        get_next_friday_the_13th,
        get_quarter,
        get_time,
        get_week_number_by_date,
        get_work_schedule,
        is_date_in_period,
        is_leap_year,
    )


def test_import_submodules() -> None:
    """Each submodule exposes __all__."""
    from datecalc import calc, convert, core, parse, units  # noqa: F401
    from datecalc import format  # noqa: A004

    for module in (calc, convert, core, format, parse, units):
        assert hasattr(module, "__all__")


def test_package_logger_has_null_handler() -> None:
    """The library installs a NullHandler and nothing else."""
    import datecalc  # noqa: F401

    handlers = logging.getLogger("datecalc").handlers
    assert any(isinstance(h, logging.NullHandler) for h in handlers)


def test_exception_hierarchy() -> None:
    """All package exceptions derive from DateCalcError."""
    from datecalc import DateCalcError, ParseError, ScanLimitError, ValidationError

    for exc in (ParseError, ValidationError, ScanLimitError):
        assert issubclass(exc, DateCalcError)
