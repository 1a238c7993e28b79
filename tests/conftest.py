"""Pytest configuration and fixtures for datecalc tests."""

from __future__ import annotations

import sys
from datetime import timedelta, timezone
from pathlib import Path

import pytest

# Add the parent directory to sys.path so datecalc can be imported
# without needing to install the package
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))


@pytest.fixture
def plus_three() -> timezone:
    """A fixed UTC+03:00 reference zone."""
    return timezone(timedelta(hours=3))


@pytest.fixture
def minus_five() -> timezone:
    """A fixed UTC-05:00 reference zone."""
    return timezone(timedelta(hours=-5))
