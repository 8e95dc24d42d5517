"""
Pytest fixtures for the tithe kernel test suite.

Provides:
- Deterministic clocks pinned around the Ethiopian New Year
- A CalendarService wired to a deterministic clock
- Logging state reset between tests
"""

from datetime import datetime, timezone

import pytest

from tithe_kernel.domain.clock import DeterministicClock
from tithe_kernel.logging_config import LogContext, reset_logging
from tithe_kernel.services.calendar_service import CalendarService


@pytest.fixture
def deterministic_clock():
    """Provide a deterministic clock for testing (2024-01-01 12:00 UTC)."""
    return DeterministicClock()


@pytest.fixture
def new_year_clock():
    """Clock at 09:00 UTC on 2024-09-12, day 1 of Ethiopian year 2017."""
    return DeterministicClock(datetime(2024, 9, 12, 9, 0, 0, tzinfo=timezone.utc))


@pytest.fixture
def calendar_service(new_year_clock):
    """CalendarService with default display settings on the New Year clock."""
    return CalendarService(new_year_clock)


@pytest.fixture(autouse=True)
def _clean_logging():
    """Reset logging state between tests."""
    reset_logging()
    LogContext.clear()
    yield
    LogContext.clear()
    reset_logging()
