"""
Unit tests for Ethiopian date formatting and name lookups.

Verifies:
- Long and short forms
- "Unknown" fallback for out-of-range names
- Dual Gregorian/Ethiopian display
- "Today" helpers driven by an injected clock and timezone
"""

import re
from datetime import date, datetime, timedelta, timezone

import pytest

from tithe_kernel.domain.clock import DeterministicClock
from tithe_kernel.domain.ethiopian_calendar import EthiopianDate
from tithe_kernel.domain.formatting import (
    current_ethiopian_date,
    day_name,
    dual_format,
    ethiopian_date_at,
    format_gregorian_long,
    format_long,
    format_short,
    month_name,
)


class TestNameLookups:
    """Tests for month_name / day_name."""

    def test_month_names(self):
        assert month_name(1) == "Meskerem"
        assert month_name(12) == "Nehase"
        assert month_name(13) == "Pagume"

    @pytest.mark.parametrize("month", [0, 14, -1, 100])
    def test_month_out_of_range_is_unknown(self, month):
        assert month_name(month) == "Unknown"

    def test_month_non_integer_is_unknown(self):
        assert month_name("1") == "Unknown"
        assert month_name(None) == "Unknown"

    def test_day_names(self):
        assert day_name(0) == "Ehud"
        assert day_name(6) == "Kidame"

    @pytest.mark.parametrize("index", [-1, 7, 42])
    def test_day_out_of_range_is_unknown(self, index):
        assert day_name(index) == "Unknown"


class TestLongAndShortForms:
    """Tests for format_long / format_short."""

    def test_long_from_gregorian(self):
        assert format_long(date(2024, 9, 12)) == "Meskerem 1, 2017"

    def test_long_pagume(self):
        assert format_long(date(2024, 9, 10)) == "Pagume 4, 2016"

    def test_long_from_ethiopian_date(self):
        eth = EthiopianDate(year=2016, month=5, day=12, weekday_index=1)
        assert format_long(eth) == "Tir 12, 2016"

    def test_short(self):
        assert format_short(date(2024, 9, 12)) == "1/1/2017"
        assert format_short(date(2024, 9, 11)) == "5/13/2017"

    def test_short_matches_pattern(self):
        pattern = re.compile(r"^\d+/\d{1,2}/\d+$")
        start = date(2023, 9, 1)
        for offset in range(400):
            assert pattern.match(format_short(start + timedelta(days=offset)))

    def test_receipt_string_input(self):
        assert format_long("2024-01-15") == "Tir 5, 2016"


class TestDualFormat:
    def test_pairs_both_calendars(self):
        assert dual_format(date(2024, 9, 12)) == {
            "gregorian": "September 12, 2024",
            "ethiopian": "Meskerem 1, 2017",
        }

    def test_gregorian_long_has_no_zero_padding(self):
        assert format_gregorian_long(date(2024, 1, 5)) == "January 5, 2024"


class TestToday:
    """Tests for the clock-driven helpers."""

    def test_explicit_instant(self):
        instant = datetime(2024, 9, 12, 9, 0, tzinfo=timezone.utc)
        assert ethiopian_date_at(instant) == ethiopian_date_at(date(2024, 9, 12))

    def test_timezone_moves_calendar_date(self):
        """22:30 UTC on Sep 11 is already Sep 12 in Addis Ababa (UTC+3)."""
        instant = datetime(2024, 9, 11, 22, 30, tzinfo=timezone.utc)
        assert format_long(ethiopian_date_at(instant)) == "Pagume 5, 2017"
        assert format_long(ethiopian_date_at(instant, "Africa/Addis_Ababa")) == "Meskerem 1, 2017"

    def test_current_date_uses_injected_clock(self):
        clock = DeterministicClock(datetime(2024, 9, 12, 9, 0, tzinfo=timezone.utc))
        eth = current_ethiopian_date(clock)
        assert (eth.year, eth.month, eth.day) == (2017, 1, 1)

        clock.advance_days(30)
        assert format_long(current_ethiopian_date(clock)) == "Tikimt 1, 2017"

    def test_current_date_with_system_clock(self):
        eth = current_ethiopian_date()
        assert 1 <= eth.month <= 13
