"""
Pure domain layer.

Calendar conversion, month keys, formatting and the month picker, with
NO dependencies on:
- ORM (SQLAlchemy)
- Database
- Configuration files
- I/O (time enters only through an injected Clock)

All domain objects are immutable and deterministic.
"""

from tithe_kernel.domain.clock import Clock, DeterministicClock, SystemClock
from tithe_kernel.domain.ethiopian_calendar import (
    ETHIOPIAN_DAYS,
    ETHIOPIAN_MONTHS,
    UNKNOWN_NAME,
    EthiopianDate,
    days_in_gregorian_year,
    ethiopian_day_of_year,
    ethiopian_new_year_day,
    gregorian_to_ethiopian,
    is_gregorian_leap_year,
)
from tithe_kernel.domain.formatting import (
    current_ethiopian_date,
    day_name,
    dual_format,
    ethiopian_date_at,
    format_long,
    format_short,
    month_name,
)
from tithe_kernel.domain.month_key import (
    ethiopian_to_gregorian_month,
    month_key_for,
    month_key_to_date,
    trailing_month_keys,
)
from tithe_kernel.domain.month_picker import MonthPicker

__all__ = [
    # Clock
    "Clock",
    "DeterministicClock",
    "SystemClock",
    # Conversion
    "ETHIOPIAN_DAYS",
    "ETHIOPIAN_MONTHS",
    "UNKNOWN_NAME",
    "EthiopianDate",
    "days_in_gregorian_year",
    "ethiopian_day_of_year",
    "ethiopian_new_year_day",
    "gregorian_to_ethiopian",
    "is_gregorian_leap_year",
    # Formatting
    "current_ethiopian_date",
    "day_name",
    "dual_format",
    "ethiopian_date_at",
    "format_long",
    "format_short",
    "month_name",
    # Month keys
    "ethiopian_to_gregorian_month",
    "month_key_for",
    "month_key_to_date",
    "trailing_month_keys",
    # Picker
    "MonthPicker",
]
