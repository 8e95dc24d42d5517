"""
Formatting -- display strings for Ethiopian dates.

Responsibility:
    Renders ``EthiopianDate`` values for receipts, reports and the
    dashboard, provides the safe month/day name lookups, and exposes the
    "today" helpers on top of an injectable Clock.

Architecture position:
    Kernel > Domain -- pure functional core.  The only time dependency is
    the ``Clock`` passed to ``current_ethiopian_date``; ``ethiopian_date_at``
    is fully deterministic.

Failure modes:
    - Name lookups never raise; out-of-range input yields ``"Unknown"``.
    - ``format_long``/``format_short`` never raise for an ``EthiopianDate``.
"""

from __future__ import annotations

from datetime import date, datetime, tzinfo

from tithe_kernel.domain.clock import Clock, SystemClock, resolve_timezone
from tithe_kernel.domain.ethiopian_calendar import (
    ETHIOPIAN_DAYS,
    ETHIOPIAN_MONTHS,
    UNKNOWN_NAME,
    EthiopianDate,
    as_gregorian_date,
    gregorian_to_ethiopian,
)

GREGORIAN_MONTHS: tuple[str, ...] = (
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)


def month_name(month_number: int) -> str:
    """Ethiopian month name for 1..13, ``"Unknown"`` otherwise."""
    if not _is_index(month_number) or not 1 <= month_number <= len(ETHIOPIAN_MONTHS):
        return UNKNOWN_NAME
    return ETHIOPIAN_MONTHS[month_number - 1]


def day_name(day_index: int) -> str:
    """Ethiopian weekday name for 0 (Sunday) .. 6, ``"Unknown"`` otherwise."""
    if not _is_index(day_index) or not 0 <= day_index < len(ETHIOPIAN_DAYS):
        return UNKNOWN_NAME
    return ETHIOPIAN_DAYS[day_index]


def format_long(value: EthiopianDate | date | datetime | str) -> str:
    """``"Meskerem 1, 2017"``"""
    eth = _as_ethiopian(value)
    return f"{month_name(eth.month)} {eth.day}, {eth.year}"


def format_short(value: EthiopianDate | date | datetime | str) -> str:
    """``"1/1/2017"`` (day/month/year)"""
    eth = _as_ethiopian(value)
    return f"{eth.day}/{eth.month}/{eth.year}"


def format_gregorian_long(value: date | datetime | str) -> str:
    """US-English long form, e.g. ``"September 11, 2024"``."""
    gregorian = as_gregorian_date(value)
    return f"{GREGORIAN_MONTHS[gregorian.month - 1]} {gregorian.day}, {gregorian.year}"


def dual_format(value: date | datetime | str) -> dict[str, str]:
    """Gregorian and Ethiopian long forms of the same date."""
    return {
        "gregorian": format_gregorian_long(value),
        "ethiopian": format_long(value),
    }


def ethiopian_date_at(instant: datetime | date, tz: tzinfo | str | None = None) -> EthiopianDate:
    """
    Ethiopian date of an explicit instant.

    When ``tz`` is given and ``instant`` is an aware datetime, the instant
    is first converted to that zone so the calendar date is the local one.
    """
    if tz is not None and isinstance(instant, datetime) and instant.tzinfo is not None:
        instant = instant.astimezone(resolve_timezone(tz))
    return gregorian_to_ethiopian(instant)


def current_ethiopian_date(
    clock: Clock | None = None,
    tz: tzinfo | str | None = None,
) -> EthiopianDate:
    """Today's Ethiopian date according to ``clock`` (system time by default)."""
    clock = clock or SystemClock()
    return ethiopian_date_at(clock.now(), tz)


def _as_ethiopian(value: EthiopianDate | date | datetime | str) -> EthiopianDate:
    if isinstance(value, EthiopianDate):
        return value
    return gregorian_to_ethiopian(value)


def _is_index(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)
