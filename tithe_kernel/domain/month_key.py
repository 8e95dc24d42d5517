"""
Month keys -- Ethiopian month selection to Gregorian ``YYYY-MM`` keys.

Responsibility:
    Maps an Ethiopian (year, month) picked in a form to the Gregorian month
    key recorded as a payment's "for month", and provides the key helpers
    the dashboard and payment form build on: key -> first-of-month date,
    date -> key, and the trailing window of month keys used for trends.

Architecture position:
    Kernel > Domain -- pure functional core, zero I/O.

Invariants enforced:
    - Keys are always ``YYYY-MM`` with a zero-padded month.
    - A stored "for month" is always day 1 of the keyed month.

Non-goals:
    ``ethiopian_to_gregorian_month`` is a coarse month-granularity mapping
    (Meskerem ~ September).  It is NOT the inverse of
    ``gregorian_to_ethiopian`` and callers must not use it to round-trip
    exact dates.

Failure modes:
    - InvalidEthiopianMonthError: month outside 1..13.
    - InvalidMonthKeyError: key not of the form ``YYYY-MM``.
"""

from __future__ import annotations

import re
from datetime import date, datetime

from tithe_kernel.domain.ethiopian_calendar import PAGUME, as_gregorian_date
from tithe_kernel.exceptions import InvalidEthiopianMonthError, InvalidMonthKeyError

_YEAR_OFFSET = 7
# Meskerem (1) lands on September (9).
_MONTH_OFFSET = 8

_MONTH_KEY_PATTERN = re.compile(r"^([0-9]{4})-([0-9]{2})(?:-([0-9]{2}))?$")


def ethiopian_to_gregorian_month(eth_year: int, eth_month: int) -> str:
    """
    Approximate Gregorian month key for an Ethiopian year and month.

    Example:
        ethiopian_to_gregorian_month(2016, 1) -> "2023-09"
        ethiopian_to_gregorian_month(2016, 5) -> "2024-01"

    Raises:
        InvalidEthiopianMonthError: If ``eth_month`` is not in 1..13.
    """
    if (
        isinstance(eth_month, bool)
        or not isinstance(eth_month, int)
        or not 1 <= eth_month <= PAGUME
    ):
        raise InvalidEthiopianMonthError(eth_month)

    greg_year = eth_year + _YEAR_OFFSET
    greg_month = eth_month + _MONTH_OFFSET
    if greg_month > 12:
        greg_month -= 12
        greg_year += 1
    return format_month_key(greg_year, greg_month)


def format_month_key(year: int, month: int) -> str:
    return f"{year}-{month:02d}"


def month_key_for(value: date | datetime | str) -> str:
    """Month key of a Gregorian date."""
    gregorian = as_gregorian_date(value)
    return format_month_key(gregorian.year, gregorian.month)


def month_key_to_date(key: str) -> date:
    """
    First day of the month named by ``key``.

    A full ISO date (``YYYY-MM-DD``) is also accepted and normalized to
    day 1, since payment forms sometimes post the picker value that way.

    Raises:
        InvalidMonthKeyError: If ``key`` is not a valid month key.
    """
    if not isinstance(key, str):
        raise InvalidMonthKeyError(str(key), "not a string")

    match = _MONTH_KEY_PATTERN.match(key.strip())
    if match is None:
        raise InvalidMonthKeyError(key, "expected YYYY-MM")

    year, month = int(match.group(1)), int(match.group(2))
    if year < 1:
        raise InvalidMonthKeyError(key, "year out of range")
    if not 1 <= month <= 12:
        raise InvalidMonthKeyError(key, "month out of range")
    if match.group(3) is not None:
        try:
            date(year, month, int(match.group(3)))
        except ValueError as e:
            raise InvalidMonthKeyError(key, str(e)) from e
    return date(year, month, 1)


def shift_month(year: int, month: int, delta: int) -> tuple[int, int]:
    """Move (year, month) by ``delta`` months."""
    index = year * 12 + (month - 1) + delta
    return index // 12, index % 12 + 1


def trailing_month_keys(as_of: date | datetime | str, count: int = 12) -> list[str]:
    """
    The ``count`` month keys ending with ``as_of``'s month, oldest first.

    Example:
        trailing_month_keys(date(2024, 2, 15), 3) -> ["2023-12", "2024-01", "2024-02"]
    """
    if count < 1:
        raise ValueError(f"count must be positive, got {count}")
    anchor = as_gregorian_date(as_of)
    keys = []
    for back in range(count - 1, -1, -1):
        year, month = shift_month(anchor.year, anchor.month, -back)
        keys.append(format_month_key(year, month))
    return keys
