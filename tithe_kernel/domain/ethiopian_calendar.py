"""
Ethiopian calendar -- Gregorian to Ethiopian date conversion.

Responsibility:
    Converts a Gregorian calendar date into its Ethiopian representation
    (year, month, day, month name, weekday name) for display on the
    dashboard, receipts and reports.  Persistence always uses Gregorian
    dates; an ``EthiopianDate`` is a display value only.

Architecture position:
    Kernel > Domain -- pure functional core, zero I/O.  The name tables
    are immutable module constants and nothing here holds mutable state,
    so every function is safe to call from any thread.

Algorithm:
    The Ethiopian New Year is placed on Gregorian day-of-year 256 in a
    Gregorian leap year and 255 otherwise (September 12 in both cases).
    The Ethiopian day-of-year counts from that day, falling back to the
    previous Gregorian year's length for dates before it.  Months are
    30-day blocks; whatever is left past day 360 is Pagume, the 13th
    month of 5 or 6 days.

    The Ethiopian year *number* is taken from a separate month/day
    threshold (before September 11 -> Gregorian year - 8, otherwise - 7).
    The two rules do not agree on September 11, which therefore reports
    Pagume of the new year number.  This is the established behavior of
    the system and is kept as is.

Failure modes:
    - ``ValueError`` from ``date.fromisoformat`` for an unparseable date
      string.  Every valid ``date`` converts without error.
    - InvalidEthiopianMonthError / ``ValueError`` when an ``EthiopianDate``
      is constructed by hand with an out-of-range month, day or weekday.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime

from tithe_kernel.exceptions import InvalidEthiopianMonthError

ETHIOPIAN_MONTHS: tuple[str, ...] = (
    "Meskerem",
    "Tikimt",
    "Hidar",
    "Tahsas",
    "Tir",
    "Yekatit",
    "Megabit",
    "Miazia",
    "Ginbot",
    "Sene",
    "Hamle",
    "Nehase",
    "Pagume",
)

# Index 0 is Sunday.
ETHIOPIAN_DAYS: tuple[str, ...] = (
    "Ehud",
    "Segno",
    "Maksegno",
    "Erob",
    "Hamus",
    "Arb",
    "Kidame",
)

UNKNOWN_NAME = "Unknown"

PAGUME = 13
PAGUME_MAX_DAYS = 6
DAYS_PER_MONTH = 30
# Days covered by the twelve 30-day months.
REGULAR_MONTH_DAYS = 12 * DAYS_PER_MONTH

LEAP_NEW_YEAR_DAY = 256
COMMON_NEW_YEAR_DAY = 255

# Gregorian month/day at which the year number switches from -8 to -7.
YEAR_SWITCH_MONTH = 9
YEAR_SWITCH_DAY = 11


@dataclass(frozen=True, slots=True)
class EthiopianDate:
    """
    Ethiopian calendar date value object.

    Contract:
        Produced fresh by ``gregorian_to_ethiopian``; owned by the caller.

    Guarantees:
        - Immutable and hashable; equal when all fields are equal.
        - ``month_name`` is a pure function of ``month`` and
          ``day_of_week`` a pure function of ``weekday_index``; neither
          can be set independently.

    Attributes:
        year: Ethiopian year number.
        month: 1..12 for the 30-day months, 13 for Pagume.
        day: 1..30, or 1..6 in Pagume.
        weekday_index: Weekday of the source Gregorian date, Sunday = 0.
    """

    year: int
    month: int
    day: int
    weekday_index: int

    def __post_init__(self) -> None:
        if not 1 <= self.month <= PAGUME:
            raise InvalidEthiopianMonthError(self.month)
        max_day = PAGUME_MAX_DAYS if self.month == PAGUME else DAYS_PER_MONTH
        if not 1 <= self.day <= max_day:
            raise ValueError(
                f"Invalid day {self.day} for Ethiopian month {self.month} (1-{max_day})"
            )
        if not 0 <= self.weekday_index < len(ETHIOPIAN_DAYS):
            raise ValueError(f"Invalid weekday index: {self.weekday_index} (expected 0-6)")

    @property
    def month_name(self) -> str:
        return ETHIOPIAN_MONTHS[self.month - 1]

    @property
    def day_of_week(self) -> str:
        return ETHIOPIAN_DAYS[self.weekday_index]

    @property
    def is_pagume(self) -> bool:
        return self.month == PAGUME

    def as_dict(self) -> dict[str, int | str]:
        """Serializable form with the derived names included."""
        return {
            "year": self.year,
            "month": self.month,
            "day": self.day,
            "monthName": self.month_name,
            "dayOfWeek": self.day_of_week,
        }


def is_gregorian_leap_year(year: int) -> bool:
    """Standard Gregorian leap rule."""
    return (year % 4 == 0 and year % 100 != 0) or year % 400 == 0


def days_in_gregorian_year(year: int) -> int:
    return 366 if is_gregorian_leap_year(year) else 365


def ethiopian_new_year_day(year: int) -> int:
    """Gregorian day-of-year on which the Ethiopian year starts in ``year``."""
    return LEAP_NEW_YEAR_DAY if is_gregorian_leap_year(year) else COMMON_NEW_YEAR_DAY


def day_of_year(value: date) -> int:
    """1-based ordinal of ``value`` within its Gregorian year."""
    return value.toordinal() - date(value.year, 1, 1).toordinal() + 1


def ethiopian_day_of_year(value: date | datetime | str) -> int:
    """
    1-based day of the Ethiopian year containing ``value``.

    Postconditions:
        - Result is in 1..366.
        - Resets to 1 exactly on ``ethiopian_new_year_day(value.year)``.
    """
    gregorian = as_gregorian_date(value)
    doy = day_of_year(gregorian)
    new_year_day = ethiopian_new_year_day(gregorian.year)
    if doy >= new_year_day:
        return doy - new_year_day + 1
    return doy + days_in_gregorian_year(gregorian.year - 1) - new_year_day + 1


def ethiopian_year_number(value: date | datetime | str) -> int:
    """Ethiopian year number by the September 11 threshold."""
    gregorian = as_gregorian_date(value)
    before_switch = gregorian.month < YEAR_SWITCH_MONTH or (
        gregorian.month == YEAR_SWITCH_MONTH and gregorian.day < YEAR_SWITCH_DAY
    )
    return gregorian.year - 8 if before_switch else gregorian.year - 7


def split_day_of_year(eth_day_of_year: int) -> tuple[int, int]:
    """Decompose an Ethiopian day-of-year into (month, day)."""
    if eth_day_of_year > REGULAR_MONTH_DAYS:
        return PAGUME, eth_day_of_year - REGULAR_MONTH_DAYS
    month = (eth_day_of_year - 1) // DAYS_PER_MONTH + 1
    day = (eth_day_of_year - 1) % DAYS_PER_MONTH + 1
    return month, day


def gregorian_weekday_index(value: date) -> int:
    """Weekday with Sunday = 0 through Saturday = 6."""
    return value.isoweekday() % 7


def gregorian_to_ethiopian(value: date | datetime | str) -> EthiopianDate:
    """
    Convert a Gregorian date to an ``EthiopianDate``.

    Preconditions:
        - ``value`` is a ``date``, a ``datetime`` (its own calendar date is
          used, no timezone shift) or an ISO-8601 date string.

    Postconditions:
        - ``month`` in 1..13; ``day`` in 1..30, or 1..6 when ``month`` is 13.

    Raises:
        ValueError: If ``value`` is a string that is not an ISO date.
    """
    gregorian = as_gregorian_date(value)
    month, day = split_day_of_year(ethiopian_day_of_year(gregorian))
    return EthiopianDate(
        year=ethiopian_year_number(gregorian),
        month=month,
        day=day,
        weekday_index=gregorian_weekday_index(gregorian),
    )


def as_gregorian_date(value: date | datetime | str) -> date:
    """Normalize the accepted input forms to a plain ``date``."""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        text = value.strip()
        # Accept full timestamps such as "2024-09-11T08:30:00Z".
        if len(text) > 10 and text[10] in "T ":
            text = text[:10]
        return date.fromisoformat(text)
    raise TypeError(f"Expected date, datetime or ISO string, got {type(value).__name__}")
