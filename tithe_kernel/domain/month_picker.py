"""
MonthPicker -- state of the Ethiopian "for month" selector.

Responsibility:
    Models the payment form's month picker: which Ethiopian years are
    offered, which Ethiopian month and year are selected, and the
    Gregorian month key the selection is recorded as.

Architecture position:
    Kernel > Domain -- pure functional core.  Each selection returns a
    new immutable picker; rendering is left to the caller.

Invariants enforced:
    - ``selected_year`` is always one of ``year_options``.
    - ``selected_month`` is always in 1..13.

Failure modes:
    - InvalidEthiopianMonthError: selecting a month outside 1..13.
    - YearNotOfferedError: selecting a year not in ``year_options``.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from datetime import tzinfo

from tithe_kernel.domain.clock import Clock
from tithe_kernel.domain.ethiopian_calendar import ETHIOPIAN_MONTHS, PAGUME
from tithe_kernel.domain.formatting import current_ethiopian_date, month_name
from tithe_kernel.domain.month_key import ethiopian_to_gregorian_month
from tithe_kernel.exceptions import InvalidEthiopianMonthError, YearNotOfferedError

DEFAULT_LABEL = "For Month"
DEFAULT_YEAR_SPAN = 3


@dataclass(frozen=True)
class MonthPicker:
    """
    Immutable month-picker state.

    Attributes:
        year_options: Offered Ethiopian years, newest first.
        selected_year: Currently selected Ethiopian year.
        selected_month: Currently selected Ethiopian month (1..13).
        label: Field label shown above the control.
    """

    year_options: tuple[int, ...]
    selected_year: int
    selected_month: int
    label: str = DEFAULT_LABEL

    def __post_init__(self) -> None:
        _check_month(self.selected_month)
        if self.selected_year not in self.year_options:
            raise YearNotOfferedError(self.selected_year, self.year_options)

    @classmethod
    def for_today(
        cls,
        clock: Clock | None = None,
        tz: tzinfo | str | None = None,
        year_span: int = DEFAULT_YEAR_SPAN,
        label: str = DEFAULT_LABEL,
    ) -> MonthPicker:
        """
        Picker preselected on the current Ethiopian year and month.

        The current year and the ``year_span - 1`` years before it are
        offered.
        """
        if year_span < 1:
            raise ValueError(f"year_span must be at least 1, got {year_span}")
        today = current_ethiopian_date(clock, tz)
        return cls(
            year_options=tuple(today.year - offset for offset in range(year_span)),
            selected_year=today.year,
            selected_month=today.month,
            label=label,
        )

    @staticmethod
    def month_options() -> tuple[tuple[int, str], ...]:
        """``((1, "Meskerem"), ..., (13, "Pagume"))``"""
        return tuple(enumerate(ETHIOPIAN_MONTHS, start=1))

    def select_month(self, month: int) -> MonthPicker:
        _check_month(month)
        return replace(self, selected_month=month)

    def select_year(self, year: int) -> MonthPicker:
        if year not in self.year_options:
            raise YearNotOfferedError(year, self.year_options)
        return replace(self, selected_year=year)

    @property
    def gregorian_month(self) -> str:
        """Month key the current selection is recorded as."""
        return ethiopian_to_gregorian_month(self.selected_year, self.selected_month)

    @property
    def selection_label(self) -> str:
        return f"{month_name(self.selected_month)} {self.selected_year}"

    @property
    def field_label(self) -> str:
        return f"{self.label} (Ethiopian Calendar)"


def _check_month(month: int) -> None:
    if isinstance(month, bool) or not isinstance(month, int) or not 1 <= month <= PAGUME:
        raise InvalidEthiopianMonthError(month)
