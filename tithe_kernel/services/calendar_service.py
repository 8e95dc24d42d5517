"""
CalendarService -- Ethiopian calendar facade for the application shell.

Responsibility:
    The one object the dashboard, receipt renderer and payment form talk to
    for calendar work.  Binds a Clock and the congregation's display
    settings (timezone, picker span and label, trend window) to the pure
    functions in ``tithe_kernel.domain``.

Architecture position:
    Kernel > Services -- imperative shell.  Owns no state beyond its
    constructor arguments; safe to share between threads.

Failure modes:
    - InvalidEthiopianMonthError: ``for_month`` with a month outside 1..13.
    - ZoneInfoNotFoundError: unknown timezone name, on first use.

Audit relevance:
    ``for_month`` logs every Ethiopian-to-Gregorian month mapping at DEBUG
    with structured fields so a payment's recorded month can be traced
    back to what was picked.
"""

from __future__ import annotations

from datetime import date, datetime

from tithe_kernel.domain.clock import Clock, SystemClock
from tithe_kernel.domain.ethiopian_calendar import EthiopianDate
from tithe_kernel.domain.formatting import current_ethiopian_date, dual_format, format_long
from tithe_kernel.domain.month_key import (
    ethiopian_to_gregorian_month,
    month_key_to_date,
    trailing_month_keys,
)
from tithe_kernel.domain.month_picker import DEFAULT_LABEL, DEFAULT_YEAR_SPAN, MonthPicker
from tithe_kernel.logging_config import get_logger

logger = get_logger("services.calendar")

DEFAULT_TIMEZONE = "Africa/Addis_Ababa"


class CalendarService:
    """
    Calendar facade with an injected clock and display settings.

    Contract:
        Every "today"-dependent answer is derived from ``clock`` seen from
        ``timezone``; everything else is a pure pass-through.

    Non-goals:
        - Does NOT persist anything; "for month" dates are returned to the
          caller to store.
        - Does NOT aggregate payments into the trend window.
    """

    def __init__(
        self,
        clock: Clock | None = None,
        *,
        timezone: str = DEFAULT_TIMEZONE,
        picker_year_span: int = DEFAULT_YEAR_SPAN,
        picker_label: str = DEFAULT_LABEL,
        trend_months: int = 12,
    ):
        self._clock = clock or SystemClock()
        self._timezone = timezone
        self._picker_year_span = picker_year_span
        self._picker_label = picker_label
        self._trend_months = trend_months

    @property
    def timezone(self) -> str:
        return self._timezone

    def today(self) -> EthiopianDate:
        """Current Ethiopian date in the configured timezone."""
        return current_ethiopian_date(self._clock, self._timezone)

    def today_gregorian(self) -> date:
        return self._clock.today(self._timezone)

    def describe(self, value: date | datetime | str) -> dict[str, str]:
        """Gregorian and Ethiopian long forms, for dashboards and reports."""
        return dual_format(value)

    def receipt_date(self, payment_date: date | datetime | str) -> str:
        """Ethiopian long form printed on a payment receipt."""
        return format_long(payment_date)

    def month_picker(self) -> MonthPicker:
        """Month picker preselected on today's Ethiopian month."""
        return MonthPicker.for_today(
            self._clock,
            self._timezone,
            year_span=self._picker_year_span,
            label=self._picker_label,
        )

    def for_month(self, eth_year: int, eth_month: int) -> date:
        """
        Gregorian "for month" date (day 1) of an Ethiopian month selection.

        Raises:
            InvalidEthiopianMonthError: If ``eth_month`` is not in 1..13.
        """
        key = ethiopian_to_gregorian_month(eth_year, eth_month)
        for_month = month_key_to_date(key)
        logger.debug(
            "for_month_mapped",
            extra={
                "eth_year": eth_year,
                "eth_month": eth_month,
                "month_key": key,
                "for_month": for_month,
            },
        )
        return for_month

    def trend_window(self) -> list[str]:
        """Month keys of the dashboard trend chart, oldest first."""
        return trailing_month_keys(self.today_gregorian(), self._trend_months)
