"""
Module: tithe_kernel.db.types
Responsibility: Column types for calendar values.  A payment's "for month"
    travels through the application as a ``YYYY-MM`` month key and is stored
    as a Gregorian DATE on day 1 of that month.
Architecture position: Kernel > DB.  Imports only from domain/ and
    exceptions; no model or service imports.

Invariants enforced:
    - Every stored "for month" is day 1 of its month.
    - Loaded values are always ``YYYY-MM`` keys.

Failure modes:
    - InvalidMonthKeyError on binding a malformed key.
    - TypeError on binding anything other than a key string or a date.
"""

from datetime import date
from typing import Annotated

from sqlalchemy import Date
from sqlalchemy.orm import mapped_column
from sqlalchemy.types import TypeDecorator

from tithe_kernel.domain.month_key import month_key_for, month_key_to_date


class MonthKeyDate(TypeDecorator):
    """
    Month key stored as a DATE on the first of the month.

    Contract:
        Binds a ``YYYY-MM`` key (or a ``date``/``datetime``, truncated to
        its month) and loads it back as a ``YYYY-MM`` key.

    Guarantees:
        - process_bind_param: key -> date(year, month, 1).
        - process_result_value: date -> "YYYY-MM".
        - cache_ok=True enables SQLAlchemy statement caching.
    """

    impl = Date
    cache_ok = True

    def process_bind_param(self, value, dialect):
        """Convert a month key or date to the first day of its month."""
        if value is None:
            return None
        if isinstance(value, str):
            return month_key_to_date(value)
        if isinstance(value, date):
            return month_key_to_date(month_key_for(value))
        raise TypeError(f"Cannot store {type(value).__name__} as a month key")

    def process_result_value(self, value, dialect):
        """Convert the stored date back to its month key."""
        if value is not None:
            return month_key_for(value)
        return None


# "For month" column: Mapped[ForMonth] in declarative models.
ForMonth = Annotated[str, mapped_column(MonthKeyDate())]
