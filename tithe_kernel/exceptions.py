"""
Typed exception hierarchy for the tithe kernel.

Every error has a typed class (catch by type, not message), a ``code``
class attribute (machine-readable, API-safe) and structured attributes
carrying the offending values.

    TitheKernelError (base)
    |
    +-- CalendarError
        +-- InvalidEthiopianMonthError
        +-- InvalidMonthKeyError
        +-- YearNotOfferedError

Code                        | When Raised
----------------------------|---------------------------------------------
INVALID_ETHIOPIAN_MONTH     | Ethiopian month number outside 1..13
INVALID_MONTH_KEY           | Month key is not of the form YYYY-MM
YEAR_NOT_OFFERED            | Month picker asked to select a year it does
                            | not offer

Calendar errors also subclass ``ValueError`` so that callers validating
form input with a plain ``except ValueError`` keep working.

Name lookups (``month_name``, ``day_name``) never raise; they return the
``"Unknown"`` display fallback.
"""


class TitheKernelError(Exception):
    """
    Base exception for all tithe kernel errors.

    All subclasses must have a ``code`` class attribute for
    machine-readable error identification.
    """

    code: str = "TITHE_KERNEL_ERROR"


# Calendar-related exceptions


class CalendarError(TitheKernelError, ValueError):
    """Base exception for calendar conversion errors."""

    code: str = "CALENDAR_ERROR"


class InvalidEthiopianMonthError(CalendarError):
    """Ethiopian month number is outside Meskerem (1) .. Pagume (13)."""

    code: str = "INVALID_ETHIOPIAN_MONTH"

    def __init__(self, month: int):
        self.month = month
        super().__init__(f"Invalid Ethiopian month: {month!r} (expected 1-13)")


class InvalidMonthKeyError(CalendarError):
    """Month key could not be parsed as YYYY-MM."""

    code: str = "INVALID_MONTH_KEY"

    def __init__(self, key: str, reason: str = ""):
        self.key = key
        self.reason = reason
        message = f"Invalid month key: {key!r}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)


class YearNotOfferedError(CalendarError):
    """Month picker was asked to select a year outside its options."""

    code: str = "YEAR_NOT_OFFERED"

    def __init__(self, year: int, offered: tuple[int, ...]):
        self.year = year
        self.offered = offered
        super().__init__(
            f"Ethiopian year {year} is not offered (options: {list(offered)})"
        )
