"""Database column types for calendar values."""

from tithe_kernel.db.types import ForMonth, MonthKeyDate

__all__ = ["ForMonth", "MonthKeyDate"]
