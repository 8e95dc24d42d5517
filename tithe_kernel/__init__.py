"""
Tithe Kernel - Ethiopian calendar support for church membership and tithe records.

- Gregorian to Ethiopian date conversion for display
- Ethiopian month selection to Gregorian "for month" keys
- Receipt/dashboard formatting with an injectable clock
- SQLAlchemy column type for month keys
"""

__version__ = "0.1.0"
