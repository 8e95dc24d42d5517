"""
Calendar display configuration schema.

The human-authored YAML in ``tithe_config/sets/`` is parsed into these
frozen types by the loader.  Nothing here reads files.
"""

from __future__ import annotations

from dataclasses import dataclass

DEFAULT_TIMEZONE = "Africa/Addis_Ababa"


@dataclass(frozen=True)
class CalendarDisplayConfig:
    """How the calendar helpers are presented to a congregation."""

    config_id: str
    version: int
    timezone: str = DEFAULT_TIMEZONE
    picker_year_span: int = 3  # current Ethiopian year plus two previous
    picker_label: str = "For Month"
    trend_months: int = 12
    checksum: str = ""
