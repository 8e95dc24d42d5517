"""
Config -> Kernel Bridges.

Functions that turn a ``CalendarDisplayConfig`` into kernel objects.  These
live in tithe_config (the producer) because the kernel must never import
tithe_config.

Usage:
    from tithe_config import get_active_config
    from tithe_config.bridges import build_calendar_service

    service = build_calendar_service(get_active_config())
"""

from __future__ import annotations

from tithe_config.schema import CalendarDisplayConfig
from tithe_kernel.domain.clock import Clock
from tithe_kernel.services.calendar_service import CalendarService


def build_calendar_service(
    config: CalendarDisplayConfig,
    clock: Clock | None = None,
) -> CalendarService:
    """Build a CalendarService carrying the configured display settings."""
    return CalendarService(
        clock,
        timezone=config.timezone,
        picker_year_span=config.picker_year_span,
        picker_label=config.picker_label,
        trend_months=config.trend_months,
    )
