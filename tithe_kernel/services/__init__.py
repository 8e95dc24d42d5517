"""Kernel services -- imperative shell over the pure calendar domain."""

from tithe_kernel.services.calendar_service import CalendarService

__all__ = ["CalendarService"]
