"""
Configuration Loader (``tithe_config.loader``).

Responsibility
--------------
Loads a YAML configuration file and parses it into a frozen
``CalendarDisplayConfig``.  Runtime callers go through
``tithe_config.get_active_config()`` instead of calling this directly.

Invariants enforced
-------------------
* Every parsed object is a frozen dataclass from ``schema.py``.
* ``compute_checksum`` produces a deterministic SHA-256 hash of the
  parsed data for configuration identity and change detection.

Failure modes
-------------
* Missing YAML file  -> ``FileNotFoundError`` propagates.
* Malformed YAML  -> ``yaml.YAMLError`` propagates.
* Missing ``config_id``/``version``  -> ``KeyError`` propagates.
* Invalid values  -> ``ValueError`` from ``validate_config``.
"""

from __future__ import annotations

import hashlib
import json
from pathlib import Path
from typing import Any
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

import yaml

from tithe_config.schema import DEFAULT_TIMEZONE, CalendarDisplayConfig


def load_yaml_file(path: Path) -> dict[str, Any]:
    """
    Load a single YAML file and return its contents as a dict.

    Raises:
        FileNotFoundError: if the file does not exist.
        yaml.YAMLError: if the file contains invalid YAML.
        ValueError: if the document is not a mapping.
    """
    with open(path) as f:
        data = yaml.safe_load(f) or {}
    if not isinstance(data, dict):
        raise ValueError(f"Configuration root must be a mapping: {path}")
    return data


def parse_calendar_config(data: dict[str, Any]) -> CalendarDisplayConfig:
    """
    Parse a ``CalendarDisplayConfig`` from a dict.

    Preconditions:
        - ``data`` has ``config_id`` and ``version``.  The ``picker`` and
          ``dashboard`` sections are optional and fall back to defaults.
    Postconditions:
        - ``checksum`` is the ``compute_checksum`` of ``data``.
    """
    picker = data.get("picker") or {}
    dashboard = data.get("dashboard") or {}
    return CalendarDisplayConfig(
        config_id=str(data["config_id"]),
        version=int(data["version"]),
        timezone=str(data.get("timezone", DEFAULT_TIMEZONE)),
        picker_year_span=int(picker.get("year_span", 3)),
        picker_label=str(picker.get("label", "For Month")),
        trend_months=int(dashboard.get("trend_months", 12)),
        checksum=compute_checksum(data),
    )


def validate_config(config: CalendarDisplayConfig) -> list[str]:
    """Return a list of validation errors (empty when valid)."""
    errors: list[str] = []
    try:
        ZoneInfo(config.timezone)
    except (ZoneInfoNotFoundError, ValueError):
        errors.append(f"Unknown timezone: {config.timezone!r}")
    if config.picker_year_span < 1:
        errors.append(
            f"picker.year_span must be at least 1, got {config.picker_year_span}"
        )
    if config.trend_months < 1:
        errors.append(
            f"dashboard.trend_months must be at least 1, got {config.trend_months}"
        )
    if not config.picker_label.strip():
        errors.append("picker.label must not be empty")
    return errors


def compute_checksum(data: dict[str, Any]) -> str:
    """
    Compute SHA-256 checksum of canonical JSON serialization.

    Identical ``data`` always produces identical checksums.
    """
    canonical = json.dumps(data, sort_keys=True, default=str)
    return hashlib.sha256(canonical.encode()).hexdigest()
