"""
tithe_config -- single public entrypoint for calendar display configuration.

Responsibility:
    Provides the ONLY way to obtain configuration at runtime through
    ``get_active_config()``.  YAML loading is internal tooling and never
    exposed to callers.

Architecture position:
    Configuration sits above ``tithe_kernel``.  The kernel never imports
    from ``tithe_config``; callers pass configured values into kernel
    services.

Failure modes:
    - ``FileNotFoundError`` -- no configuration file with the requested name.
    - ``ValueError`` -- the configuration failed validation.

Audit relevance:
    Every successful ``get_active_config()`` call emits a
    ``TITHE_CONFIG_TRACE`` log entry with the config id, version and
    checksum.
"""

from __future__ import annotations

from pathlib import Path

from tithe_config.loader import load_yaml_file, parse_calendar_config, validate_config
from tithe_config.schema import CalendarDisplayConfig
from tithe_kernel.logging_config import get_logger

__all__ = ["CalendarDisplayConfig", "get_active_config"]

_logger = get_logger("config")

# Default configuration sets directory
_DEFAULT_CONFIG_DIR = Path(__file__).parent / "sets"


def get_active_config(
    config_dir: Path | None = None,
    name: str = "default",
) -> CalendarDisplayConfig:
    """The ONLY public configuration entrypoint.

    Args:
        config_dir: Override path to the configuration sets directory.
            Defaults to tithe_config/sets/.
        name: Configuration file stem; ``<config_dir>/<name>.yaml`` is read.

    Returns:
        A validated, frozen ``CalendarDisplayConfig``.

    Raises:
        FileNotFoundError: If the configuration file does not exist.
        ValueError: If configuration validation fails.
    """
    sets_dir = config_dir or _DEFAULT_CONFIG_DIR
    path = sets_dir / f"{name}.yaml"
    if not path.is_file():
        raise FileNotFoundError(f"Configuration file not found: {path}")

    config = parse_calendar_config(load_yaml_file(path))

    errors = validate_config(config)
    if errors:
        raise ValueError(
            "Configuration validation failed:\n"
            + "\n".join(f"  - {e}" for e in errors)
        )

    _logger.info(
        "TITHE_CONFIG_TRACE",
        extra={
            "trace_type": "TITHE_CONFIG_TRACE",
            "config_id": config.config_id,
            "config_version": config.version,
            "checksum": config.checksum,
            "timezone": config.timezone,
        },
    )
    return config
