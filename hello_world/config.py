"""Runtime settings resolved from command-line values or the environment."""
from __future__ import annotations

import logging
from typing import Optional

OUTPUT_FORMATS = ("json", "yaml")
DEFAULT_OUTPUT_FORMAT = "json"

FORMAT_ENV_VAR = "HELLO_WORLD_FORMAT"
LOG_LEVEL_ENV_VAR = "HELLO_WORLD_LOG_LEVEL"

_LOG_LEVELS = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}


def resolve_output_format(value: Optional[str]) -> str:
    """Resolve the rendering format, defaulting to JSON."""
    if value is None or not value.strip():
        return DEFAULT_OUTPUT_FORMAT
    normalized = value.strip().lower()
    if normalized not in OUTPUT_FORMATS:
        raise ValueError(
            f"Unsupported output format '{value}'; expected one of: {', '.join(OUTPUT_FORMATS)}"
        )
    return normalized


def resolve_log_level(value: Optional[str]) -> int:
    """Resolve a logging level name such as ``"debug"``."""
    if value is None or not value.strip():
        return logging.INFO
    try:
        return _LOG_LEVELS[value.strip().upper()]
    except KeyError as exc:
        raise ValueError(f"Unknown log level '{value}'") from exc


__all__ = [
    "DEFAULT_OUTPUT_FORMAT",
    "FORMAT_ENV_VAR",
    "LOG_LEVEL_ENV_VAR",
    "OUTPUT_FORMATS",
    "resolve_log_level",
    "resolve_output_format",
]
