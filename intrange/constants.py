"""Shared constants and helpers for intrange.

Centralizes environment variable names, configuration defaults and
timezone-aware datetime helpers.
"""

from datetime import datetime, timezone


def utcnow() -> datetime:
    """Return the current UTC time as a timezone-aware datetime.

    Can be used directly as a ``default_factory`` in dataclass fields.
    """
    return datetime.now(timezone.utc)


# Environment variables read by intrange.config.Settings.from_env()
ENV_DEBUG = "INTRANGE_DEBUG"
ENV_LOG_LEVEL = "INTRANGE_LOG_LEVEL"
ENV_MAX_DISPLAY = "INTRANGE_MAX_DISPLAY"

DEFAULT_LOG_LEVEL = "WARNING"

# Upper bound on the number of elements the CLI prints for one range.
DEFAULT_MAX_DISPLAY: int = 1000

LOG_LEVELS: list[str] = ["TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL"]
