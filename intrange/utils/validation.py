"""
Input validation utilities for intrange.

Used by the configuration layer to check values read from the
environment before they reach the rest of the library.
"""

from intrange.constants import LOG_LEVELS


def parse_bool(value: str, name: str) -> bool:
    """
    Parse a boolean flag from its string form.

    Args:
        value: Raw value ("true"/"false", "1"/"0", "yes"/"no", case-insensitive)
        name: Parameter name for error messages

    Raises:
        ValueError: If value is not a recognised flag
    """
    lowered = value.strip().lower()
    if lowered in ("true", "1", "yes", "on"):
        return True
    if lowered in ("false", "0", "no", "off", ""):
        return False
    raise ValueError(f"{name} must be a boolean flag, got '{value}'")


def check_log_level(level: str) -> None:
    """Reject log levels loguru does not define."""
    if level not in LOG_LEVELS:
        raise ValueError(
            f"log_level '{level}' is not a loguru level; use one of {', '.join(LOG_LEVELS)}"
        )


def check_max_display(value: int) -> None:
    """max_display caps how many elements the CLI prints, so it must be at least 1."""
    if value < 1:
        raise ValueError(f"max_display must be at least 1, got {value}")
