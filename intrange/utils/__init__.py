"""
intrange utility modules.

- Logging (loguru, STDERR sink configuration)
- Validation of configuration input
"""

# Logger
from .logger import (
    configure_logging,
    logger,
)

# Validation
from .validation import (
    check_log_level,
    check_max_display,
    parse_bool,
)

__all__ = [
    # Logger
    "configure_logging",
    "logger",
    # Validation
    "check_log_level",
    "check_max_display",
    "parse_bool",
]
