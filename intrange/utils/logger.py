"""
Logging utility for intrange.

The range constructs never log on their hot paths (next, length,
indexed_get). Construction failures and CLI actions log at DEBUG through
the shared loguru logger exported here.

Sink configuration:
- The library leaves loguru's default sink alone on import.
- configure_logging() replaces it with a single STDERR sink at the
  configured level, so CLI output on STDOUT stays clean.
"""

import sys
from typing import TYPE_CHECKING

from loguru import logger as loguru_logger

if TYPE_CHECKING:
    from intrange.config import Settings

# ============================================================================
# Logger Configuration
# ============================================================================


def configure_logging(settings: "Settings") -> int:
    """
    Install a single STDERR sink at the level given by settings.

    Args:
        settings: Loaded settings; debug mode forces the DEBUG level

    Returns:
        The loguru handler id of the installed sink
    """
    level = "DEBUG" if settings.debug else settings.log_level
    loguru_logger.remove()
    # Resolve sys.stderr per message so redirected streams are honoured.
    handler_id = loguru_logger.add(
        lambda message: sys.stderr.write(message),
        level=level,
        format="<green>{time:HH:mm:ss}</green> | <level>{level: <8}</level> | {name}:{function} - {message}",
    )
    loguru_logger.debug("Logging configured at level {}", level)
    return handler_id


# Export loguru logger for direct use
logger = loguru_logger
