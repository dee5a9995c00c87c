"""Environment-driven settings for intrange.

Only the logging setup and the CLI read these; the range types themselves
take no configuration.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping, Optional

from intrange.constants import (
    DEFAULT_LOG_LEVEL,
    DEFAULT_MAX_DISPLAY,
    ENV_DEBUG,
    ENV_LOG_LEVEL,
    ENV_MAX_DISPLAY,
)
from intrange.types.errors import ConfigurationError, ErrorContext
from intrange.utils.validation import (
    check_log_level,
    check_max_display,
    parse_bool,
)


@dataclass(frozen=True)
class Settings:
    """Resolved settings."""

    debug: bool = False
    log_level: str = DEFAULT_LOG_LEVEL
    max_display: int = DEFAULT_MAX_DISPLAY

    def __post_init__(self) -> None:
        try:
            check_log_level(self.log_level)
            check_max_display(self.max_display)
        except ValueError as e:
            raise ConfigurationError(
                str(e),
                context=ErrorContext(operation="settings"),
                original_error=e,
            ) from e

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> Settings:
        """
        Load settings from environment variables.

        Args:
            environ: Mapping to read instead of os.environ

        Raises:
            ConfigurationError: If a variable holds an invalid value
        """
        env = os.environ if environ is None else environ
        try:
            debug = parse_bool(env.get(ENV_DEBUG, ""), ENV_DEBUG)
            max_display = int(env.get(ENV_MAX_DISPLAY, str(DEFAULT_MAX_DISPLAY)))
        except ValueError as e:
            raise ConfigurationError(
                f"invalid environment configuration: {e}",
                context=ErrorContext(operation="settings.from_env"),
                original_error=e,
            ) from e

        log_level = env.get(ENV_LOG_LEVEL, DEFAULT_LOG_LEVEL).upper()
        return cls(debug=debug, log_level=log_level, max_display=max_display)
