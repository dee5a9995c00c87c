"""
intrange type definitions.

This module exports the error types shared by the range constructs,
the construction helpers and the CLI.
"""

from .errors import (
    ConfigurationError,
    ConversionError,
    ErrorCode,
    ErrorContext,
    ErrorSeverity,
    IntRangeError,
    PreconditionError,
    ZeroStepError,
)

__all__ = [
    "ErrorCode",
    "ErrorSeverity",
    "ErrorContext",
    "IntRangeError",
    "ConversionError",
    "PreconditionError",
    "ZeroStepError",
    "ConfigurationError",
]
