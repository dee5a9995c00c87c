"""
Error handling system for intrange.

Provides structured error types with stable codes, a user-facing message,
severity and an optional context describing the failing operation.
"""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum, IntEnum
from typing import Any

from intrange.constants import utcnow


class ErrorCode(IntEnum):
    """Internal error codes for categorization."""

    # Argument conversion errors (1000-1999)
    CONVERSION_FAILED = 1001

    # Precondition violations (2000-2999)
    ZERO_STEP = 2001
    PRECONDITION_FAILED = 2002

    # Configuration errors (3000-3999)
    INVALID_CONFIG = 3001


class ErrorSeverity(str, Enum):
    """Error severity levels."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    CRITICAL = "critical"


@dataclass
class ErrorContext:
    """Context information for an error."""

    operation: str | None = None
    argument: str | None = None
    timestamp: datetime = field(default_factory=utcnow)
    additional_info: dict[str, Any] = field(default_factory=dict)


class IntRangeError(Exception):
    """Base error class for intrange."""

    def __init__(
        self,
        code: ErrorCode,
        message: str,
        user_message: str,
        severity: str = ErrorSeverity.MEDIUM,
        context: ErrorContext | None = None,
        original_error: Exception | None = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.severity = severity
        self.user_message = user_message
        self.context = context or ErrorContext()
        self.original_error = original_error

        self.context.timestamp = utcnow()

    def get_formatted_message(self) -> str:
        """Get a formatted error message for display to users."""
        parts = [
            f"[Error] {self.user_message}",
            f"   Code: {self.code.value}",
        ]

        if self.context.operation:
            parts.append(f"   Operation: {self.context.operation}")
        if self.context.argument:
            parts.append(f"   Argument: {self.context.argument}")
        if self.original_error:
            parts.append(f"   Cause: {self.original_error}")

        return "\n".join(parts)

    def to_dict(self) -> dict[str, Any]:
        """Convert to a JSON-serializable dictionary."""
        return {
            "name": self.__class__.__name__,
            "code": self.code.value,
            "message": str(self),
            "user_message": self.user_message,
            "severity": self.severity.value if isinstance(self.severity, Enum) else self.severity,
            "context": {
                "operation": self.context.operation,
                "argument": self.context.argument,
                "timestamp": self.context.timestamp.isoformat(),
                "additional_info": self.context.additional_info,
            },
            "original_error": str(self.original_error) if self.original_error else None,
        }


class ConversionError(IntRangeError):
    """A range argument could not be converted to an integer."""

    def __init__(
        self,
        message: str,
        user_message: str | None = None,
        context: ErrorContext | None = None,
        original_error: Exception | None = None,
    ) -> None:
        super().__init__(
            code=ErrorCode.CONVERSION_FAILED,
            message=message,
            user_message=user_message or "Range argument is not convertible to an integer.",
            severity=ErrorSeverity.MEDIUM,
            context=context,
            original_error=original_error,
        )


class PreconditionError(IntRangeError):
    """A caller broke a precondition of a range operation.

    These are programming errors; they are raised instead of returning a
    sentinel value.
    """

    def __init__(
        self,
        message: str,
        user_message: str | None = None,
        code: ErrorCode = ErrorCode.PRECONDITION_FAILED,
        context: ErrorContext | None = None,
    ) -> None:
        super().__init__(
            code=code,
            message=message,
            user_message=user_message or "Range precondition violated.",
            severity=ErrorSeverity.HIGH,
            context=context,
        )


class ZeroStepError(PreconditionError, ZeroDivisionError):
    """Raised when a strided length is computed with a zero step."""

    def __init__(self, context: ErrorContext | None = None) -> None:
        super().__init__(
            "divide by zero",
            user_message="Range step must not be zero.",
            code=ErrorCode.ZERO_STEP,
            context=context,
        )


class ConfigurationError(IntRangeError):
    """Error related to configuration issues."""

    def __init__(
        self,
        message: str,
        user_message: str | None = None,
        context: ErrorContext | None = None,
        original_error: Exception | None = None,
    ) -> None:
        super().__init__(
            code=ErrorCode.INVALID_CONFIG,
            message=message,
            user_message=user_message or "Configuration error occurred.",
            severity=ErrorSeverity.HIGH,
            context=context,
            original_error=original_error,
        )
