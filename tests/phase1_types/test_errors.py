"""
Phase 1 Tests: Error Types

These tests verify the error hierarchy:
- Codes and severities per error class
- Formatting for display
- Serialization to dict
"""

import pytest

from intrange.types import (
    ConfigurationError,
    ConversionError,
    ErrorCode,
    ErrorContext,
    ErrorSeverity,
    IntRangeError,
    PreconditionError,
    ZeroStepError,
)


class TestConversionError:
    """Tests for ConversionError."""

    def test_defaults(self):
        """ConversionError carries its code and a default user message."""
        error = ConversionError("cannot convert end='x' to int")
        assert error.code == ErrorCode.CONVERSION_FAILED
        assert error.severity == ErrorSeverity.MEDIUM
        assert "not convertible" in error.user_message
        assert str(error) == "cannot convert end='x' to int"

    def test_is_intrange_error(self):
        """ConversionError derives from IntRangeError."""
        assert isinstance(ConversionError("boom"), IntRangeError)

    def test_formatted_message_includes_context(self):
        """get_formatted_message lists operation, argument and cause."""
        cause = ValueError("invalid literal for int() with base 10: 'x'")
        error = ConversionError(
            "cannot convert",
            context=ErrorContext(operation="range", argument="step"),
            original_error=cause,
        )
        message = error.get_formatted_message()
        assert "[Error]" in message
        assert "Code: 1001" in message
        assert "Operation: range" in message
        assert "Argument: step" in message
        assert "Cause: invalid literal" in message

    def test_to_dict(self):
        """to_dict produces a JSON-friendly structure."""
        error = ConversionError(
            "cannot convert",
            context=ErrorContext(operation="range", argument="end"),
        )
        data = error.to_dict()
        assert data["name"] == "ConversionError"
        assert data["code"] == 1001
        assert data["severity"] == "medium"
        assert data["context"]["argument"] == "end"
        assert data["original_error"] is None
        assert isinstance(data["context"]["timestamp"], str)


class TestZeroStepError:
    """Tests for ZeroStepError."""

    def test_message_names_precondition(self):
        """The diagnostic reads 'divide by zero'."""
        error = ZeroStepError()
        assert str(error) == "divide by zero"
        assert error.code == ErrorCode.ZERO_STEP
        assert error.severity == ErrorSeverity.HIGH

    def test_is_zero_division_error(self):
        """ZeroStepError can be caught as a plain ZeroDivisionError."""
        with pytest.raises(ZeroDivisionError, match="divide by zero"):
            raise ZeroStepError()

    def test_is_precondition_error(self):
        """ZeroStepError is a PreconditionError."""
        assert isinstance(ZeroStepError(), PreconditionError)


class TestConfigurationError:
    """Tests for ConfigurationError."""

    def test_defaults(self):
        error = ConfigurationError("bad level")
        assert error.code == ErrorCode.INVALID_CONFIG
        assert error.user_message == "Configuration error occurred."
