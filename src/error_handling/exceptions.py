"""Custom exception classes for the resume analyzer.

This module defines a hierarchy of custom exceptions so callers can branch on
the kind of failure instead of parsing message strings. Every exception
carries a user-facing message that is safe to show in the error banner.
"""

from typing import Optional

from src.constants.analysis_constants import AnalysisConstants
from src.constants.error_constants import ErrorConstants

from .models import ErrorCategory, ErrorContext, ErrorKind, ErrorSeverity, StructuredError


class AnalyzerError(Exception):
    """Base class for all application-specific errors."""

    kind: ErrorKind = ErrorKind.UNKNOWN
    default_user_message: str = ErrorConstants.MSG_UNKNOWN_ERROR

    def __init__(
        self,
        message: str,
        category: ErrorCategory = ErrorCategory.UNKNOWN,
        severity: ErrorSeverity = ErrorSeverity.MEDIUM,
        context: Optional[ErrorContext] = None,
        original_exception: Optional[Exception] = None,
        user_message: Optional[str] = None,
        **kwargs,
    ):
        super().__init__(message)
        self.message = message
        self.category = category
        self.severity = severity
        self.context = context or ErrorContext()
        self.original_exception = original_exception
        self.user_message = user_message or self.default_user_message
        self.context.additional_data.update(kwargs)

    def to_structured_error(self) -> StructuredError:
        """Convert to structured error format."""
        return StructuredError(
            message=self.message,
            category=self.category,
            severity=self.severity,
            kind=self.kind,
            context=self.context,
            user_message=self.user_message,
            original_exception=self.original_exception,
        )

    def with_context(self, **context_updates) -> "AnalyzerError":
        """Update the error context in place and return self."""
        for key, value in context_updates.items():
            if hasattr(self.context, key):
                setattr(self.context, key, value)
            else:
                self.context.additional_data[key] = value
        return self


class ValidationError(ValueError, AnalyzerError):
    """Raised when an input precondition is violated (e.g. empty text)."""

    kind = ErrorKind.VALIDATION
    default_user_message = ErrorConstants.MSG_MISSING_INPUT

    def __init__(self, message: str, field_name: Optional[str] = None, **kwargs):
        ValueError.__init__(self, message)
        AnalyzerError.__init__(
            self,
            message=message,
            category=ErrorCategory.VALIDATION,
            severity=ErrorSeverity.LOW,
            user_message=kwargs.pop("user_message", message),
            **kwargs,
        )
        if field_name:
            self.context.additional_data["field_name"] = field_name


class ServiceError(AnalyzerError):
    """Raised when the call to the analysis service fails at the transport or service level."""

    kind = ErrorKind.SERVICE
    default_user_message = ErrorConstants.MSG_SERVICE_FAILURE

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        detail: Optional[str] = None,
        category: ErrorCategory = ErrorCategory.API_ERROR,
        **kwargs,
    ):
        super().__init__(
            message=message,
            category=category,
            severity=ErrorSeverity.HIGH,
            user_message=detail or None,
            **kwargs,
        )
        self.status_code = status_code
        self.detail = detail
        if status_code:
            self.context.additional_data["status_code"] = status_code


class ResponseFormatError(ValueError, AnalyzerError):
    """Raised when the service answered but the payload fails schema validation."""

    kind = ErrorKind.RESPONSE_FORMAT
    default_user_message = ErrorConstants.MSG_UNEXPECTED_FORMAT

    def __init__(self, message: str, raw_response: str = "", **kwargs):
        ValueError.__init__(self, message)
        AnalyzerError.__init__(
            self,
            message=message,
            category=ErrorCategory.PARSING,
            severity=ErrorSeverity.HIGH,
            **kwargs,
        )
        self.raw_response = raw_response
        self.context.additional_data.update(
            {
                "raw_response_snippet": raw_response[
                    : AnalysisConstants.RAW_RESPONSE_SNIPPET_LENGTH
                ],
                "response_length": len(raw_response),
            }
        )


class UnknownError(AnalyzerError):
    """Raised for failures that cannot be classified as any other kind."""

    kind = ErrorKind.UNKNOWN
    default_user_message = ErrorConstants.MSG_UNKNOWN_ERROR

    def __init__(self, message: str, **kwargs):
        super().__init__(
            message=message,
            category=ErrorCategory.UNKNOWN,
            severity=ErrorSeverity.MEDIUM,
            **kwargs,
        )


class ConfigurationError(AnalyzerError):
    """Raised for configuration-related issues."""

    def __init__(self, message: str, config_key: Optional[str] = None, **kwargs):
        super().__init__(
            message=message,
            category=ErrorCategory.CONFIGURATION,
            severity=ErrorSeverity.CRITICAL,
            user_message=message,
            **kwargs,
        )
        if config_key:
            self.context.additional_data["config_key"] = config_key


# Centralized tuple of common, catchable exceptions to avoid capturing system-level exceptions.
CATCHABLE_EXCEPTIONS = (
    AnalyzerError,
    ValueError,
    TypeError,
    KeyError,
    IOError,
    IndexError,
    AttributeError,
    ConnectionError,
    RuntimeError,
)
