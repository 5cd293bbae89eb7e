"""Error handling module for the resume analyzer."""

from .exceptions import (
    CATCHABLE_EXCEPTIONS,
    AnalyzerError,
    ConfigurationError,
    ResponseFormatError,
    ServiceError,
    UnknownError,
    ValidationError,
)
# StreamlitErrorBoundary imported lazily to avoid circular dependency
from .models import (
    ErrorCategory,
    ErrorContext,
    ErrorKind,
    ErrorSeverity,
    StructuredError,
)

__all__ = [
    # Exceptions
    "CATCHABLE_EXCEPTIONS",
    "AnalyzerError",
    "ConfigurationError",
    "ResponseFormatError",
    "ServiceError",
    "UnknownError",
    "ValidationError",
    # Models
    "ErrorCategory",
    "ErrorContext",
    "ErrorKind",
    "ErrorSeverity",
    "StructuredError",
]
