"""Centralized error classification utilities.

Maps raw exceptions raised while talking to the analysis service onto the
application's error taxonomy.
"""

import asyncio
import json
import re

import pydantic
from google.api_core import exceptions as google_exceptions
from google.generativeai.types import BlockedPromptException, StopCandidateException

from src.constants.error_constants import ErrorConstants
from src.error_handling.exceptions import (
    CATCHABLE_EXCEPTIONS,
    AnalyzerError,
    ResponseFormatError,
    ServiceError,
    UnknownError,
)
from src.error_handling.models import ErrorCategory

# Provider exceptions that do not derive from the built-in types in CATCHABLE_EXCEPTIONS.
SERVICE_EXCEPTIONS = (
    google_exceptions.GoogleAPIError,
    BlockedPromptException,
    StopCandidateException,
)

# asyncio.TimeoutError only aliases the builtin TimeoutError from Python 3.11 on.
ANALYSIS_EXCEPTIONS = CATCHABLE_EXCEPTIONS + SERVICE_EXCEPTIONS + (asyncio.TimeoutError,)


def is_network_error(exception: Exception) -> bool:
    """
    Checks if an exception is a network-related error.

    Args:
        exception: The exception to classify

    Returns:
        bool: True if this is a network error, False otherwise
    """
    if isinstance(exception, (ConnectionError, google_exceptions.ServiceUnavailable)):
        return True

    error_message = str(exception).lower()
    return any(
        re.search(pattern, error_message, re.IGNORECASE)
        for pattern in ErrorConstants.NETWORK_ERROR_PATTERNS
    )


def is_timeout_error(exception: Exception) -> bool:
    """
    Checks if an exception is a timeout error.

    Args:
        exception: The exception to classify

    Returns:
        bool: True if this is a timeout error, False otherwise
    """
    if isinstance(
        exception, (TimeoutError, asyncio.TimeoutError, google_exceptions.DeadlineExceeded)
    ):
        return True

    error_message = str(exception).lower()
    return any(
        re.search(pattern, error_message, re.IGNORECASE)
        for pattern in ErrorConstants.TIMEOUT_ERROR_PATTERNS
    )


def _service_detail(exception: google_exceptions.GoogleAPICallError) -> str:
    """Return the human-readable detail the service attached to an API error."""
    return (getattr(exception, "message", None) or str(exception)).strip()


def classify_exception(exception: Exception) -> AnalyzerError:
    """
    Converts any exception into one of the four analysis failure kinds.

    Application errors pass through untouched. Transport and service failures
    become ServiceError, payload decoding failures become ResponseFormatError,
    and everything else becomes UnknownError.

    Args:
        exception: The exception to classify.

    Returns:
        An AnalyzerError subclass instance wrapping the original exception.
    """
    if isinstance(exception, AnalyzerError):
        return exception

    if isinstance(exception, google_exceptions.GoogleAPICallError):
        category = ErrorCategory.API_ERROR
        if is_timeout_error(exception):
            category = ErrorCategory.TIMEOUT
        elif is_network_error(exception):
            category = ErrorCategory.NETWORK
        status_code = exception.code if isinstance(exception.code, int) else None
        return ServiceError(
            f"Analysis service call failed: {exception}",
            status_code=status_code,
            detail=_service_detail(exception) or None,
            category=category,
            original_exception=exception,
        )

    if isinstance(exception, SERVICE_EXCEPTIONS):
        return ServiceError(
            f"Analysis service error: {type(exception).__name__}: {exception}",
            original_exception=exception,
        )

    if isinstance(exception, (json.JSONDecodeError, pydantic.ValidationError)):
        return ResponseFormatError(
            f"Analysis response failed validation: {exception}",
            original_exception=exception,
        )

    if is_timeout_error(exception):
        return ServiceError(
            f"Analysis service call timed out: {exception}",
            category=ErrorCategory.TIMEOUT,
            original_exception=exception,
        )

    if is_network_error(exception):
        return ServiceError(
            f"Analysis service is unreachable: {exception}",
            category=ErrorCategory.NETWORK,
            original_exception=exception,
        )

    return UnknownError(
        f"Unexpected analysis failure: {type(exception).__name__}: {exception}",
        original_exception=exception,
    )
