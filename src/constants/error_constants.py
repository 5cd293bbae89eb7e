"""Error handling constants for centralized error management.

This module contains constants used across error handling operations
to eliminate hardcoded values and improve consistency.
"""

from typing import Final


class ErrorConstants:
    """Constants for error handling and exception management."""

    # User-facing messages
    MSG_MISSING_INPUT: Final[str] = "Please provide both a resume and a job description."
    MSG_SERVICE_FAILURE: Final[str] = "Failed to analyze. Please try again."
    MSG_UNEXPECTED_FORMAT: Final[str] = "The analysis service returned an unexpected format."
    MSG_UNKNOWN_ERROR: Final[str] = "An unknown error occurred."
    MSG_MISSING_API_KEY: Final[str] = (
        "Gemini API key is not configured. "
        "Please set GEMINI_API_KEY in your .env file or environment."
    )
    MSG_EMPTY_RESPONSE: Final[str] = "The analysis service returned an empty response."

    # Network error patterns
    NETWORK_ERROR_PATTERNS: Final[list] = [
        r"connection.?error",
        r"network.?error",
        r"connection.?refused",
        r"connection.?reset",
        r"dns.?resolution",
        r"ssl.?error",
    ]

    # Timeout error patterns
    TIMEOUT_ERROR_PATTERNS: Final[list] = [
        r"time.?out",
        r"timed.?out",
        r"deadline.?exceeded",
    ]
