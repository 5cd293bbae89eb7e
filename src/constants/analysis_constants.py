"""Analysis-related constants for resume and job description matching.

This module contains constants used for the analysis request and the
rendering of its report.
"""

from typing import Final


class AnalysisConstants:
    """Constants for resume analysis and job matching operations."""

    # Match score bounds
    MIN_MATCH_SCORE: Final[int] = 0
    MAX_MATCH_SCORE: Final[int] = 100

    # Score bands used by the report
    STRONG_MATCH_THRESHOLD: Final[int] = 75
    MODERATE_MATCH_THRESHOLD: Final[int] = 50
    STRONG_MATCH_LABEL: Final[str] = "Strong match"
    MODERATE_MATCH_LABEL: Final[str] = "Moderate match"
    LOW_MATCH_LABEL: Final[str] = "Low match"

    # Wire field names of the structured response
    FIELD_MATCH_SCORE: Final[str] = "matchScore"
    FIELD_STRENGTHS: Final[str] = "strengths"
    FIELD_MISSING_KEYWORDS: Final[str] = "missingKeywords"
    FIELD_SUGGESTIONS: Final[str] = "suggestions"

    RESPONSE_MIME_TYPE: Final[str] = "application/json"

    # Length of the raw response snippet kept on parsing errors
    RAW_RESPONSE_SNIPPET_LENGTH: Final[int] = 200
