"""Utility helpers for the resume analyzer."""

from src.utils.response_parsing import (
    parse_analysis_response,
    strip_code_fences,
    validate_analysis_payload,
)

__all__ = [
    "parse_analysis_response",
    "strip_code_fences",
    "validate_analysis_payload",
]
