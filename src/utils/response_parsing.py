"""Validation of raw analysis-service payloads.

The analysis service is asked for JSON matching ANALYSIS_RESPONSE_SCHEMA, but
nothing guarantees it complies, so every payload goes through
``parse_analysis_response`` before it can reach the report.
"""

import json
import re
from typing import Any

import pydantic

from src.config.logging_config import get_logger
from src.constants.analysis_constants import AnalysisConstants
from src.error_handling.exceptions import ResponseFormatError
from src.models.analysis_models import AnalysisResult

logger = get_logger(__name__)

_CODE_FENCE = re.compile(r"^\s*```(?:json)?\s*(.*?)\s*```\s*$", re.DOTALL | re.IGNORECASE)


def strip_code_fences(raw_text: str) -> str:
    """Remove a surrounding Markdown code fence, if the model added one."""
    match = _CODE_FENCE.match(raw_text)
    return (match.group(1) if match else raw_text).strip()


def validate_analysis_payload(payload: Any, raw_text: str = "") -> AnalysisResult:
    """
    Validate decoded structured data against the AnalysisResult contract.

    Args:
        payload: Decoded JSON value returned by the analysis service.
        raw_text: The original text, kept on the error for diagnostics.

    Returns:
        AnalysisResult: The validated result.

    Raises:
        ResponseFormatError: If the payload is not an object, lacks a field,
            has a wrong type, or carries a score outside 0-100.
    """
    if not isinstance(payload, dict):
        raise ResponseFormatError(
            f"Expected a JSON object, got {type(payload).__name__}",
            raw_response=raw_text,
        )

    try:
        return AnalysisResult.model_validate(payload)
    except pydantic.ValidationError as e:
        fields = sorted({".".join(str(loc) for loc in err["loc"]) for err in e.errors()})
        raise ResponseFormatError(
            f"Analysis payload failed validation on: {', '.join(fields)}",
            raw_response=raw_text,
            original_exception=e,
            invalid_fields=fields,
        ) from e


def parse_analysis_response(raw_text: str) -> AnalysisResult:
    """
    Parse the raw textual payload of the analysis service into an AnalysisResult.

    Raises:
        ResponseFormatError: If the text is empty, not JSON, or fails validation.
    """
    if not raw_text or not raw_text.strip():
        raise ResponseFormatError("Analysis service returned an empty payload")

    cleaned = strip_code_fences(raw_text)
    try:
        payload = json.loads(cleaned)
    except json.JSONDecodeError as e:
        logger.debug(
            "Undecodable analysis payload: %s",
            cleaned[: AnalysisConstants.RAW_RESPONSE_SNIPPET_LENGTH],
        )
        raise ResponseFormatError(
            f"Analysis payload is not valid JSON: {e.msg}",
            raw_response=raw_text,
            original_exception=e,
        ) from e

    return validate_analysis_payload(payload, raw_text=raw_text)
