"""Data models for the resume/job description analysis."""

from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from src.constants.analysis_constants import AnalysisConstants
from src.error_handling.exceptions import AnalyzerError
from src.error_handling.models import ErrorKind


class AnalysisResult(BaseModel):
    """Structured comparison of a resume against a job description.

    Field aliases match the camelCase names the analysis service is asked to
    return; the Python attribute names are used everywhere else.
    """

    model_config = ConfigDict(populate_by_name=True, frozen=True, extra="ignore")

    match_score: int = Field(
        ...,
        alias=AnalysisConstants.FIELD_MATCH_SCORE,
        ge=AnalysisConstants.MIN_MATCH_SCORE,
        le=AnalysisConstants.MAX_MATCH_SCORE,
        description="Fitness of the resume for the job, 0-100",
    )
    strengths: List[str] = Field(
        ..., description="Resume strengths relevant to the job, in display order"
    )
    missing_keywords: List[str] = Field(
        ...,
        alias=AnalysisConstants.FIELD_MISSING_KEYWORDS,
        description="Skills or keywords in the job description that the resume lacks",
    )
    suggestions: List[str] = Field(..., description="Actionable improvements")

    @field_validator("match_score", mode="before")
    @classmethod
    def _require_numeric_score(cls, value: Any) -> Any:
        # bool is an int subclass and numeric strings would be coerced otherwise
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise ValueError("matchScore must be a number")
        return value


# Structured output schema sent to Gemini alongside the prompt.
ANALYSIS_RESPONSE_SCHEMA: Dict[str, Any] = {
    "type": "OBJECT",
    "properties": {
        AnalysisConstants.FIELD_MATCH_SCORE: {
            "type": "NUMBER",
            "description": "A score from 0 to 100 for how well the resume matches the job description.",
        },
        AnalysisConstants.FIELD_STRENGTHS: {
            "type": "ARRAY",
            "items": {"type": "STRING"},
            "description": "Key strengths of the resume relevant to the job description.",
        },
        AnalysisConstants.FIELD_MISSING_KEYWORDS: {
            "type": "ARRAY",
            "items": {"type": "STRING"},
            "description": "Skills or keywords from the job description missing in the resume.",
        },
        AnalysisConstants.FIELD_SUGGESTIONS: {
            "type": "ARRAY",
            "items": {"type": "STRING"},
            "description": "Actionable suggestions to improve the resume for this job.",
        },
    },
    "required": [
        AnalysisConstants.FIELD_MATCH_SCORE,
        AnalysisConstants.FIELD_STRENGTHS,
        AnalysisConstants.FIELD_MISSING_KEYWORDS,
        AnalysisConstants.FIELD_SUGGESTIONS,
    ],
}


@dataclass(frozen=True)
class AnalysisOutcome:
    """Either a successful AnalysisResult or the error that prevented one."""

    result: Optional[AnalysisResult] = None
    error: Optional[AnalyzerError] = None

    def __post_init__(self):
        if (self.result is None) == (self.error is None):
            raise ValueError("AnalysisOutcome needs exactly one of result or error")

    @classmethod
    def success(cls, result: AnalysisResult) -> "AnalysisOutcome":
        return cls(result=result)

    @classmethod
    def failure(cls, error: AnalyzerError) -> "AnalysisOutcome":
        return cls(error=error)

    @property
    def is_success(self) -> bool:
        return self.result is not None

    @property
    def error_kind(self) -> Optional[ErrorKind]:
        return self.error.kind if self.error is not None else None

    @property
    def user_message(self) -> Optional[str]:
        return self.error.user_message if self.error is not None else None
