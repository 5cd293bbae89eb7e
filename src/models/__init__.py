"""Models module for the resume analyzer."""

from src.models.analysis_models import (
    ANALYSIS_RESPONSE_SCHEMA,
    AnalysisOutcome,
    AnalysisResult,
)
from src.models.view_models import DisplayMode, ViewState

__all__ = [
    "ANALYSIS_RESPONSE_SCHEMA",
    "AnalysisOutcome",
    "AnalysisResult",
    "DisplayMode",
    "ViewState",
]
