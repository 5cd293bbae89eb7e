"""Immutable view-state models handed to the rendering functions."""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from src.models.analysis_models import AnalysisResult


class DisplayMode(str, Enum):
    """What the report panel shows."""

    LOADING = "loading"
    IDLE = "idle"
    ERROR = "error"
    REPORT = "report"


@dataclass(frozen=True)
class ViewState:
    """Snapshot of the analysis page state for one render pass."""

    resume_text: str = ""
    job_description_text: str = ""
    analysis_result: Optional[AnalysisResult] = None
    is_loading: bool = False
    error: Optional[str] = None

    @property
    def has_inputs(self) -> bool:
        return bool(self.resume_text.strip()) and bool(self.job_description_text.strip())
