"""State management module for the Streamlit application.

This module provides a centralized StateManager class that encapsulates all
session state logic, providing a clean, testable interface for state management.
Rendering code never reads session state directly; it receives a ViewState
snapshot from ``StateManager.snapshot``.
"""

from typing import Any, Optional

import streamlit as st

from ..config.logging_config import get_logger
from ..models.analysis_models import AnalysisResult
from ..models.view_models import ViewState

logger = get_logger(__name__)

# Session state keys. The two input keys are also the text_area widget keys.
RESUME_TEXT_KEY = "resume_text_input"
JOB_DESCRIPTION_KEY = "job_description_input"
ANALYSIS_RESULT_KEY = "analysis_result"
IS_LOADING_KEY = "is_loading"
ERROR_KEY = "analysis_error"


class StateManager:
    """Handles all session state logic for the Streamlit app.

    This class provides a clean abstraction over Streamlit's session_state,
    ensuring consistent state initialization and providing type-safe access
    to the analysis page state.
    """

    def __init__(self):
        """Initialize the StateManager and set up default session state."""
        self._initialize_state()

    def _initialize_state(self):
        """Initializes the session state with default values."""
        defaults = {
            RESUME_TEXT_KEY: "",
            JOB_DESCRIPTION_KEY: "",
            ANALYSIS_RESULT_KEY: None,
            IS_LOADING_KEY: False,
            ERROR_KEY: None,
        }

        for key, value in defaults.items():
            if key not in st.session_state:
                st.session_state[key] = value
                logger.debug("Initialized session state key: %s", key)

    def get(self, key: str, default: Any = None) -> Any:
        """Gets a value from the session state."""
        return st.session_state.get(key, default)

    def set(self, key: str, value: Any) -> None:
        """Sets a value in the session state."""
        st.session_state[key] = value
        logger.debug("Set session state key: %s", key)

    # Properties for type-safe access to the page state

    @property
    def resume_text(self) -> str:
        """Get the resume text as typed by the user."""
        return self.get(RESUME_TEXT_KEY) or ""

    @resume_text.setter
    def resume_text(self, text: str) -> None:
        self.set(RESUME_TEXT_KEY, text)

    @property
    def job_description_text(self) -> str:
        """Get the job description text as typed by the user."""
        return self.get(JOB_DESCRIPTION_KEY) or ""

    @job_description_text.setter
    def job_description_text(self, text: str) -> None:
        self.set(JOB_DESCRIPTION_KEY, text)

    @property
    def analysis_result(self) -> Optional[AnalysisResult]:
        """Get the last successful analysis result."""
        return self.get(ANALYSIS_RESULT_KEY)

    @analysis_result.setter
    def analysis_result(self, result: Optional[AnalysisResult]) -> None:
        self.set(ANALYSIS_RESULT_KEY, result)

    @property
    def is_loading(self) -> bool:
        """Check if an analysis is currently in flight."""
        return bool(self.get(IS_LOADING_KEY, False))

    @is_loading.setter
    def is_loading(self, loading: bool) -> None:
        self.set(IS_LOADING_KEY, loading)

    @property
    def error(self) -> Optional[str]:
        """Get the message of the last failure."""
        return self.get(ERROR_KEY)

    @error.setter
    def error(self, message: Optional[str]) -> None:
        self.set(ERROR_KEY, message)

    def begin_analysis(self) -> None:
        """Enter the loading state, discarding the previous result and error."""
        self.is_loading = True
        self.error = None
        self.analysis_result = None

    def complete_analysis(self, result: AnalysisResult) -> None:
        """Store a successful result and leave the loading state."""
        self.analysis_result = result
        self.error = None
        self.is_loading = False

    def fail_analysis(self, message: str) -> None:
        """Store a failure message and reset the loading state for a retry."""
        self.error = message
        self.analysis_result = None
        self.is_loading = False

    def snapshot(self) -> ViewState:
        """Return an immutable snapshot of the page state for rendering."""
        return ViewState(
            resume_text=self.resume_text,
            job_description_text=self.job_description_text,
            analysis_result=self.analysis_result,
            is_loading=self.is_loading,
            error=self.error,
        )
