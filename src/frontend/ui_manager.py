"""UI management module for the Streamlit application.

This module provides a centralized UIManager class that handles all UI rendering,
keeping presentation concerns separate from the analysis logic.
"""

from typing import List, Optional

import streamlit as st

from src.config.logging_config import get_logger
from src.config.settings import AppConfig, get_config
from src.core.analysis_controller import AnalysisController
from src.core.state_manager import StateManager
from src.error_handling.boundaries import error_boundary
from src.error_handling.models import ErrorSeverity
from src.frontend.callbacks import build_analysis_controller
from src.frontend.ui_components import (
    display_footer,
    display_header,
    display_input_form,
    display_results_panel,
)
from src.models.view_models import DisplayMode

logger = get_logger(__name__)


class UIManager:
    """Handles all UI rendering for the analysis page.

    Every render reads one ViewState snapshot from the StateManager and hands it
    to the stateless display components.
    """

    def __init__(
        self,
        state_manager: StateManager,
        config: Optional[AppConfig] = None,
        controller: Optional[AnalysisController] = None,
    ):
        """Initialize the UIManager with a state manager.

        Args:
            state_manager: The StateManager instance for state access
            config: Application configuration, defaults to the global one
            controller: Runs pending analyses, defaults to one wired to the container
        """
        self.state = state_manager
        self.config = config or get_config()
        self.controller = controller or build_analysis_controller(state_manager)
        self._report_column = None

    def render_header(self):
        """Render the application header."""
        display_header(self.config.ui.page_title)

    def render_body(self) -> Optional[DisplayMode]:
        """Render the input column and the report column side by side."""
        view_state = self.state.snapshot()
        input_column, report_column = st.columns(2, gap="large")

        with input_column:
            with error_boundary("input_form", severity=ErrorSeverity.HIGH):
                display_input_form(view_state, self.config.ui)

        self._report_column = report_column
        mode = None
        with report_column:
            with error_boundary("results_panel", severity=ErrorSeverity.HIGH):
                mode = display_results_panel(view_state)
        return mode

    def render_debug_info(self):
        """Render debug information if enabled."""
        if not self.config.ui.show_debug_information:
            return
        with st.expander("Debug Information", expanded=False):
            view_state = self.state.snapshot()
            st.json(
                {
                    "environment": self.config.env.environment,
                    "model": self.config.llm.model_name,
                    "is_loading": view_state.is_loading,
                    "has_result": view_state.analysis_result is not None,
                    "error": view_state.error,
                    "resume_chars": len(view_state.resume_text),
                    "job_description_chars": len(view_state.job_description_text),
                }
            )

    def render_full_ui(self) -> Optional[DisplayMode]:
        """Render the complete page based on the current state."""
        self.render_header()
        mode = self.render_body()
        self.render_debug_info()
        display_footer()
        logger.debug("Rendered page (mode=%s)", mode.value if mode else None)

        if self.state.is_loading:
            self.process_pending_analysis()
        return mode

    def process_pending_analysis(self):
        """Send the pending request once the loading state is on screen, then rerun.

        The rerun draws the report or the error banner from the stored outcome.
        """
        with self._report_column:
            with st.spinner("Analyzing..."):
                outcome = self.controller.process_pending_analysis()
        if outcome is not None:
            logger.info(
                "Pending analysis finished (success=%s)",
                outcome.is_success,
                extra={"error_kind": outcome.error_kind.value if outcome.error_kind else None},
            )
        st.rerun()

    def show_startup_error(self, errors: List[str]):
        """Display configuration problems that prevent analysis.

        Args:
            errors: Human readable configuration problems
        """
        st.error("**Application Startup Failed:**\n\n" + "\n".join(f"- {e}" for e in errors))
        st.warning("Please check your configuration (.env file, API key) and restart.")
