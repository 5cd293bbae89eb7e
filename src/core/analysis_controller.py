"""View controller for the analysis page.

Owns the request/response cycle between the form and the analysis service:
it checks the inputs, flips the loading flag, awaits the service and folds
every outcome back into session state.

A click only enters the loading state (``request_analysis``). The following
script run draws the disabled form and the loading panel, then sends the
request (``process_pending_analysis``) and reruns to show the outcome.
"""

import asyncio
from typing import Callable, Optional

from src.config.logging_config import get_logger
from src.constants.error_constants import ErrorConstants
from src.core.state_manager import StateManager
from src.error_handling.classification import classify_exception
from src.error_handling.exceptions import ValidationError
from src.models.analysis_models import AnalysisOutcome
from src.models.view_models import DisplayMode, ViewState
from src.services.analysis_service import AnalysisService

logger = get_logger(__name__)


def can_trigger(state: ViewState) -> bool:
    """The trigger is enabled only when idle and both inputs have content."""
    return not state.is_loading and state.has_inputs


def select_display_mode(state: ViewState) -> DisplayMode:
    """Pick the one thing the report panel shows for this state."""
    if state.is_loading:
        return DisplayMode.LOADING
    if state.analysis_result is None and not state.error:
        return DisplayMode.IDLE
    if state.error:
        return DisplayMode.ERROR
    return DisplayMode.REPORT


class AnalysisController:
    """Runs one analysis at a time on behalf of the UI."""

    def __init__(
        self,
        state_manager: StateManager,
        service_provider: Callable[[], AnalysisService],
    ):
        """
        Args:
            state_manager: Session state wrapper for the page.
            service_provider: Returns the AnalysisService to use; resolved lazily
                so configuration problems surface as a displayed error.
        """
        self.state = state_manager
        self.service_provider = service_provider

    def request_analysis(self) -> bool:
        """
        Accept the user's "Analyze" click and enter the loading state.

        The request itself is sent later by ``process_pending_analysis`` so the
        page can render the loading state in between.

        Returns:
            True when the loading state was entered, False when the click was
            ignored (already loading) or rejected (missing input).
        """
        if self.state.is_loading:
            logger.debug("Analysis already in progress; ignoring trigger")
            return False

        if not self.state.resume_text.strip() or not self.state.job_description_text.strip():
            self.state.error = ErrorConstants.MSG_MISSING_INPUT
            return False

        self.state.begin_analysis()
        logger.info("Analysis requested")
        return True

    def process_pending_analysis(self) -> Optional[AnalysisOutcome]:
        """
        Send the request for an analysis in the loading state and store its outcome.

        Returns:
            The outcome of the attempt, or None when no analysis is pending.
        """
        if not self.state.is_loading:
            return None

        logger.info("Analysis started")
        try:
            outcome = self._run(self.state.resume_text, self.state.job_description_text)
        except Exception as e:  # pylint: disable=broad-except
            logger.error("Unhandled analysis failure", exc_info=True)
            outcome = AnalysisOutcome.failure(classify_exception(e))

        if outcome.is_success:
            self.state.complete_analysis(outcome.result)
            logger.info("Analysis succeeded (match_score=%d)", outcome.result.match_score)
        else:
            self.state.fail_analysis(outcome.user_message)
            logger.error(
                "Analysis error (%s): %s", outcome.error_kind.value, outcome.error.message
            )

        return outcome

    def trigger_analysis(self) -> Optional[AnalysisOutcome]:
        """
        Request an analysis and run it to completion in one call.

        Returns:
            The outcome of the attempt, or None when an analysis is already in
            flight and the call is ignored.
        """
        if self.state.is_loading:
            logger.debug("Analysis already in progress; ignoring trigger")
            return None

        if not self.request_analysis():
            return AnalysisOutcome.failure(ValidationError(ErrorConstants.MSG_MISSING_INPUT))

        return self.process_pending_analysis()

    def _run(self, resume_text: str, job_description_text: str) -> AnalysisOutcome:
        service = self.service_provider()
        return asyncio.run(service.run(resume_text, job_description_text))
