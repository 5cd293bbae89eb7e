# In src/frontend/callbacks.py
from src.config.logging_config import get_logger
from src.core.analysis_controller import AnalysisController
from src.core.container import get_container
from src.core.state_manager import StateManager

# Initialize logger
logger = get_logger(__name__)


def build_analysis_controller(state_manager: StateManager) -> AnalysisController:
    """Wire a controller to the given session state and the container's service."""
    return AnalysisController(
        state_manager,
        service_provider=lambda: get_container().analysis_service(),
    )


def handle_analyze() -> bool:
    """
    on_click handler for the "Analyze Resume" button.

    Only enters the loading state. The script run that follows the click draws
    the disabled form and the loading panel, and the UIManager then sends the
    request.
    """
    accepted = build_analysis_controller(StateManager()).request_analysis()
    if accepted:
        logger.info("Analyze clicked; analysis pending")
    else:
        logger.info("Analyze click not accepted")
    return accepted
