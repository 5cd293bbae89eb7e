#!/usr/bin/env python3
"""
Main launcher for the AI Resume Analyzer Streamlit application.

Run with ``streamlit run app.py``.
"""
import streamlit as st

from src.config.logging_config import get_logger, setup_logging
from src.config.settings import get_config
from src.core.state_manager import StateManager
from src.error_handling.boundaries import safe_streamlit_component
from src.error_handling.models import ErrorSeverity
from src.frontend.ui_manager import UIManager

_config = get_config()

# Page configuration - MUST be first Streamlit command
st.set_page_config(
    page_title=_config.ui.page_title,
    page_icon=_config.ui.page_icon,
    layout=_config.ui.layout,
)

setup_logging()
logger = get_logger(__name__)


@safe_streamlit_component(component_name="main_app", severity=ErrorSeverity.CRITICAL)
def main():
    """Main application entry point."""
    ui_manager = UIManager(state_manager=StateManager(), config=_config)

    validation_errors = _config.validate()
    if validation_errors:
        logger.error("Configuration validation failed: %s", "; ".join(validation_errors))
        ui_manager.render_header()
        ui_manager.show_startup_error(validation_errors)
        st.stop()
        return

    ui_manager.render_full_ui()


if __name__ == "__main__":
    main()
