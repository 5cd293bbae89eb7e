# In src/frontend/ui_components.py
import streamlit as st

from src.config.logging_config import get_logger
from src.config.settings import UIConfig
from src.constants.analysis_constants import AnalysisConstants
from src.core.analysis_controller import can_trigger, select_display_mode
from src.core.state_manager import JOB_DESCRIPTION_KEY, RESUME_TEXT_KEY
from src.frontend.callbacks import handle_analyze
from src.models.analysis_models import AnalysisResult
from src.models.view_models import DisplayMode, ViewState

# Initialize logger
logger = get_logger(__name__)

EMPTY_SECTION_TEXT = "None identified."


def describe_match_score(score: int) -> str:
    """Qualitative band for a match score."""
    if score >= AnalysisConstants.STRONG_MATCH_THRESHOLD:
        return AnalysisConstants.STRONG_MATCH_LABEL
    if score >= AnalysisConstants.MODERATE_MATCH_THRESHOLD:
        return AnalysisConstants.MODERATE_MATCH_LABEL
    return AnalysisConstants.LOW_MATCH_LABEL


def display_header(page_title: str):
    """Renders the page header."""
    st.title(f"✨ {page_title}")
    st.markdown(
        "Paste your resume and a job description to see how well they match, "
        "which keywords are missing and how to improve."
    )
    st.divider()


def display_input_form(state: ViewState, ui_config: UIConfig):
    """Renders the resume and job description inputs with the trigger button."""
    st.subheader("📄 Your Resume")
    st.text_area(
        "Your Resume",
        key=RESUME_TEXT_KEY,
        height=ui_config.text_area_height,
        placeholder="Paste your full resume text here...",
        label_visibility="collapsed",
        disabled=state.is_loading,
    )

    st.subheader("💼 Job Description")
    st.text_area(
        "Job Description",
        key=JOB_DESCRIPTION_KEY,
        height=ui_config.text_area_height,
        placeholder="Paste the job description here...",
        label_visibility="collapsed",
        disabled=state.is_loading,
    )

    st.button(
        "Analyzing..." if state.is_loading else "✨ Analyze Resume",
        type="primary",
        use_container_width=True,
        disabled=not can_trigger(state),
        on_click=handle_analyze,
    )


def display_loading_indicator():
    """Renders the in-flight indicator."""
    st.info("⏳ Your resume is being analyzed. This may take a few moments.")


def display_idle_placeholder():
    """Renders the placeholder shown before the first analysis."""
    st.markdown("#### Your resume analysis will appear here.")
    st.caption('Fill in your resume and the job description, then click "Analyze Resume".')


def display_error_banner(message: str):
    """Renders the single error banner."""
    st.error(f"⚠️ {message}")


def _display_section(title: str, items: list):
    st.markdown(f"#### {title}")
    if not items:
        st.caption(EMPTY_SECTION_TEXT)
        return
    st.markdown("\n".join(f"- {item}" for item in items))


def display_report(result: AnalysisResult):
    """Renders the analysis report: score first, then the three lists in received order."""
    st.metric(
        "Match Score",
        f"{result.match_score}%",
        describe_match_score(result.match_score),
        delta_color="off",
    )
    st.progress(result.match_score / AnalysisConstants.MAX_MATCH_SCORE)

    _display_section("✅ Strengths", result.strengths)
    _display_section("🔑 Missing Keywords", result.missing_keywords)
    _display_section("💡 Suggestions", result.suggestions)


def display_results_panel(state: ViewState):
    """Renders exactly one of: loading indicator, idle placeholder, error banner, report."""
    st.header("Analysis Report")
    mode = select_display_mode(state)
    if mode is DisplayMode.LOADING:
        display_loading_indicator()
    elif mode is DisplayMode.IDLE:
        display_idle_placeholder()
    elif mode is DisplayMode.ERROR:
        display_error_banner(state.error)
    else:
        display_report(state.analysis_result)
    return mode


def display_footer():
    """Renders the page footer."""
    st.divider()
    st.caption("Powered by Gemini")
