"""Tests for the StateManager session state wrapper."""

from src.core.state_manager import (
    ANALYSIS_RESULT_KEY,
    ERROR_KEY,
    IS_LOADING_KEY,
    JOB_DESCRIPTION_KEY,
    RESUME_TEXT_KEY,
    StateManager,
)
from src.models.view_models import ViewState


def test_initializes_defaults(session_state):
    StateManager()

    assert session_state == {
        RESUME_TEXT_KEY: "",
        JOB_DESCRIPTION_KEY: "",
        ANALYSIS_RESULT_KEY: None,
        IS_LOADING_KEY: False,
        ERROR_KEY: None,
    }


def test_existing_values_survive_reinitialization(session_state):
    session_state[RESUME_TEXT_KEY] = "typed resume"
    session_state[IS_LOADING_KEY] = True

    manager = StateManager()

    assert manager.resume_text == "typed resume"
    assert manager.is_loading is True


def test_begin_analysis_clears_previous_outcome(session_state, analysis_result):
    manager = StateManager()
    manager.analysis_result = analysis_result
    manager.error = "old error"

    manager.begin_analysis()

    assert manager.is_loading is True
    assert manager.analysis_result is None
    assert manager.error is None


def test_complete_analysis(session_state, analysis_result):
    manager = StateManager()
    manager.begin_analysis()

    manager.complete_analysis(analysis_result)

    assert manager.analysis_result is analysis_result
    assert manager.is_loading is False
    assert manager.error is None


def test_fail_analysis_keeps_inputs(session_state, analysis_result):
    manager = StateManager()
    manager.resume_text = "resume"
    manager.job_description_text = "job"
    manager.analysis_result = analysis_result
    manager.begin_analysis()

    manager.fail_analysis("Failed to analyze. Please try again.")

    assert manager.error == "Failed to analyze. Please try again."
    assert manager.analysis_result is None
    assert manager.is_loading is False
    assert manager.resume_text == "resume"
    assert manager.job_description_text == "job"


def test_snapshot(session_state, analysis_result):
    manager = StateManager()
    manager.resume_text = "resume"
    manager.job_description_text = "job"
    manager.complete_analysis(analysis_result)

    assert manager.snapshot() == ViewState(
        resume_text="resume",
        job_description_text="job",
        analysis_result=analysis_result,
        is_loading=False,
        error=None,
    )


def test_none_text_reads_as_empty(session_state):
    manager = StateManager()
    session_state[RESUME_TEXT_KEY] = None

    assert manager.resume_text == ""
    assert not manager.snapshot().has_inputs
