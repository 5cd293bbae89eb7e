"""Unit tests for the frontend UI components."""

from unittest.mock import MagicMock, call, patch

import pytest

from src.config.settings import UIConfig
from src.frontend.callbacks import handle_analyze
from src.frontend.ui_components import (
    EMPTY_SECTION_TEXT,
    describe_match_score,
    display_footer,
    display_input_form,
    display_report,
    display_results_panel,
)
from src.models.analysis_models import AnalysisResult
from src.models.view_models import DisplayMode, ViewState


@pytest.fixture
def mock_st():
    with patch("src.frontend.ui_components.st") as mock:
        mock.spinner.return_value = MagicMock()
        yield mock


@pytest.mark.parametrize(
    "score, label",
    [
        (100, "Strong match"),
        (75, "Strong match"),
        (74, "Moderate match"),
        (50, "Moderate match"),
        (49, "Low match"),
        (0, "Low match"),
    ],
)
def test_describe_match_score(score, label):
    assert describe_match_score(score) == label


class TestDisplayInputForm:
    def test_idle_button(self, mock_st):
        state = ViewState(resume_text="cv", job_description_text="jd")

        display_input_form(state, UIConfig(text_area_height=250))

        assert mock_st.text_area.call_count == 2
        assert mock_st.text_area.call_args_list[0].kwargs["key"] == "resume_text_input"
        assert mock_st.text_area.call_args_list[1].kwargs["key"] == "job_description_input"
        assert mock_st.text_area.call_args_list[0].kwargs["height"] == 250

        args, kwargs = mock_st.button.call_args
        assert "Analyze Resume" in args[0]
        assert kwargs["disabled"] is False
        assert kwargs["on_click"] is handle_analyze

    def test_loading_button(self, mock_st):
        state = ViewState(resume_text="cv", job_description_text="jd", is_loading=True)

        display_input_form(state, UIConfig())

        args, kwargs = mock_st.button.call_args
        assert args[0] == "Analyzing..."
        assert kwargs["disabled"] is True

    def test_button_disabled_without_inputs(self, mock_st):
        display_input_form(ViewState(resume_text="cv"), UIConfig())
        assert mock_st.button.call_args.kwargs["disabled"] is True


class TestDisplayReport:
    def test_score_then_sections_in_order(self, mock_st, analysis_result):
        display_report(analysis_result)

        mock_st.metric.assert_called_once()
        metric_args = mock_st.metric.call_args.args
        assert metric_args[1] == "82%"
        assert metric_args[2] == "Strong match"
        mock_st.progress.assert_called_once_with(0.82)

        assert mock_st.markdown.call_args_list == [
            call("#### ✅ Strengths"),
            call("- Python\n- Leadership"),
            call("#### 🔑 Missing Keywords"),
            call("- Kubernetes"),
            call("#### 💡 Suggestions"),
            call("- Add a cloud project\n- Quantify impact"),
        ]

    def test_empty_sections(self, mock_st):
        result = AnalysisResult(match_score=30, strengths=[], missing_keywords=[], suggestions=[])

        display_report(result)

        assert mock_st.caption.call_args_list == [call(EMPTY_SECTION_TEXT)] * 3


class TestDisplayResultsPanel:
    def test_idle(self, mock_st):
        assert display_results_panel(ViewState()) is DisplayMode.IDLE
        mock_st.error.assert_not_called()
        mock_st.metric.assert_not_called()

    def test_loading(self, mock_st):
        mode = display_results_panel(ViewState(is_loading=True))

        assert mode is DisplayMode.LOADING
        mock_st.info.assert_called_once()
        assert "being analyzed" in mock_st.info.call_args.args[0]
        mock_st.spinner.assert_not_called()
        mock_st.metric.assert_not_called()

    def test_error(self, mock_st):
        mode = display_results_panel(ViewState(error="Failed to analyze. Please try again."))

        assert mode is DisplayMode.ERROR
        mock_st.error.assert_called_once()
        assert "Failed to analyze. Please try again." in mock_st.error.call_args.args[0]
        mock_st.metric.assert_not_called()

    def test_report(self, mock_st, analysis_result):
        mode = display_results_panel(ViewState(analysis_result=analysis_result))

        assert mode is DisplayMode.REPORT
        mock_st.error.assert_not_called()
        mock_st.metric.assert_called_once()


def test_footer(mock_st):
    display_footer()
    mock_st.caption.assert_called_once_with("Powered by Gemini")
