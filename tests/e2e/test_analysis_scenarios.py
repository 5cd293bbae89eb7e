"""End-to-end analysis scenarios.

Drives a click on "Analyze Resume" through the controller, the real
AnalysisService and response validation, with only the Gemini transport
mocked, then renders the report panel against the resulting state.
"""

import json
from unittest.mock import AsyncMock, MagicMock, Mock, call, patch

import pytest

from src.config.settings import LLMConfig
from src.core.analysis_controller import AnalysisController
from src.core.state_manager import StateManager
from src.error_handling.models import ErrorKind
from src.frontend.ui_components import display_results_panel
from src.models.view_models import DisplayMode
from src.services.analysis_service import AnalysisService
from src.services.llm.llm_client_interface import LLMClientInterface

pytestmark = pytest.mark.e2e

RESUME = """Jane Doe
Senior Software Engineer
- 8 years of Python, Django and PostgreSQL
- Led a team of 5 engineers delivering a payments platform
"""

JOB_DESCRIPTION = """Backend Engineer
We are looking for an engineer with strong Python skills, experience leading
teams, and hands-on Kubernetes and AWS experience.
"""


def _llm_client(payload):
    client = Mock(spec=LLMClientInterface)
    client.get_model_name.return_value = "gemini-2.0-flash"
    client.generate_content = AsyncMock(return_value=Mock(name="response"))
    client.extract_text.return_value = json.dumps(payload)
    return client


def _controller(state_manager, client):
    service = AnalysisService(
        llm_client=client,
        llm_config=LLMConfig(gemini_api_key="test-key", model_name="gemini-2.0-flash"),
    )
    return AnalysisController(state_manager, service_provider=lambda: service)


@pytest.fixture
def filled_form(session_state):
    state_manager = StateManager()
    state_manager.resume_text = RESUME
    state_manager.job_description_text = JOB_DESCRIPTION
    return state_manager


@pytest.fixture
def mock_st():
    with patch("src.frontend.ui_components.st") as mock:
        mock.spinner.return_value = MagicMock()
        yield mock


def test_successful_analysis_renders_report(filled_form, mock_st):
    client = _llm_client(
        {
            "matchScore": 82,
            "strengths": ["Python", "Leadership"],
            "missingKeywords": ["Kubernetes", "AWS"],
            "suggestions": ["Add cloud projects"],
        }
    )

    outcome = _controller(filled_form, client).trigger_analysis()

    assert outcome.is_success
    client.generate_content.assert_awaited_once()

    view_state = filled_form.snapshot()
    assert view_state.is_loading is False
    assert view_state.error is None

    mode = display_results_panel(view_state)

    assert mode is DisplayMode.REPORT
    mock_st.error.assert_not_called()
    assert mock_st.metric.call_args.args[1] == "82%"
    assert mock_st.markdown.call_args_list == [
        call("#### ✅ Strengths"),
        call("- Python\n- Leadership"),
        call("#### 🔑 Missing Keywords"),
        call("- Kubernetes\n- AWS"),
        call("#### 💡 Suggestions"),
        call("- Add cloud projects"),
    ]


def test_out_of_range_score_shows_format_error(filled_form, mock_st):
    client = _llm_client(
        {
            "matchScore": 150,
            "strengths": ["Python"],
            "missingKeywords": [],
            "suggestions": [],
        }
    )

    outcome = _controller(filled_form, client).trigger_analysis()

    assert outcome.error_kind is ErrorKind.RESPONSE_FORMAT

    view_state = filled_form.snapshot()
    assert view_state.analysis_result is None
    assert view_state.is_loading is False
    assert view_state.resume_text == RESUME

    mode = display_results_panel(view_state)

    assert mode is DisplayMode.ERROR
    mock_st.error.assert_called_once()
    assert "The analysis service returned an unexpected format." in mock_st.error.call_args.args[0]
    mock_st.metric.assert_not_called()
    mock_st.progress.assert_not_called()


def test_retry_after_failure_shows_report(filled_form, mock_st):
    client = _llm_client(
        {"matchScore": 150, "strengths": [], "missingKeywords": [], "suggestions": []}
    )
    controller = _controller(filled_form, client)
    controller.trigger_analysis()

    client.extract_text.return_value = json.dumps(
        {"matchScore": 64, "strengths": ["SQL"], "missingKeywords": [], "suggestions": []}
    )
    outcome = controller.trigger_analysis()

    assert outcome.is_success
    assert display_results_panel(filled_form.snapshot()) is DisplayMode.REPORT
    assert mock_st.metric.call_args.args[2] == "Moderate match"


def test_go_engineer_scenario_renders_sections_in_order(session_state, mock_st):
    resume = "Senior engineer, 5 years Go, led a team of 4"
    job_description = "Looking for a backend engineer with Go and leadership experience"
    state_manager = StateManager()
    state_manager.resume_text = resume
    state_manager.job_description_text = job_description
    client = _llm_client(
        {
            "matchScore": 82,
            "strengths": ["Go experience", "Leadership"],
            "missingKeywords": ["Kubernetes"],
            "suggestions": ["Mention container orchestration experience"],
        }
    )
    controller = _controller(state_manager, client)

    assert controller.request_analysis() is True
    assert display_results_panel(state_manager.snapshot()) is DisplayMode.LOADING
    outcome = controller.process_pending_analysis()

    assert outcome.is_success
    prompt = client.generate_content.call_args.args[0]
    assert resume in prompt
    assert job_description in prompt

    mock_st.reset_mock()
    mode = display_results_panel(state_manager.snapshot())

    assert mode is DisplayMode.REPORT
    rendered = [
        (name, args) for name, args, _ in mock_st.mock_calls if name in ("metric", "markdown")
    ]
    assert rendered[0][0] == "metric"
    assert rendered[0][1][:2] == ("Match Score", "82%")
    assert rendered[1:] == [
        ("markdown", ("#### ✅ Strengths",)),
        ("markdown", ("- Go experience\n- Leadership",)),
        ("markdown", ("#### 🔑 Missing Keywords",)),
        ("markdown", ("- Kubernetes",)),
        ("markdown", ("#### 💡 Suggestions",)),
        ("markdown", ("- Mention container orchestration experience",)),
    ]
