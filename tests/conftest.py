# tests/conftest.py
import os
import sys
import tempfile

from unittest.mock import patch

import pytest

# Ensure project root (containing src/) is in sys.path
PROJECT_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), "../"))
if PROJECT_ROOT not in sys.path:
    sys.path.insert(0, PROJECT_ROOT)

# Keep test runs out of the real log directory and off the console
os.environ.setdefault("APP_ENV", "testing")
os.environ.setdefault(
    "LOG_DIRECTORY", os.path.join(tempfile.gettempdir(), "resume-analyzer-test-logs")
)

from src.config.logging_config import setup_logging
from src.models.analysis_models import AnalysisResult

# Ensure logging is initialized before any tests run
setup_logging()


class MockSessionState(dict):
    """Dict that also supports attribute access, like st.session_state."""

    def __getattr__(self, name):
        try:
            return self[name]
        except KeyError as e:
            raise AttributeError(name) from e

    def __setattr__(self, name, value):
        self[name] = value


@pytest.fixture
def session_state():
    """Patch st.session_state as seen by the StateManager."""
    state = MockSessionState()
    with patch("src.core.state_manager.st.session_state", state):
        yield state


@pytest.fixture
def valid_payload():
    """A well-formed analysis payload using the service's field names."""
    return {
        "matchScore": 82,
        "strengths": ["Python", "Leadership"],
        "missingKeywords": ["Kubernetes"],
        "suggestions": ["Add a cloud project", "Quantify impact"],
    }


@pytest.fixture
def analysis_result(valid_payload):
    return AnalysisResult.model_validate(valid_payload)
