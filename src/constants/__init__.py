"""Constants package for centralized configuration values.

This package provides centralized constants to eliminate hardcoded values
throughout the codebase and improve maintainability.
"""

from src.constants.analysis_constants import AnalysisConstants
from src.constants.config_constants import ConfigConstants
from src.constants.error_constants import ErrorConstants

__all__ = [
    "AnalysisConstants",
    "ConfigConstants",
    "ErrorConstants",
]
