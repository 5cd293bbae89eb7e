"""Configuration-related constants for centralized configuration.

This module contains constants used for application configuration
to eliminate hardcoded values and improve maintainability.
"""

from typing import Final


class ConfigConstants:
    """Constants for application configuration settings."""

    # LLM Settings
    DEFAULT_MODEL: Final[str] = "gemini-2.0-flash"
    DEFAULT_TEMPERATURE: Final[float] = 0.2
    DEFAULT_MAX_OUTPUT_TOKENS: Final[int] = 2048
    DEFAULT_REQUEST_TIMEOUT: Final[int] = 60

    # UI Settings
    DEFAULT_PAGE_TITLE: Final[str] = "AI Resume Analyzer"
    DEFAULT_PAGE_ICON: Final[str] = "✨"
    DEFAULT_LAYOUT: Final[str] = "wide"
    DEFAULT_TEXT_AREA_HEIGHT: Final[int] = 300

    # Logging Settings
    DEFAULT_LOG_LEVEL: Final[str] = "INFO"
    DEFAULT_LOG_DIRECTORY: Final[str] = "instance/logs"
    DEFAULT_MAIN_LOG_FILE: Final[str] = "app.log"
    DEFAULT_ERROR_LOG_FILE: Final[str] = "error.log"

    # Environment
    DEFAULT_ENVIRONMENT: Final[str] = "development"
