"""Configuration management for the AI Resume Analyzer.

This module provides centralized configuration management for the application,
including the Gemini API key, model settings, UI and logging parameters.
"""

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional

from dotenv import load_dotenv

from src.constants.config_constants import ConfigConstants
from src.constants.error_constants import ErrorConstants


def _load_environment_variables():
    """Load environment variables from the project's .env file, if present."""
    env_path = Path(__file__).parent.parent.parent / ".env"
    if env_path.exists():
        load_dotenv(env_path)


# Load environment variables at module level
_load_environment_variables()


@dataclass
class LLMConfig:
    """Configuration for the Gemini model and API settings."""

    gemini_api_key: str = field(default_factory=lambda: os.getenv("GEMINI_API_KEY", ""))
    model_name: str = field(
        default_factory=lambda: os.getenv("GEMINI_MODEL", ConfigConstants.DEFAULT_MODEL)
    )
    temperature: float = field(
        default_factory=lambda: float(
            os.getenv("LLM_TEMPERATURE", str(ConfigConstants.DEFAULT_TEMPERATURE))
        )
    )
    max_output_tokens: int = field(
        default_factory=lambda: int(
            os.getenv("LLM_MAX_OUTPUT_TOKENS", str(ConfigConstants.DEFAULT_MAX_OUTPUT_TOKENS))
        )
    )
    request_timeout: int = field(
        default_factory=lambda: int(
            os.getenv("LLM_REQUEST_TIMEOUT_SECONDS", str(ConfigConstants.DEFAULT_REQUEST_TIMEOUT))
        )
    )


@dataclass
class UIConfig:
    """Configuration for user interface settings."""

    page_title: str = field(
        default_factory=lambda: os.getenv("UI_PAGE_TITLE", ConfigConstants.DEFAULT_PAGE_TITLE)
    )
    page_icon: str = field(
        default_factory=lambda: os.getenv("UI_PAGE_ICON", ConfigConstants.DEFAULT_PAGE_ICON)
    )
    layout: str = field(
        default_factory=lambda: os.getenv("UI_LAYOUT", ConfigConstants.DEFAULT_LAYOUT)
    )
    text_area_height: int = field(
        default_factory=lambda: int(
            os.getenv("UI_TEXT_AREA_HEIGHT", str(ConfigConstants.DEFAULT_TEXT_AREA_HEIGHT))
        )
    )
    show_debug_information: bool = field(
        default_factory=lambda: os.getenv("UI_SHOW_DEBUG", "false").lower() == "true"
    )


@dataclass
class LoggingConfig:
    """Configuration for logging settings."""

    log_level: str = field(
        default_factory=lambda: os.getenv("LOG_LEVEL", ConfigConstants.DEFAULT_LOG_LEVEL)
    )
    log_directory: str = field(
        default_factory=lambda: os.getenv("LOG_DIRECTORY", ConfigConstants.DEFAULT_LOG_DIRECTORY)
    )
    main_log_file: str = field(
        default_factory=lambda: os.getenv("LOG_MAIN_FILE", ConfigConstants.DEFAULT_MAIN_LOG_FILE)
    )
    error_log_file: str = field(
        default_factory=lambda: os.getenv("LOG_ERROR_FILE", ConfigConstants.DEFAULT_ERROR_LOG_FILE)
    )
    log_to_console: bool = field(
        default_factory=lambda: os.getenv("LOG_TO_CONSOLE", "true").lower() == "true"
    )


@dataclass
class EnvironmentConfig:
    """Environment-specific settings."""

    environment: str = field(
        default_factory=lambda: os.getenv("APP_ENV", ConfigConstants.DEFAULT_ENVIRONMENT).lower()
    )


@dataclass
class AppConfig:
    """Main application configuration."""

    llm: LLMConfig = field(default_factory=LLMConfig)
    ui: UIConfig = field(default_factory=UIConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)
    env: EnvironmentConfig = field(default_factory=EnvironmentConfig)

    def __post_init__(self):
        """Apply environment-specific adjustments."""
        if self.env.environment == "development":
            self.ui.show_debug_information = True
        elif self.env.environment == "testing":
            self.logging.log_to_console = False
        elif self.env.environment == "production":
            self.logging.log_level = "WARNING"
            self.ui.show_debug_information = False

    def validate(self) -> List[str]:
        """Return a list of configuration problems, empty when the config is usable."""
        errors = []
        if not self.llm.gemini_api_key:
            errors.append(ErrorConstants.MSG_MISSING_API_KEY)
        if not self.llm.model_name:
            errors.append("GEMINI_MODEL must not be empty.")
        if self.llm.request_timeout <= 0:
            errors.append("LLM_REQUEST_TIMEOUT_SECONDS must be a positive number.")
        return errors


# Global configuration instance
_config: Optional[AppConfig] = None


def get_config() -> AppConfig:
    """Get the global configuration instance."""
    global _config
    if _config is None:
        _config = AppConfig()
    return _config


def reload_config() -> AppConfig:
    """Reload the configuration from environment variables."""
    global _config
    _config = AppConfig()
    return _config


def update_config(**kwargs) -> None:
    """Update configuration values."""
    config = get_config()
    for key, value in kwargs.items():
        if hasattr(config, key):
            setattr(config, key, value)
        else:
            raise ValueError(f"Unknown configuration key: {key}")
