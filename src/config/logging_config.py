"""Logging Configuration Module

This module provides a unified logging setup for the resume analyzer.
It supports environment-aware configuration to switch between simple text-based
logging for development and structured JSON logging for production.

The configuration is controlled by the `APP_ENV` environment variable.
- `APP_ENV=development` (default): Simple, human-readable console output.
- `APP_ENV=production`: Structured JSON logging for robust monitoring.
"""

import logging
import os
from pathlib import Path

from pythonjsonlogger import jsonlogger

from .settings import get_config

# Global flag to ensure setup_logging is only called once
_logging_initialized = False

_TEXT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
_JSON_FORMAT = "%(asctime)s %(name)s %(levelname)s %(message)s %(filename)s %(lineno)d"


def setup_logging(log_level=None):
    """Configures logging based on the APP_ENV environment variable."""
    global _logging_initialized

    # Prevent multiple initializations
    if _logging_initialized:
        return

    if log_level is None:
        log_level = logging.getLevelName(get_config().logging.log_level.upper())
        if not isinstance(log_level, int):
            log_level = logging.INFO

    app_env = os.environ.get("APP_ENV", "development").lower()
    if app_env == "production":
        _setup_production_logging(log_level)
    else:
        _setup_development_logging(log_level)

    _logging_initialized = True


def _add_file_handlers(root_logger: logging.Logger, formatter: logging.Formatter):
    """Attach the main and error file handlers, creating log directories as needed."""
    config = get_config()
    logs_dir = Path(config.logging.log_directory)
    error_logs_dir = logs_dir / "error"
    logs_dir.mkdir(exist_ok=True, parents=True)
    error_logs_dir.mkdir(exist_ok=True, parents=True)

    main_file_handler = logging.FileHandler(logs_dir / config.logging.main_log_file)
    main_file_handler.setFormatter(formatter)
    root_logger.addHandler(main_file_handler)

    error_file_handler = logging.FileHandler(error_logs_dir / config.logging.error_log_file)
    error_file_handler.setLevel(logging.ERROR)
    error_file_handler.setFormatter(formatter)
    root_logger.addHandler(error_file_handler)


def _setup_development_logging(log_level=logging.INFO):
    """Sets up simple, text-based logging for development in a robust, idempotent way."""
    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)

    # Clear any existing handlers to prevent duplication
    if root_logger.hasHandlers():
        root_logger.handlers.clear()

    formatter = logging.Formatter(_TEXT_FORMAT)

    if get_config().logging.log_to_console:
        console_handler = logging.StreamHandler()
        console_handler.setFormatter(formatter)
        root_logger.addHandler(console_handler)

    try:
        _add_file_handlers(root_logger, formatter)
    except (IOError, PermissionError) as e:
        root_logger.warning("File logging disabled: %s", str(e))

    root_logger.info(
        "Development logging initialized (log_level=%s)",
        logging.getLevelName(log_level),
    )


def _setup_production_logging(log_level=logging.INFO):
    """Sets up structured JSON logging for production with persistent file handlers."""
    logger = logging.getLogger()
    logger.setLevel(log_level)

    # Remove any existing handlers
    if logger.hasHandlers():
        logger.handlers.clear()

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(jsonlogger.JsonFormatter(_JSON_FORMAT))
    logger.addHandler(console_handler)

    try:
        # File logs stay human-readable
        _add_file_handlers(logger, logging.Formatter(_TEXT_FORMAT))
        logging.info("Production logging initialized with file persistence.")
    except (IOError, PermissionError) as e:
        # Graceful fallback to console-only logging
        logging.warning(
            "Failed to setup file logging (permissions or IO error): %s. "
            "Falling back to console-only logging.",
            str(e),
        )


def get_logger(name: str) -> logging.Logger:
    """Returns a logger instance."""
    return logging.getLogger(name)


def log_error_with_context(logger, message, error=None):
    """Logs an error with additional context, including exception info."""
    if error:
        logger.error("%s: %s", message, str(error), exc_info=True)
    else:
        logger.error(message, exc_info=True)
