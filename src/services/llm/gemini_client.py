"""Gemini-specific implementation of LLMClientInterface."""

import threading
from typing import Any, Dict, Optional

import google.generativeai as genai

from src.config.logging_config import get_logger
from src.constants.error_constants import ErrorConstants
from src.error_handling.exceptions import ConfigurationError, ServiceError

from .llm_client_interface import LLMClientInterface

logger = get_logger(__name__)


class GeminiClient(LLMClientInterface):
    """Gemini-specific implementation of LLMClientInterface.

    This class handles direct API calls to Google's Gemini LLM provider.
    It is thread-safe and creates a new GenerativeModel instance
    for each thread to avoid 'Event loop is closed' errors.
    """

    def __init__(self, api_key: str, model_name: str):
        """Initialize the Gemini client with API key and model name.

        Args:
            api_key: Google Gemini API key
            model_name: Name of the Gemini model to use

        Raises:
            ConfigurationError: If api_key or model_name is empty
        """
        if not api_key:
            raise ConfigurationError(ErrorConstants.MSG_MISSING_API_KEY, config_key="GEMINI_API_KEY")
        if not model_name:
            raise ConfigurationError("Model name cannot be empty", config_key="GEMINI_MODEL")

        self._api_key = api_key
        self._model_name = model_name
        self._thread_local = threading.local()

    def _get_thread_local_model(self) -> genai.GenerativeModel:
        """Get or create a thread-local GenerativeModel instance."""
        if not hasattr(self._thread_local, "model"):
            # Configure the API key for this thread
            genai.configure(api_key=self._api_key)
            self._thread_local.model = genai.GenerativeModel(self._model_name)

        return self._thread_local.model

    async def generate_content(
        self,
        prompt: str,
        generation_config: Optional[Dict[str, Any]] = None,
        request_options: Optional[Dict[str, Any]] = None,
    ) -> Any:
        """Generate content using Gemini's API.

        Raises:
            ValueError: If the prompt is empty
            google.api_core.exceptions.GoogleAPICallError: Gemini API errors
        """
        if not prompt:
            raise ValueError("Prompt cannot be empty")

        model = self._get_thread_local_model()
        logger.debug("Calling Gemini model %s (prompt_chars=%d)", self._model_name, len(prompt))
        return await model.generate_content_async(
            contents=[prompt],
            generation_config=generation_config,
            request_options=request_options,
        )

    def extract_text(self, response: Any) -> str:
        """Return the text of a Gemini response.

        Raises:
            ServiceError: If the response was blocked or carries no text
        """
        feedback = getattr(response, "prompt_feedback", None)
        block_reason = getattr(feedback, "block_reason", None)
        if block_reason:
            raise ServiceError(
                f"Gemini blocked the prompt: {block_reason}",
                detail=f"The analysis request was blocked by the service ({block_reason}).",
            )

        try:
            text = response.text
        except ValueError as e:
            # Raised by the SDK when no candidate has text parts
            raise ServiceError(
                f"Gemini response has no text: {e}",
                detail=ErrorConstants.MSG_EMPTY_RESPONSE,
                original_exception=e,
            ) from e

        if not text:
            raise ServiceError("Gemini returned empty text", detail=ErrorConstants.MSG_EMPTY_RESPONSE)
        return text

    def get_model_name(self) -> str:
        """Get the name of the Gemini model being used."""
        return self._model_name

    def is_initialized(self) -> bool:
        """Check if the Gemini client is properly initialized."""
        return bool(self._api_key) and bool(self._model_name)
