"""Abstract interface for LLM clients."""

from abc import ABC, abstractmethod
from typing import Any, Dict, Optional


class LLMClientInterface(ABC):
    """Abstract interface for LLM clients that hides provider-specific implementation details.

    The analysis service only depends on this interface, which keeps the
    provider library out of the service and makes the client easy to mock.
    """

    @abstractmethod
    async def generate_content(
        self,
        prompt: str,
        generation_config: Optional[Dict[str, Any]] = None,
        request_options: Optional[Dict[str, Any]] = None,
    ) -> Any:
        """Generate content using the LLM provider's API.

        Args:
            prompt: Text prompt to send to the model
            generation_config: Provider generation parameters (schema, temperature, ...)
            request_options: Transport options such as the timeout

        Returns:
            Provider-specific response object
        """
        raise NotImplementedError

    @abstractmethod
    def extract_text(self, response: Any) -> str:
        """Extract the textual payload from a provider response."""
        raise NotImplementedError

    @abstractmethod
    def get_model_name(self) -> str:
        """Get the name of the model being used."""
        raise NotImplementedError

    @abstractmethod
    def is_initialized(self) -> bool:
        """Check if the client is properly initialized."""
        raise NotImplementedError
