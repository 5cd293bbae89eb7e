"""Module for the dependency injection container."""

import threading
from typing import Optional

from dependency_injector import containers, providers

from src.config.settings import get_config
from src.services.analysis_service import AnalysisService
from src.services.llm.gemini_client import GeminiClient


class Container(containers.DeclarativeContainer):  # pylint: disable=c-extension-no-member
    """Dependency injection container for the application.

    Use get_container() instead of instantiating this class directly.
    """

    config = providers.Singleton(get_config)  # pylint: disable=c-extension-no-member

    # Register LLMClientInterface with GeminiClient implementation
    llm_client = providers.Singleton(  # pylint: disable=c-extension-no-member
        GeminiClient,
        api_key=config.provided.llm.gemini_api_key,
        model_name=config.provided.llm.model_name,
    )

    analysis_service = providers.Factory(  # pylint: disable=c-extension-no-member
        AnalysisService,
        llm_client=llm_client,
        llm_config=config.provided.llm,
    )


class ContainerSingleton:
    """Thread-safe singleton for the DI container."""

    _instance: Optional[Container] = None
    _lock = threading.Lock()

    @classmethod
    def get_instance(cls) -> Container:
        """Get the singleton instance of the container."""
        if cls._instance is None:
            with cls._lock:
                if cls._instance is None:
                    cls._instance = Container()
        return cls._instance

    @classmethod
    def reset_instance(cls) -> None:
        """Reset the singleton instance (mainly for testing)."""
        with cls._lock:
            cls._instance = None


def get_container() -> Container:
    """Returns the singleton instance of the DI container."""
    return ContainerSingleton.get_instance()
