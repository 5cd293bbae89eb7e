"""LLM client interfaces and implementations."""

from .llm_client_interface import LLMClientInterface
from .gemini_client import GeminiClient

__all__ = ["LLMClientInterface", "GeminiClient"]
