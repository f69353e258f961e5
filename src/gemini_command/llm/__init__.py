"""LLM client module."""

from gemini_command.llm.client import LLMClient, LLMRequest, RawResponse
from gemini_command.llm.gemini import GeminiClient, create_gemini_client

__all__ = [
    "GeminiClient",
    "LLMClient",
    "LLMRequest",
    "RawResponse",
    "create_gemini_client",
]
