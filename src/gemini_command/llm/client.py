"""
client.py

PURPOSE: Abstract LLM client interface.
DEPENDENCIES: validator, models

ARCHITECTURE NOTES:
Subclasses only implement send(), which performs the HTTP call and
returns the raw status and body. Validation lives in the shared
complete() path so every backend enforces the same command contract,
and the validator never sees transport objects.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field

from gemini_command.models.command import CommandPayload
from gemini_command.prompts import (
    DEFAULT_TEMPERATURE,
    DEFAULT_TOP_K,
    DEFAULT_TOP_P,
    INIT_MESSAGE,
)
from gemini_command.validator import ResponseValidator


@dataclass
class LLMRequest:
    """Request to an LLM."""

    prompt: str
    preamble: str = INIT_MESSAGE
    temperature: float = DEFAULT_TEMPERATURE
    top_k: int = DEFAULT_TOP_K
    top_p: float = DEFAULT_TOP_P


@dataclass
class RawResponse:
    """Status and body of an API response, before validation."""

    status_code: int
    body: str | bytes
    headers: dict[str, str] = field(default_factory=dict)


class LLMClient(ABC):
    """Abstract base class for LLM clients."""

    validator: ResponseValidator = ResponseValidator()

    @abstractmethod
    async def send(self, request: LLMRequest) -> RawResponse:
        """
        Send a request to the API.

        Args:
            request: The prompt and generation parameters

        Returns:
            RawResponse with the unparsed body

        Raises:
            TransportError: If the call could not be completed
        """
        ...

    @property
    @abstractmethod
    def model_name(self) -> str:
        """Return the name of the model being used."""
        ...

    async def complete(self, request: LLMRequest) -> str:
        """
        Send a request and validate the response.

        Returns:
            The cleaned, contract-checked payload text

        Raises:
            GeminiCommandError: Any transport, HTTP or validation failure
        """
        response = await self.send(request)
        return self.validator.validate(response.status_code, response.body)

    async def complete_command(self, request: LLMRequest) -> CommandPayload:
        """Send a request and return the validated payload as a model."""
        text = await self.complete(request)
        return CommandPayload.model_validate_json(text)
