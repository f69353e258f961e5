"""
gemini.py

PURPOSE: Gemini generateContent client implementation.
DEPENDENCIES: httpx

ARCHITECTURE NOTES:
Talks to the REST endpoint directly with httpx. Supports:
- An optional pre-flight DNS probe (advisory unless strict_probe is set)
- Injected httpx clients for tests and shared pools
- OpenTelemetry tracing (when enabled)
"""

import logging
import time

import httpx

from gemini_command.config import GeminiSettings, TransportSettings
from gemini_command.errors import ConnectivityError, TransportError
from gemini_command.llm.client import LLMClient, LLMRequest, RawResponse
from gemini_command.llm.connectivity import probe_connectivity
from gemini_command.llm.transport import build_async_client
from gemini_command.observability import get_tracer
from gemini_command.prompts import build_endpoint, build_request_body

logger = logging.getLogger(__name__)
tracer = get_tracer(__name__)


class GeminiClient(LLMClient):
    """
    LLM client for Google's Gemini REST API.

    Use as an async context manager so the owned httpx client is closed:

        async with GeminiClient(api_key) as client:
            text = await client.complete(LLMRequest(prompt="Hello, world!"))
    """

    def __init__(
        self,
        api_key: str,
        settings: GeminiSettings | None = None,
        transport: TransportSettings | None = None,
        http_client: httpx.AsyncClient | None = None,
    ):
        """
        Initialize the Gemini client.

        Args:
            api_key: Gemini API key, sent as the key query parameter.
            settings: Endpoint and model settings.
            transport: Transport settings used when building the httpx client.
            http_client: Existing client to use instead of building one.
        """
        self._api_key = api_key
        self._settings = settings or GeminiSettings()
        self._transport = transport or TransportSettings()
        self._owns_http = http_client is None
        self._http = http_client or build_async_client(self._transport)

    @property
    def model_name(self) -> str:
        """Return the model name."""
        return self._settings.model

    @property
    def endpoint(self) -> str:
        """The generateContent URL for the configured model."""
        return build_endpoint(self._settings.base_url, self._settings.model, self._api_key)

    async def __aenter__(self) -> "GeminiClient":
        return self

    async def __aexit__(self, *args: object) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        """Close the httpx client if this instance created it."""
        if self._owns_http:
            await self._http.aclose()

    async def check_connectivity(self) -> list[str]:
        """
        Run the pre-flight DNS probe.

        Returns:
            Resolved addresses, or an empty list if the probe failed
            and strict_probe is off.

        Raises:
            ConnectivityError: If the probe failed and strict_probe is on.
        """
        try:
            return await probe_connectivity(self._settings.host)
        except ConnectivityError as e:
            if self._transport.strict_probe:
                raise
            logger.warning(f"Connectivity test failed, continuing anyway: {e}")
            return []

    async def send(self, request: LLMRequest) -> RawResponse:
        """
        POST the request to generateContent.

        Args:
            request: The prompt and generation parameters

        Returns:
            RawResponse with the status and unparsed body

        Raises:
            TransportError: If the call could not be completed
        """
        if self._transport.probe_before_request:
            await self.check_connectivity()

        with tracer.start_as_current_span("gemini.send") as span:
            span.set_attribute("llm.model", self._settings.model)
            span.set_attribute("llm.temperature", request.temperature)

            body = build_request_body(
                request.prompt,
                preamble=request.preamble,
                temperature=request.temperature,
                top_k=request.top_k,
                top_p=request.top_p,
            )

            logger.info(f"Calling LLM API with prompt: {request.prompt}")
            start_time = time.perf_counter()

            try:
                response = await self._http.post(
                    self.endpoint,
                    json=body,
                    headers={"Host": self._settings.host},
                )
            except httpx.HTTPError as e:
                span.record_exception(e)
                # Never log the request URL, it carries the API key
                logger.error(f"Error sending request: {type(e).__name__}: {e}")
                raise TransportError(f"Request to {self._settings.host} failed: {e}") from e

            elapsed_ms = (time.perf_counter() - start_time) * 1000
            span.set_attribute("http.status_code", response.status_code)
            span.set_attribute("llm.latency_ms", elapsed_ms)
            logger.info(f"Received response with status: {response.status_code}")

            return RawResponse(
                status_code=response.status_code,
                body=response.content,
                headers=dict(response.headers),
            )


def create_gemini_client(
    api_key: str,
    settings: GeminiSettings | None = None,
    transport: TransportSettings | None = None,
) -> GeminiClient:
    """
    Factory function to create a Gemini client.

    Args:
        api_key: Gemini API key
        settings: Endpoint and model settings
        transport: HTTP transport settings

    Returns:
        Configured GeminiClient
    """
    return GeminiClient(api_key=api_key, settings=settings, transport=transport)
