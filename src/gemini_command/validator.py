"""
validator.py

PURPOSE: Turn a raw generateContent response into a validated command payload.
DEPENDENCIES: pydantic-core, models, errors

ARCHITECTURE NOTES:
Validation is a pure function of (status code, body). It runs in order:
1. Non-2xx status -> HttpError carrying the raw body
2. Decode the envelope JSON
3. Extract candidates[0].content.parts[0].text
4. Clean the text (trim, strip ```json fences, drop newlines)
5. Decode the cleaned text and check the command/parameters contract

Both decodes are strict: NaN, Infinity, lone surrogates and nesting past
the parser's depth limit are decode errors, so anything accepted here
also loads with CommandPayload.model_validate_json().

On success the cleaned text itself is returned; callers can re-decode it
with CommandPayload.model_validate_json().
"""

import logging
from typing import Any

from pydantic_core import from_json

from gemini_command.errors import (
    EnvelopeDecodeError,
    ExtractionError,
    HttpError,
    InvalidJsonError,
    MissingFieldsError,
    UnknownCommandError,
    WrongParameterShapeError,
)
from gemini_command.models.command import PARAMETER_SHAPES, shape_matches
from gemini_command.observability import get_tracer

logger = logging.getLogger(__name__)
tracer = get_tracer(__name__)

FENCE_OPEN = "```json"
FENCE_CLOSE = "```"

UNREADABLE_BODY = "Error reading response"

# Path to the generated text inside the envelope
TEXT_PATH: tuple[str | int, ...] = ("candidates", 0, "content", "parts", 0, "text")


def decode_json(data: str | bytes) -> Any:
    """
    Decode strict JSON.

    Raises:
        ValueError: Invalid JSON, non-finite numbers, or nesting too deep.
    """
    return from_json(data, allow_inf_nan=False)


def is_success(status_code: int) -> bool:
    """Check if a status code is in the 2xx range."""
    return 200 <= status_code < 300


def extract_text(envelope: Any) -> str | None:
    """
    Walk the fixed text path of a decoded envelope.

    Returns:
        The generated text, or None if any segment is missing or has the
        wrong type.
    """
    node = envelope
    for segment in TEXT_PATH:
        if isinstance(segment, int):
            if not isinstance(node, list) or len(node) <= segment:
                return None
        elif not isinstance(node, dict) or segment not in node:
            return None
        node = node[segment]
    return node if isinstance(node, str) else None


def clean_text(raw_text: str) -> str:
    """
    Remove markdown fences and newlines from generated text.

    Trimming happens first because the fences are anchored to the ends
    of the trimmed string. Repeated fences at either end are all removed.
    """
    text = raw_text.strip()
    while text.startswith(FENCE_OPEN):
        text = text[len(FENCE_OPEN) :]
    while text.endswith(FENCE_CLOSE):
        text = text[: -len(FENCE_CLOSE)]
    text = text.replace("\n", "")
    return text.strip()


def check_command(text: str, status: int = 200) -> dict[str, Any]:
    """
    Decode cleaned text and enforce the command/parameters contract.

    Args:
        text: Cleaned model output.
        status: HTTP status attached to any raised error.

    Returns:
        The decoded payload.

    Raises:
        SchemaError: One of its subclasses, depending on what failed.
    """
    try:
        payload = decode_json(text)
    except ValueError as e:
        raise InvalidJsonError(status, str(e)) from e

    if not isinstance(payload, dict) or not isinstance(payload.get("command"), str):
        raise MissingFieldsError(status)

    command = payload["command"]
    shape = PARAMETER_SHAPES.get(command)
    if shape is None:
        raise UnknownCommandError(status, command)
    if not shape_matches(payload.get("parameters"), shape):
        raise WrongParameterShapeError(status, shape.value)

    return payload


class ResponseValidator:
    """
    Validates raw API responses against the command contract.

    Usage:
        validator = ResponseValidator()
        text = validator.validate(response.status_code, response.content)
        payload = CommandPayload.model_validate_json(text)
    """

    def validate(self, status_code: int, body: str | bytes) -> str:
        """
        Validate a response and return the cleaned payload text.

        Raises:
            HttpError: Status is not 2xx.
            EnvelopeDecodeError: Body is not JSON.
            ExtractionError: Envelope has no generated text.
            SchemaError: Generated text breaks the command contract.
        """
        with tracer.start_as_current_span("gemini.validate") as span:
            span.set_attribute("http.status_code", status_code)

            if not is_success(status_code):
                message = self._body_text(body)
                logger.error(f"Error: {status_code} - {message}")
                raise HttpError(status_code, message)

            try:
                envelope = decode_json(body)
            except ValueError as e:
                raise EnvelopeDecodeError(status_code, f"Invalid response envelope: {e}") from e

            logger.debug(f"Response: {envelope}")

            raw_text = extract_text(envelope)
            if raw_text is None:
                raise ExtractionError(status_code)

            text = clean_text(raw_text)
            payload = check_command(text, status_code)
            span.set_attribute("gemini.command", payload["command"])

            logger.debug(f"Validated command payload: {text}")
            return text

    @staticmethod
    def _body_text(body: str | bytes) -> str:
        if isinstance(body, str):
            return body
        try:
            return body.decode("utf-8")
        except UnicodeDecodeError:
            return UNREADABLE_BODY


def validate_response(status_code: int, body: str | bytes) -> str:
    """Validate a response with a default ResponseValidator."""
    return ResponseValidator().validate(status_code, body)
