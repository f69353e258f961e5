"""
errors.py

PURPOSE: Exception hierarchy for request, transport and validation failures.
DEPENDENCIES: None (pure Python)

ARCHITECTURE NOTES:
Every failure a caller can see derives from GeminiCommandError.
Schema failures carry a SchemaErrorKind so callers can branch on the
kind instead of matching message text.
"""

from enum import Enum


class GeminiCommandError(Exception):
    """Base error for everything raised by this package."""

    def __init__(self, message: str, status: int | None = None):
        super().__init__(message)
        self.message = message
        self.status = status

    def __str__(self) -> str:
        if self.status is None:
            return self.message
        return f"API Error: {self.status} - {self.message}"


class TransportError(GeminiCommandError):
    """The outbound call could not be completed (connection, timeout)."""

    pass


class ConnectivityError(TransportError):
    """The API host name could not be resolved."""

    pass


class HttpError(GeminiCommandError):
    """The server answered with a non-success status."""

    def __init__(self, status: int, message: str):
        super().__init__(message, status=status)


class EnvelopeDecodeError(GeminiCommandError):
    """The response body was not valid JSON."""

    def __init__(self, status: int, message: str):
        super().__init__(message, status=status)


class ExtractionError(GeminiCommandError):
    """The envelope had no text at candidates[0].content.parts[0].text."""

    def __init__(self, status: int, message: str = "Failed to extract text from response"):
        super().__init__(message, status=status)


class SchemaErrorKind(Enum):
    """Why generated text failed the command contract."""

    INVALID_JSON = "invalid_json"
    MISSING_FIELDS = "missing_fields"
    WRONG_PARAMETER_SHAPE = "wrong_parameter_shape"
    UNKNOWN_COMMAND = "unknown_command"


class SchemaError(GeminiCommandError):
    """Generated text did not satisfy the command/parameters contract."""

    kind: SchemaErrorKind

    def __init__(self, status: int, message: str):
        super().__init__(message, status=status)


class InvalidJsonError(SchemaError):
    """Cleaned text is not valid JSON."""

    kind = SchemaErrorKind.INVALID_JSON

    def __init__(self, status: int, detail: str):
        super().__init__(status, f"Invalid JSON in response: {detail}")
        self.detail = detail


class MissingFieldsError(SchemaError):
    """Decoded value is not an object or has no string command."""

    kind = SchemaErrorKind.MISSING_FIELDS

    def __init__(self, status: int):
        super().__init__(status, "Response JSON missing required fields")


class WrongParameterShapeError(SchemaError):
    """Parameters are not the JSON type the command requires."""

    kind = SchemaErrorKind.WRONG_PARAMETER_SHAPE

    def __init__(self, status: int, expected: str):
        label = "Multiple" if expected == "array" else "Single"
        super().__init__(status, f"{label} parameters must be an {expected}")
        self.expected = expected


class UnknownCommandError(SchemaError):
    """Command value is not one of the known commands."""

    kind = SchemaErrorKind.UNKNOWN_COMMAND

    def __init__(self, status: int, value: str):
        super().__init__(status, f"Unknown command: {value}")
        self.value = value
