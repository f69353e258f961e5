"""Domain models for command payloads."""

from gemini_command.models.command import (
    PARAMETER_SHAPES,
    Command,
    CommandPayload,
    ParameterShape,
)

__all__ = [
    "Command",
    "CommandPayload",
    "PARAMETER_SHAPES",
    "ParameterShape",
]
