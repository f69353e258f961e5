"""
command.py

PURPOSE: Define the Command enum and CommandPayload model for validated model output.
DEPENDENCIES: pydantic

ARCHITECTURE NOTES:
The validator confirms raw text against the contract and hands back the
cleaned text. Callers that want structure re-decode it with
CommandPayload.model_validate_json(), which enforces the same
command -> parameter shape table.
"""

from enum import Enum
from typing import Any

from pydantic import BaseModel, Field, model_validator


class Command(str, Enum):
    """Commands the model is allowed to return."""

    GREETING = "greeting"
    SINGLE = "1"
    MULTIPLE = "2"


class ParameterShape(str, Enum):
    """JSON type the parameters field must have."""

    OBJECT = "object"
    ARRAY = "array"


# Required parameter shape per command
PARAMETER_SHAPES: dict[str, ParameterShape] = {
    Command.GREETING.value: ParameterShape.OBJECT,
    Command.SINGLE.value: ParameterShape.OBJECT,
    Command.MULTIPLE.value: ParameterShape.ARRAY,
}


def shape_matches(value: Any, shape: ParameterShape) -> bool:
    """Return True if a decoded JSON value has the given shape."""
    if shape is ParameterShape.OBJECT:
        return isinstance(value, dict)
    return isinstance(value, list)


class CommandPayload(BaseModel):
    """
    A command returned by the model.

    Examples:
        {"command": "greeting", "parameters": {"name": "Ada"}}
        {"command": "2", "parameters": [{"size": 1}, {"size": 2}]}
    """

    command: Command
    parameters: dict[str, Any] | list[Any] = Field(
        ..., description="Object for greeting/1, array for 2"
    )

    @model_validator(mode="after")
    def validate_parameter_shape(self) -> "CommandPayload":
        """Ensure parameters have the shape the command requires."""
        shape = PARAMETER_SHAPES[self.command.value]
        if not shape_matches(self.parameters, shape):
            raise ValueError(f"{self.command.value!r} parameters must be an {shape.value}")
        return self
