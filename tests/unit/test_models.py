"""
TEST DOC: Command Models

WHAT: Tests for the Command enum and CommandPayload model
WHY: Callers re-decode validated text into these models
HOW: Validate good and bad payloads through pydantic

CASES:
- Each command accepts its parameter shape
- Wrong shapes and unknown commands are rejected

EDGE CASES:
- Missing parameters
"""

import pytest
from pydantic import ValidationError

from gemini_command.models.command import (
    PARAMETER_SHAPES,
    Command,
    CommandPayload,
    ParameterShape,
)


class TestCommand:
    """Tests for the Command enum."""

    def test_values(self):
        """Command values match the wire strings."""
        assert Command("greeting") is Command.GREETING
        assert Command("1") is Command.SINGLE
        assert Command("2") is Command.MULTIPLE

    def test_every_command_has_a_shape(self):
        """The shape table covers exactly the known commands."""
        assert set(PARAMETER_SHAPES) == {c.value for c in Command}
        assert PARAMETER_SHAPES["2"] is ParameterShape.ARRAY


class TestCommandPayload:
    """Tests for the CommandPayload model."""

    def test_greeting(self):
        """Greeting with object parameters is valid."""
        payload = CommandPayload.model_validate_json(
            '{"command": "greeting", "parameters": {"name": "Ada"}}'
        )
        assert payload.command == Command.GREETING
        assert payload.parameters == {"name": "Ada"}

    def test_multiple(self):
        """Command 2 with array parameters is valid."""
        payload = CommandPayload.model_validate({"command": "2", "parameters": [{"size": 1}]})
        assert payload.command is Command.MULTIPLE
        assert payload.parameters == [{"size": 1}]

    def test_single_rejects_array(self):
        """Command 1 with array parameters is invalid."""
        with pytest.raises(ValidationError, match="must be an object"):
            CommandPayload.model_validate({"command": "1", "parameters": [1]})

    def test_multiple_rejects_object(self):
        """Command 2 with object parameters is invalid."""
        with pytest.raises(ValidationError, match="must be an array"):
            CommandPayload.model_validate({"command": "2", "parameters": {"a": 1}})

    def test_unknown_command(self):
        """Commands outside the enum are invalid."""
        with pytest.raises(ValidationError):
            CommandPayload.model_validate({"command": "x", "parameters": {}})

    def test_missing_parameters(self):
        """Parameters are required."""
        with pytest.raises(ValidationError):
            CommandPayload.model_validate({"command": "greeting"})

    def test_dump_uses_wire_values(self):
        """Serialized payloads use the wire command strings."""
        payload = CommandPayload(command=Command.SINGLE, parameters={"size": 1})
        assert payload.model_dump(mode="json") == {"command": "1", "parameters": {"size": 1}}
