"""
conftest.py

Shared pytest fixtures for gemini_command tests.
"""

import json
from collections.abc import Callable

import pytest

GREETING_TEXT = '{"command":"greeting","parameters":{}}'


def envelope_for(text: object) -> dict:
    """Wrap generated text in a generateContent response envelope."""
    return {
        "candidates": [
            {
                "content": {
                    "parts": [{"text": text}],
                    "role": "model",
                },
                "finishReason": "STOP",
                "index": 0,
            }
        ],
        "usageMetadata": {
            "promptTokenCount": 64,
            "candidatesTokenCount": 12,
            "totalTokenCount": 76,
        },
    }


@pytest.fixture
def make_envelope() -> Callable[[object], dict]:
    """Factory for response envelopes carrying the given text."""
    return envelope_for


@pytest.fixture
def make_body() -> Callable[[object], str]:
    """Factory for serialized response bodies carrying the given text."""

    def _make(text: object) -> str:
        return json.dumps(envelope_for(text))

    return _make


@pytest.fixture
def greeting_body(make_body: Callable[[object], str]) -> str:
    """A successful body whose text is a fenced greeting command."""
    return make_body(f"```json\n{GREETING_TEXT}\n```")


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep real credentials and overrides out of tests."""
    monkeypatch.delenv("GEMINI_API_KEY", raising=False)
    monkeypatch.delenv("GEMINI_COMMAND_LLM_API_KEY", raising=False)
    monkeypatch.delenv("GEMINI_COMMAND_LLM_MODEL", raising=False)
    monkeypatch.delenv("GEMINI_COMMAND_TRANSPORT_PROBE_BEFORE_REQUEST", raising=False)
    monkeypatch.delenv("GEMINI_COMMAND_OTEL_ENABLED", raising=False)
    monkeypatch.delenv("GEMINI_COMMAND_LOG_LEVEL", raising=False)
