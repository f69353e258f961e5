"""
prompts.py

PURPOSE: Build the generateContent request sent for every prompt.
DEPENDENCIES: None (pure Python)

ARCHITECTURE NOTES:
The preamble shows the model the command/parameters shape and asks for
JSON only. The user prompt is appended and sent as a single text part;
it ends up as a JSON string value, so no escaping is needed here.
"""

from typing import Any
from urllib.parse import urlencode

INIT_MESSAGE = """\
enter a prompt to generate a response from the AI model
{
    "command": "value",
    "parameters": {
        "size": 1,
        "color": "red"
    }
}
Always respond with valid JSON in the exact format shown above. Here is the prompt:"""

DEFAULT_TEMPERATURE = 0.1
DEFAULT_TOP_K = 1
DEFAULT_TOP_P = 1.0


def build_prompt_text(prompt: str, preamble: str = INIT_MESSAGE) -> str:
    """Join the preamble and the user prompt into one text part."""
    return f"{preamble}{prompt}"


def build_request_body(
    prompt: str,
    preamble: str = INIT_MESSAGE,
    temperature: float = DEFAULT_TEMPERATURE,
    top_k: int = DEFAULT_TOP_K,
    top_p: float = DEFAULT_TOP_P,
) -> dict[str, Any]:
    """
    Build the JSON body for a generateContent call.

    Args:
        prompt: The user prompt.
        preamble: Instruction block placed before the prompt.
        temperature: Sampling temperature.
        top_k: Top-k sampling.
        top_p: Nucleus sampling.

    Returns:
        A dict ready to be sent as the request JSON.
    """
    return {
        "contents": [
            {
                "parts": [{"text": build_prompt_text(prompt, preamble)}],
                "role": "user",
            }
        ],
        "generationConfig": {
            "temperature": temperature,
            "topK": top_k,
            "topP": top_p,
        },
    }


def build_endpoint(base_url: str, model: str, api_key: str) -> str:
    """Build the generateContent URL with the API key as a query parameter."""
    query = urlencode({"key": api_key})
    return f"{base_url.rstrip('/')}/models/{model}:generateContent?{query}"
