"""
Gemini Command - Ask a generative model for a validated JSON command.

This package provides tools for:
- Building Gemini generateContent requests with a fixed command preamble
- Validating model output against the command/parameters contract
- A small CLI for one-shot prompts and connectivity checks
"""

__version__ = "0.1.0"
