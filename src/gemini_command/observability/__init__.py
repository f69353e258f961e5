"""
observability/__init__.py

PURPOSE: Optional OpenTelemetry tracing.
DEPENDENCIES: opentelemetry-api, opentelemetry-sdk (optional)
"""

from gemini_command.observability.telemetry import (
    get_tracer,
    init_telemetry,
    shutdown_telemetry,
)

__all__ = ["get_tracer", "init_telemetry", "shutdown_telemetry"]
