"""
telemetry.py

PURPOSE: Opt-in OpenTelemetry tracing for API calls and validation.
DEPENDENCIES: opentelemetry-api, opentelemetry-sdk, opentelemetry-exporter-otlp (all optional)

ARCHITECTURE NOTES:
Modules grab a tracer at import time with get_tracer(__name__). Until
init_telemetry() installs a provider, every span is a no-op, so the
package works with the otel extras missing.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from gemini_command.config import OpenTelemetrySettings

logger = logging.getLogger(__name__)

_provider: Any = None


class NoOpSpan:
    """Span stand-in used while tracing is off."""

    def __enter__(self) -> NoOpSpan:
        return self

    def __exit__(self, *args: object) -> None:
        pass

    def set_attribute(self, key: str, value: object) -> None:  # noqa: ARG002
        pass

    def record_exception(self, exception: BaseException) -> None:  # noqa: ARG002
        pass


class LazyTracer:
    """
    Tracer that looks up the real otel tracer when a span starts.

    Returns NoOpSpan instances until a provider has been installed.
    """

    def __init__(self, name: str) -> None:
        self._name = name

    def start_as_current_span(self, name: str, **kwargs: object) -> Any:
        if _provider is None:
            return NoOpSpan()
        from opentelemetry import trace

        return trace.get_tracer(self._name).start_as_current_span(name, **kwargs)


def init_telemetry(settings: OpenTelemetrySettings) -> bool:
    """
    Install a tracer provider if tracing is enabled.

    Safe to call more than once and without the otel packages installed.

    Args:
        settings: OpenTelemetry configuration settings.

    Returns:
        True if spans will be exported.
    """
    global _provider

    if _provider is not None:
        return True
    if not settings.enabled:
        logger.debug("Telemetry disabled")
        return False

    try:
        from opentelemetry import trace
        from opentelemetry.sdk.resources import Resource
        from opentelemetry.sdk.trace import TracerProvider
        from opentelemetry.sdk.trace.export import BatchSpanProcessor, ConsoleSpanExporter
    except ImportError:
        logger.warning(
            "OpenTelemetry packages not installed. "
            "Install with: pip install gemini-command[observability]"
        )
        return False

    provider = TracerProvider(resource=Resource.create({"service.name": settings.service_name}))

    if settings.endpoint:
        try:
            from opentelemetry.exporter.otlp.proto.grpc.trace_exporter import OTLPSpanExporter
        except ImportError:
            logger.warning("OTLP exporter not available, exporting to console")
            provider.add_span_processor(BatchSpanProcessor(ConsoleSpanExporter()))
        else:
            provider.add_span_processor(
                BatchSpanProcessor(OTLPSpanExporter(endpoint=settings.endpoint))
            )
            logger.info(f"OTLP exporter configured: {settings.endpoint}")
    else:
        provider.add_span_processor(BatchSpanProcessor(ConsoleSpanExporter()))

    trace.set_tracer_provider(provider)
    _provider = provider
    logger.info(f"Telemetry initialized: service={settings.service_name}")
    return True


def get_tracer(name: str) -> LazyTracer:
    """Get a tracer for the given module name (typically __name__)."""
    return LazyTracer(name)


def shutdown_telemetry() -> None:
    """Flush pending spans and forget the installed provider."""
    global _provider

    if _provider is not None:
        _provider.shutdown()
        logger.debug("Telemetry shutdown complete")
    _provider = None
