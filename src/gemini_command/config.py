"""
config.py

PURPOSE: Configuration loading and settings management.
DEPENDENCIES: pydantic

ARCHITECTURE NOTES:
Configuration comes from multiple sources (in priority order):
1. CLI flags (highest priority)
2. Environment variables (GEMINI_COMMAND_* and GEMINI_API_KEY)
3. Defaults (lowest priority)

Transport settings are a plain object handed to the client factory at
startup; nothing in the package keeps a shared HTTP client around.
"""

import os
from enum import Enum

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings

API_HOST = "generativelanguage.googleapis.com"


class LogLevel(str, Enum):
    """Logging levels accepted by the CLI and settings."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class GeminiSettings(BaseSettings):
    """Settings for the Gemini generateContent endpoint."""

    model: str = Field(
        default="gemini-1.5-flash",
        description="Model name/ID",
    )
    host: str = Field(
        default=API_HOST,
        description="API host name (also sent as the Host header)",
    )
    base_url: str = Field(
        default=f"https://{API_HOST}/v1beta",
        description="API base URL",
    )
    temperature: float = Field(
        default=0.1,
        ge=0.0,
        le=2.0,
        description="Sampling temperature",
    )
    top_k: int = Field(
        default=1,
        gt=0,
        description="Top-k sampling",
    )
    top_p: float = Field(
        default=1.0,
        ge=0.0,
        le=1.0,
        description="Nucleus sampling",
    )
    api_key: str = Field(
        default="",
        description="Gemini API key (or set GEMINI_API_KEY env var)",
    )

    model_config = {"env_prefix": "GEMINI_COMMAND_LLM_"}


class TransportSettings(BaseSettings):
    """Settings for the HTTP transport and the pre-flight probe."""

    timeout_seconds: float = Field(
        default=30.0,
        gt=0,
        description="Total request timeout",
    )
    tcp_keepalive_seconds: int = Field(
        default=60,
        gt=0,
        description="Idle time before TCP keepalive probes start",
    )
    max_idle_connections: int = Field(
        default=0,
        ge=0,
        description="Idle connections kept in the pool",
    )
    probe_before_request: bool = Field(
        default=True,
        description="Resolve the API host before each request",
    )
    strict_probe: bool = Field(
        default=False,
        description="Abort the request when the probe fails",
    )

    model_config = {"env_prefix": "GEMINI_COMMAND_TRANSPORT_"}


class OpenTelemetrySettings(BaseSettings):
    """Settings for optional tracing."""

    enabled: bool = Field(
        default=False,
        description="Enable OpenTelemetry tracing",
    )
    service_name: str = Field(
        default="gemini-command",
        description="Service name reported on spans",
    )
    endpoint: str = Field(
        default="",
        description="OTLP gRPC endpoint (console export when empty)",
    )

    model_config = {"env_prefix": "GEMINI_COMMAND_OTEL_"}


class Settings(BaseSettings):
    """Main application settings."""

    log_level: LogLevel = Field(
        default=LogLevel.INFO,
        description="Logging level",
    )
    llm: GeminiSettings = Field(
        default_factory=GeminiSettings,
        description="Gemini API settings",
    )
    transport: TransportSettings = Field(
        default_factory=TransportSettings,
        description="HTTP transport settings",
    )
    otel: OpenTelemetrySettings = Field(
        default_factory=OpenTelemetrySettings,
        description="Tracing settings",
    )

    model_config = {"env_prefix": "GEMINI_COMMAND_"}

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, v: object) -> object:
        """Accept level names in any case."""
        return v.upper() if isinstance(v, str) else v


def get_settings() -> Settings:
    """Get application settings, loading from environment."""
    # The standard Gemini env var wins over the prefixed one
    llm_settings = GeminiSettings()
    api_key = os.environ.get("GEMINI_API_KEY", "")
    if api_key:
        llm_settings = llm_settings.model_copy(update={"api_key": api_key})

    return Settings(llm=llm_settings)
