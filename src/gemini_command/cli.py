"""
cli.py

PURPOSE: Command-line interface for the Gemini command client.
DEPENDENCIES: typer, rich

ARCHITECTURE NOTES:
The CLI provides commands for:
- ask: Send one prompt and print the validated command payload
- validate: Validate a saved API response body offline
- probe: Resolve the API host
- config: Show current configuration
Any error ends the command with exit code 1.
"""

import asyncio
import logging
from pathlib import Path
from typing import Annotated

import typer
from pydantic import ValidationError
from rich.console import Console

from gemini_command import __version__
from gemini_command.config import LogLevel, get_settings
from gemini_command.errors import GeminiCommandError
from gemini_command.llm.client import LLMRequest
from gemini_command.llm.connectivity import probe_connectivity
from gemini_command.llm.gemini import create_gemini_client
from gemini_command.models.command import CommandPayload
from gemini_command.observability import init_telemetry, shutdown_telemetry
from gemini_command.ui import plain
from gemini_command.validator import validate_response

app = typer.Typer(
    name="gemini-command",
    help="Ask Gemini for a JSON command and validate the answer.",
    add_completion=False,
)

console = Console()

DEFAULT_PROMPT = "Hello, world!"


def version_callback(value: bool) -> None:
    """Show version and exit."""
    if value:
        console.print(f"gemini-command version {__version__}")
        raise typer.Exit()


def configure_logging(level: LogLevel) -> None:
    """Configure root logging for CLI runs."""
    logging.basicConfig(
        level=level.value,
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )


@app.callback()
def main(
    log_level: Annotated[
        LogLevel | None,
        typer.Option(
            "--log-level",
            "-l",
            case_sensitive=False,
            help="Logging level (defaults to GEMINI_COMMAND_LOG_LEVEL or INFO).",
        ),
    ] = None,
    _version: Annotated[
        bool,
        typer.Option(
            "--version",
            "-v",
            help="Show version and exit.",
            callback=version_callback,
            is_eager=True,
        ),
    ] = False,
) -> None:
    """Gemini Command - Ask a model for a validated JSON command."""
    if log_level is None:
        try:
            log_level = get_settings().log_level
        except ValidationError as e:
            plain.print_error(f"Invalid configuration: {e}")
            raise typer.Exit(1) from None
    configure_logging(log_level)


@app.command()
def ask(
    prompt: Annotated[
        str,
        typer.Argument(help="Prompt appended to the command preamble"),
    ] = DEFAULT_PROMPT,
    model: Annotated[
        str | None,
        typer.Option(
            "--model",
            "-m",
            help="Model to use (overrides config)",
        ),
    ] = None,
    probe: Annotated[
        bool | None,
        typer.Option(
            "--probe/--no-probe",
            help="Resolve the API host before sending (overrides config)",
        ),
    ] = None,
    strict_probe: Annotated[
        bool,
        typer.Option(
            "--strict-probe",
            help="Abort when the host cannot be resolved",
        ),
    ] = False,
) -> None:
    """Send a prompt and print the validated command payload."""
    settings = get_settings()
    init_telemetry(settings.otel)

    if not settings.llm.api_key:
        plain.print_error("Error: GEMINI_API_KEY not set")
        console.print("Set it with: export GEMINI_API_KEY=your-key-here")
        raise typer.Exit(1)

    llm_settings = settings.llm
    if model:
        llm_settings = llm_settings.model_copy(update={"model": model})

    transport = settings.transport
    updates: dict[str, bool] = {}
    if probe is not None:
        updates["probe_before_request"] = probe
    if strict_probe:
        updates["strict_probe"] = True
    if updates:
        transport = transport.model_copy(update=updates)

    request = LLMRequest(
        prompt=prompt,
        temperature=llm_settings.temperature,
        top_k=llm_settings.top_k,
        top_p=llm_settings.top_p,
    )

    async def do_ask() -> CommandPayload:
        async with create_gemini_client(
            settings.llm.api_key, settings=llm_settings, transport=transport
        ) as client:
            return await client.complete_command(request)

    try:
        payload = asyncio.run(do_ask())
    except GeminiCommandError as e:
        plain.print_error(str(e))
        raise typer.Exit(1) from None
    finally:
        shutdown_telemetry()

    plain.print_payload(payload)


@app.command()
def validate(
    response_file: Annotated[
        Path,
        typer.Argument(
            help="Path to a saved generateContent response body",
            exists=True,
            readable=True,
        ),
    ],
    status: Annotated[
        int,
        typer.Option(
            "--status",
            "-s",
            help="HTTP status the response was received with",
        ),
    ] = 200,
) -> None:
    """Validate a saved API response body."""
    try:
        text = validate_response(status, response_file.read_bytes())
    except GeminiCommandError as e:
        plain.print_error(str(e))
        raise typer.Exit(1) from None

    payload = CommandPayload.model_validate_json(text)
    plain.print_success("Valid command payload")
    plain.print_payload(payload)


@app.command()
def probe(
    port: Annotated[
        int,
        typer.Option(
            "--port",
            "-p",
            help="Port to resolve for",
        ),
    ] = 443,
) -> None:
    """Resolve the API host and print its addresses."""
    host = get_settings().llm.host
    try:
        addresses = asyncio.run(probe_connectivity(host, port))
    except GeminiCommandError as e:
        plain.print_error(str(e))
        raise typer.Exit(1) from None

    plain.print_addresses(host, addresses)


@app.command("config")
def config_cmd() -> None:
    """Show current configuration."""
    settings = get_settings()
    console.print("[bold]Current Configuration:[/bold]")
    console.print(f"  Log level: {settings.log_level.value}")
    console.print()
    console.print("[bold]Gemini Settings:[/bold]")
    console.print(f"  Model: {settings.llm.model}")
    console.print(f"  Base URL: {settings.llm.base_url}")
    console.print(f"  Temperature: {settings.llm.temperature}")
    console.print(f"  Top-k: {settings.llm.top_k}")
    console.print(f"  Top-p: {settings.llm.top_p}")
    api_key_status = "set" if settings.llm.api_key else "not set"
    console.print(f"  API Key: {api_key_status}")
    console.print()
    console.print("[bold]Transport Settings:[/bold]")
    console.print(f"  Timeout: {settings.transport.timeout_seconds}s")
    console.print(f"  TCP keepalive: {settings.transport.tcp_keepalive_seconds}s")
    console.print(f"  Max idle connections: {settings.transport.max_idle_connections}")
    console.print(f"  Probe before request: {settings.transport.probe_before_request}")
    console.print(f"  Strict probe: {settings.transport.strict_probe}")
    console.print()
    console.print("[bold]OpenTelemetry Settings:[/bold]")
    console.print(f"  Enabled: {settings.otel.enabled}")
    console.print(f"  Service name: {settings.otel.service_name}")
    endpoint_status = settings.otel.endpoint if settings.otel.endpoint else "(console only)"
    console.print(f"  Endpoint: {endpoint_status}")


if __name__ == "__main__":
    app()
