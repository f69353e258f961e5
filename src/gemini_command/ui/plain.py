"""
plain.py

PURPOSE: Plain text output formatting for the CLI.
DEPENDENCIES: rich

ARCHITECTURE NOTES:
This module provides formatted console output using Rich.
It handles:
- Validated command payloads
- Resolved addresses from the connectivity probe
- Messages and errors
"""

from rich.console import Console
from rich.panel import Panel
from rich.text import Text

from gemini_command.models.command import CommandPayload

# Global console instance
console = Console()


def print_error(text: str) -> None:
    """Print an error message."""
    # Error bodies can contain brackets, so no markup
    console.print(Text(text, style="red"))


def print_success(text: str) -> None:
    """Print a success message."""
    console.print(f"[green]{text}[/green]")


def print_payload(payload: CommandPayload) -> None:
    """Print a validated command payload in a panel."""
    title = Text(f"command: {payload.command.value}", style="bold")
    console.print(Panel(title, border_style="blue"))
    console.print_json(payload.model_dump_json())


def print_addresses(host: str, addresses: list[str]) -> None:
    """Print the addresses a host resolved to."""
    console.print(f"[bold]{host}[/bold] resolved to:")
    for address in addresses:
        console.print(f"  {address}")
