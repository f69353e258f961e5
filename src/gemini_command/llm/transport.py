"""
transport.py

PURPOSE: Build the httpx client used for API calls from explicit settings.
DEPENDENCIES: httpx

ARCHITECTURE NOTES:
The client is constructed once at startup from TransportSettings and
passed to whoever makes requests. No idle connections are pooled by
default, and TCP keepalive is enabled on every socket.
"""

import socket

import httpx

from gemini_command.config import TransportSettings


def keepalive_socket_options(idle_seconds: int) -> list[tuple[int, int, int]]:
    """Socket options enabling TCP keepalive after the given idle time."""
    options = [(socket.SOL_SOCKET, socket.SO_KEEPALIVE, 1)]
    # TCP_KEEPIDLE is Linux-only; macOS calls it TCP_KEEPALIVE
    if hasattr(socket, "TCP_KEEPIDLE"):
        options.append((socket.IPPROTO_TCP, socket.TCP_KEEPIDLE, idle_seconds))
    elif hasattr(socket, "TCP_KEEPALIVE"):
        options.append((socket.IPPROTO_TCP, socket.TCP_KEEPALIVE, idle_seconds))
    return options


def build_async_client(
    settings: TransportSettings | None = None,
) -> httpx.AsyncClient:
    """
    Create an httpx.AsyncClient configured from transport settings.

    Args:
        settings: Transport settings (defaults if None).

    Returns:
        A new client; the caller owns it and must close it.
    """
    settings = settings or TransportSettings()
    transport = httpx.AsyncHTTPTransport(
        limits=httpx.Limits(max_keepalive_connections=settings.max_idle_connections),
        socket_options=keepalive_socket_options(settings.tcp_keepalive_seconds),
    )
    return httpx.AsyncClient(
        transport=transport,
        timeout=httpx.Timeout(settings.timeout_seconds),
    )
