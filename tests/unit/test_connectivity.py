"""
TEST DOC: Connectivity Probe

WHAT: Tests for probe_connectivity and the transport builder
WHY: The probe is diagnostic output and must report failures clearly
HOW: Replace the event loop's getaddrinfo with canned results

CASES:
- Addresses formatted as ip:port, IPv6 bracketed
- Duplicate addresses collapsed
- Resolution errors raised as ConnectivityError

EDGE CASES:
- Empty resolver result
"""

import asyncio
import socket

import httpx
import pytest

from gemini_command.config import TransportSettings
from gemini_command.errors import ConnectivityError, TransportError
from gemini_command.llm.connectivity import probe_connectivity
from gemini_command.llm.transport import build_async_client, keepalive_socket_options


def fake_resolver(result=None, error=None):
    """Build an async getaddrinfo replacement."""

    async def getaddrinfo(host, port, **kwargs):
        if error is not None:
            raise error
        return result

    return getaddrinfo


class TestProbe:
    """Tests for probe_connectivity."""

    @pytest.mark.asyncio
    async def test_resolves_addresses(self, monkeypatch):
        """Resolved addresses are returned in order."""
        loop = asyncio.get_running_loop()
        monkeypatch.setattr(
            loop,
            "getaddrinfo",
            fake_resolver(
                [
                    (socket.AF_INET, socket.SOCK_STREAM, 6, "", ("142.250.1.95", 443)),
                    (socket.AF_INET6, socket.SOCK_STREAM, 6, "", ("2607:f8b0::5f", 443, 0, 0)),
                    (socket.AF_INET, socket.SOCK_STREAM, 6, "", ("142.250.1.95", 443)),
                ]
            ),
        )

        addresses = await probe_connectivity("generativelanguage.googleapis.com", 443)

        assert addresses == ["142.250.1.95:443", "[2607:f8b0::5f]:443"]

    @pytest.mark.asyncio
    async def test_resolution_failure(self, monkeypatch):
        """Resolver errors become ConnectivityError."""
        loop = asyncio.get_running_loop()
        error = socket.gaierror(socket.EAI_NONAME, "Name or service not known")
        monkeypatch.setattr(loop, "getaddrinfo", fake_resolver(error=error))

        with pytest.raises(ConnectivityError) as exc_info:
            await probe_connectivity("nowhere.invalid")

        assert isinstance(exc_info.value, TransportError)
        assert exc_info.value.__cause__ is error
        assert exc_info.value.status is None

    @pytest.mark.asyncio
    async def test_empty_result(self, monkeypatch):
        """An empty resolver result is a failure."""
        loop = asyncio.get_running_loop()
        monkeypatch.setattr(loop, "getaddrinfo", fake_resolver([]))

        with pytest.raises(ConnectivityError, match="no addresses"):
            await probe_connectivity("empty.test")


class TestTransport:
    """Tests for the httpx client builder."""

    def test_keepalive_enabled(self):
        """SO_KEEPALIVE is always set."""
        options = keepalive_socket_options(60)
        assert (socket.SOL_SOCKET, socket.SO_KEEPALIVE, 1) in options

    @pytest.mark.asyncio
    async def test_client_timeout(self):
        """The client uses the configured timeout."""
        client = build_async_client(TransportSettings(timeout_seconds=12.5))
        try:
            assert isinstance(client, httpx.AsyncClient)
            assert client.timeout.read == 12.5
            assert client.timeout.connect == 12.5
        finally:
            await client.aclose()
