"""
connectivity.py

PURPOSE: Pre-flight DNS check for the API host.
DEPENDENCIES: None (asyncio)

ARCHITECTURE NOTES:
The probe is a diagnostic. Whether a failed probe stops a request is
decided by the caller (see TransportSettings.strict_probe).
"""

import asyncio
import logging
import socket

from gemini_command.config import API_HOST
from gemini_command.errors import ConnectivityError

logger = logging.getLogger(__name__)


async def probe_connectivity(host: str = API_HOST, port: int = 443) -> list[str]:
    """
    Resolve the API host to socket addresses.

    Args:
        host: Host name to resolve.
        port: Port to resolve for.

    Returns:
        Resolved addresses as "ip:port" strings, in resolver order.

    Raises:
        ConnectivityError: If resolution fails or yields nothing.
    """
    logger.info(f"Testing basic DNS resolution for: {host}:{port}")
    loop = asyncio.get_running_loop()
    try:
        infos = await loop.getaddrinfo(host, port, type=socket.SOCK_STREAM)
    except OSError as e:
        logger.warning(f"DNS resolution failed: {e}")
        raise ConnectivityError(f"DNS resolution failed for {host}: {e}") from e

    addresses: list[str] = []
    for family, _type, _proto, _canon, sockaddr in infos:
        ip, resolved_port = sockaddr[0], sockaddr[1]
        address = f"[{ip}]:{resolved_port}" if family == socket.AF_INET6 else f"{ip}:{resolved_port}"
        if address not in addresses:
            addresses.append(address)
            logger.info(f"Resolved address: {address}")

    if not addresses:
        raise ConnectivityError(f"DNS resolution returned no addresses for {host}")
    return addresses
