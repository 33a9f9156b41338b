"""
Startup banner for LAN clients.

When running on a local Wi-Fi network, the mobile app (React Native/Expo)
should use the LAN address printed here instead of 'localhost'.

Example: http://192.168.1.x:8080/api/...
"""

import logging
import socket

from src.config import settings

logger = logging.getLogger(__name__)

FALLBACK_HOST = "localhost"
BANNER_RULE = "-" * 58

_ANNOUNCED = False


def resolve_lan_address() -> str:
    """
    Best-effort lookup of this machine's network-reachable address.

    Returns:
        The resolved IP, or "localhost" when the host name cannot be resolved.
    """
    try:
        return socket.gethostbyname(socket.gethostname())
    except OSError:
        logger.warning("Could not determine LAN IP address, falling back to localhost")
        return FALLBACK_HOST


def format_banner(host: str, port: int) -> str:
    lines = [
        "",
        BANNER_RULE,
        f"{settings.SERVICE_NAME} running at: http://{host}:{port}",
        f"External access enabled: http://0.0.0.0:{port}",
        BANNER_RULE,
        "",
    ]
    return "\n".join(lines)


def announce_startup(port: int) -> None:
    """
    Print where LAN clients can reach the service. Only the first call per
    process prints anything.

    Args:
        port: Port the server is listening on
    """
    global _ANNOUNCED
    if _ANNOUNCED:
        return
    _ANNOUNCED = True

    host = resolve_lan_address()
    print(format_banner(host, port), flush=True)


def reset_announcer() -> None:
    global _ANNOUNCED
    _ANNOUNCED = False
