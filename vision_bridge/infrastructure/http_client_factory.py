"""Pooled async HTTP client shared by the Azure clients."""
import logging
from typing import Optional

import httpx

from ..core.config import get_settings

logger = logging.getLogger(__name__)

_shared_client: Optional[httpx.AsyncClient] = None

POOL_LIMITS = httpx.Limits(max_keepalive_connections=20, max_connections=100, keepalive_expiry=30.0)


def get_shared_http_client() -> httpx.AsyncClient:
    """
    Lazily create the process-wide client.

    Both Cognitive Services resources are called through it, so keep-alive
    connections survive between requests. The default timeout comes from
    UPSTREAM_TIMEOUT_SECONDS.
    """
    global _shared_client

    if _shared_client is None:
        timeout = get_settings().upstream_timeout_seconds
        _shared_client = httpx.AsyncClient(timeout=timeout, limits=POOL_LIMITS, http2=True)
        logger.info(f"Created shared upstream HTTP client (timeout {timeout}s)")

    return _shared_client


async def close_shared_http_client() -> None:
    """Close the shared client on shutdown; a no-op if it was never created."""
    global _shared_client

    if _shared_client is not None:
        await _shared_client.aclose()
        _shared_client = None
        logger.info("Closed shared upstream HTTP client")
