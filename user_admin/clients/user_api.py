"""
HTTP client initialization for the remote User API
"""

import logging
from typing import Optional

import httpx

from user_admin.core.config import settings

logger = logging.getLogger(__name__)

# Global HTTP client
_client: Optional[httpx.AsyncClient] = None


def user_api_client_init(base_url: Optional[str] = None,
                         timeout: Optional[float] = None,
                         transport: Optional[httpx.AsyncBaseTransport] = None) -> httpx.AsyncClient:
    """
    Initialize the shared async HTTP client

    Args:
        base_url: API base location, defaults to USER_API_URL
        timeout: Request timeout in seconds, defaults to USER_API_TIMEOUT
            (None keeps the httpx default)
        transport: Optional transport override

    Returns:
        httpx.AsyncClient: Initialized client
    """
    global _client

    base_url = base_url or settings.USER_API_URL
    if timeout is None:
        timeout = settings.USER_API_TIMEOUT

    client_config = {
        "base_url": base_url,
        "headers": {"Accept": "application/json"},
    }
    if timeout is not None:
        client_config["timeout"] = timeout
    if transport is not None:
        client_config["transport"] = transport

    _client = httpx.AsyncClient(**client_config)
    logger.info(f"User API client initialized: {base_url}")
    return _client


def get_user_api_client() -> Optional[httpx.AsyncClient]:
    """Get the shared client (None before initialization)"""
    return _client


async def close_user_api_client() -> None:
    """Close the shared client if it is open"""
    global _client

    if _client is not None:
        await _client.aclose()
        logger.info("User API client closed")
        _client = None
