"""HTTP transport construction."""

from typing import Dict, Optional

import httpx

from dogceo.config import Settings, get_settings


def build_async_client(
    settings: Optional[Settings] = None,
    extra_headers: Optional[Dict[str, str]] = None,
) -> httpx.AsyncClient:
    """
    Create an ``httpx.AsyncClient`` for the Dog CEO API.

    Args:
        settings: Settings to use (cached settings if None)
        extra_headers: Headers added on top of the defaults

    Returns:
        A new, unopened AsyncClient. The caller owns and closes it.
    """
    settings = settings or get_settings()
    headers = {
        "User-Agent": settings.user_agent,
        "Accept": "application/json",
    }
    if extra_headers:
        headers.update(extra_headers)
    return httpx.AsyncClient(
        timeout=httpx.Timeout(settings.http_timeout_seconds),
        follow_redirects=True,
        headers=headers,
    )
