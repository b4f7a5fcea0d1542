"""HTTP client factories for the WeChat OAuth client."""

from __future__ import annotations

from typing import TYPE_CHECKING

import httpx

if TYPE_CHECKING:
    from .config import WeChatOAuthConfig


def _timeout(config: WeChatOAuthConfig) -> httpx.Timeout:
    return httpx.Timeout(
        connect=config.connect_timeout,
        read=config.timeout,
        write=config.timeout,
        pool=config.timeout,
    )


def _headers(config: WeChatOAuthConfig) -> dict[str, str]:
    return {
        "User-Agent": config.user_agent,
        "Accept": "application/json",
    }


def create_http_client(
    config: WeChatOAuthConfig,
    *,
    transport: httpx.BaseTransport | None = None,
) -> httpx.Client:
    """Create configured sync HTTP client.

    Args:
        config: Client configuration.
        transport: Optional httpx transport (e.g. ``httpx.MockTransport``).

    Returns:
        Configured httpx.Client.
    """
    return httpx.Client(
        base_url=config.base_url_str,
        timeout=_timeout(config),
        headers=_headers(config),
        follow_redirects=False,
        transport=transport,
    )


def create_async_http_client(
    config: WeChatOAuthConfig,
    *,
    transport: httpx.AsyncBaseTransport | None = None,
) -> httpx.AsyncClient:
    """Create configured async HTTP client.

    Args:
        config: Client configuration.
        transport: Optional httpx transport (e.g. ``httpx.MockTransport``).

    Returns:
        Configured httpx.AsyncClient.
    """
    return httpx.AsyncClient(
        base_url=config.base_url_str,
        timeout=_timeout(config),
        headers=_headers(config),
        follow_redirects=False,
        transport=transport,
    )
