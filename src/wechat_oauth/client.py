"""Synchronous WeChat web authorization client."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Self

from .config import WeChatOAuthConfig
from .core.http_executor import SyncHTTPExecutor
from .core.token_ops import (
    ACCESS_TOKEN_PATH,
    CHECK_TOKEN_PATH,
    REFRESH_TOKEN_GRANT,
    REFRESH_TOKEN_PATH,
    USER_INFO_PATH,
    TokenOperations,
    parse_check_response,
    parse_token_response,
    parse_user_profile,
)
from .http import create_http_client
from .telemetry import configure_telemetry, trace_operation

if TYPE_CHECKING:
    import httpx

    from .core.http_executor import Transport
    from .models import Language, ProfileResult, ProviderError, TokenResult


class WeChatOAuthClient:
    """Synchronous client for the WeChat web authorization flow.

    Mirrors :class:`~wechat_oauth.async_client.AsyncWeChatOAuthClient`
    for callers without an event loop.
    """

    def __init__(
        self,
        app_id: str | None = None,
        app_secret: str | None = None,
        *,
        config: WeChatOAuthConfig | None = None,
        transport: Transport | None = None,
        http_transport: httpx.BaseTransport | None = None,
    ) -> None:
        self.config = config or WeChatOAuthConfig.from_credentials(app_id, app_secret)
        configure_telemetry(self.config.telemetry)
        self._ops = TokenOperations(self.config)
        self._http: httpx.Client | None = None
        if transport is None:
            self._http = create_http_client(self.config, transport=http_transport)
            transport = SyncHTTPExecutor(self._http)
        self._transport = transport

    def __enter__(self) -> Self:
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()

    def close(self) -> None:
        """Close the owned HTTP client."""
        if self._http is not None:
            self._http.close()

    def exchange_code(self, code: str) -> TokenResult:
        """Exchange an authorization code for an access token."""
        params = self._ops.build_exchange_params(code)
        with trace_operation("exchange_code"):
            return parse_token_response(self._transport.get(ACCESS_TOKEN_PATH, params))

    def refresh_token(
        self,
        refresh_token: str,
        grant_type: str = REFRESH_TOKEN_GRANT,
    ) -> TokenResult:
        """Refresh an access token."""
        params = self._ops.build_refresh_params(refresh_token, grant_type)
        with trace_operation("refresh_token"):
            return parse_token_response(self._transport.get(REFRESH_TOKEN_PATH, params))

    def check_token(self, user_id: str, access_token: str) -> ProviderError:
        """Check whether an access token is valid (``errcode == 0``)."""
        params = self._ops.build_check_params(user_id, access_token)
        with trace_operation("check_token"):
            return parse_check_response(self._transport.get(CHECK_TOKEN_PATH, params))

    def is_token_valid(self, user_id: str, access_token: str) -> bool:
        """Check an access token and reduce the result to a boolean."""
        return self.check_token(user_id, access_token).ok

    def fetch_user_profile(
        self,
        user_id: str,
        access_token: str,
        language: Language | str | None = None,
    ) -> ProfileResult:
        """Fetch the authorized user's profile."""
        params = self._ops.build_user_info_params(user_id, access_token, language)
        with trace_operation("fetch_user_profile"):
            return parse_user_profile(self._transport.get(USER_INFO_PATH, params))
