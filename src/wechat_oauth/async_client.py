"""Async WeChat web authorization client.

Exchanges authorization codes, refreshes and checks access tokens, and
fetches user profiles. Each operation issues exactly one GET request.
Provider errors come back as :class:`ProviderError` values; transport
failures are raised.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Self

from .config import WeChatOAuthConfig
from .core.http_executor import AsyncHTTPExecutor
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
from .http import create_async_http_client
from .telemetry import configure_telemetry, trace_operation

if TYPE_CHECKING:
    import httpx

    from .core.http_executor import AsyncTransport
    from .models import Language, ProfileResult, ProviderError, TokenResult


class AsyncWeChatOAuthClient:
    """Asynchronous client for the WeChat web authorization flow."""

    def __init__(
        self,
        app_id: str | None = None,
        app_secret: str | None = None,
        *,
        config: WeChatOAuthConfig | None = None,
        transport: AsyncTransport | None = None,
        http_transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Initialize async client.

        Args:
            app_id: Application ID (AppID).
            app_secret: Application secret (AppSecret).
            config: Full configuration, used instead of the credentials.
            transport: Custom transport; no HTTP client is created when given.
            http_transport: httpx transport for the owned HTTP client.

        Raises:
            InvalidConfigError: If credentials are missing or invalid.
        """
        self.config = config or WeChatOAuthConfig.from_credentials(app_id, app_secret)
        configure_telemetry(self.config.telemetry)
        self._ops = TokenOperations(self.config)
        self._http: httpx.AsyncClient | None = None
        if transport is None:
            self._http = create_async_http_client(self.config, transport=http_transport)
            transport = AsyncHTTPExecutor(self._http)
        self._transport = transport

    async def __aenter__(self) -> Self:
        return self

    async def __aexit__(self, *args: Any) -> None:
        await self.close()

    async def close(self) -> None:
        """Close the owned HTTP client."""
        if self._http is not None:
            await self._http.aclose()

    async def exchange_code(self, code: str) -> TokenResult:
        """Exchange an authorization code for an access token.

        Args:
            code: Code handed to the redirect URI after user consent.

        Returns:
            TokenPair, or ProviderError (e.g. 40029 invalid code).

        Raises:
            ValidationError: If ``code`` is empty.
            WeChatOAuthError: On transport failure.
        """
        params = self._ops.build_exchange_params(code)
        with trace_operation("exchange_code"):
            body = await self._transport.get(ACCESS_TOKEN_PATH, params)
            return parse_token_response(body)

    async def refresh_token(
        self,
        refresh_token: str,
        grant_type: str = REFRESH_TOKEN_GRANT,
    ) -> TokenResult:
        """Refresh an access token.

        A still-valid access token keeps its value and gets a renewed
        expiry; an expired one is replaced. An expired refresh token
        (30 days, not renewable) yields a ProviderError and the user has
        to authorize again.

        Args:
            refresh_token: Refresh token from a previous exchange.
            grant_type: Grant type sent to WeChat.

        Returns:
            TokenPair or ProviderError.
        """
        params = self._ops.build_refresh_params(refresh_token, grant_type)
        with trace_operation("refresh_token"):
            body = await self._transport.get(REFRESH_TOKEN_PATH, params)
            return parse_token_response(body)

    async def check_token(self, user_id: str, access_token: str) -> ProviderError:
        """Check whether an access token is valid.

        Returns:
            Error envelope; ``errcode == 0`` means valid.
        """
        params = self._ops.build_check_params(user_id, access_token)
        with trace_operation("check_token"):
            body = await self._transport.get(CHECK_TOKEN_PATH, params)
            return parse_check_response(body)

    async def is_token_valid(self, user_id: str, access_token: str) -> bool:
        """Check an access token and reduce the result to a boolean."""
        result = await self.check_token(user_id, access_token)
        return result.ok

    async def fetch_user_profile(
        self,
        user_id: str,
        access_token: str,
        language: Language | str | None = None,
    ) -> ProfileResult:
        """Fetch the authorized user's profile.

        Args:
            user_id: OpenID of the user.
            access_token: Access token issued for that user.
            language: ``zh_CN``, ``zh_TW`` or ``en``; WeChat defaults to ``zh_CN``.

        Returns:
            UserProfile or ProviderError.
        """
        params = self._ops.build_user_info_params(user_id, access_token, language)
        with trace_operation("fetch_user_profile"):
            body = await self._transport.get(USER_INFO_PATH, params)
            return parse_user_profile(body)
