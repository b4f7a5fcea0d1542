"""Request building and response discrimination for the WeChat OAuth client.

Shared by the sync and async clients so both put the same parameters on
the wire and read the same shapes back.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from pydantic import ValidationError as PydanticValidationError

from ..models import ProviderError, TokenPair, UserProfile
from ..telemetry import get_logger
from .errors import ErrorFactory

if TYPE_CHECKING:
    from ..config import WeChatOAuthConfig
    from ..models import Language, ProfileResult, TokenResult

ACCESS_TOKEN_PATH = "/oauth2/access_token"
REFRESH_TOKEN_PATH = "/oauth2/refresh_token"
CHECK_TOKEN_PATH = "/auth"
USER_INFO_PATH = "/userinfo"

AUTHORIZATION_CODE_GRANT = "authorization_code"
REFRESH_TOKEN_GRANT = "refresh_token"


def is_error_envelope(body: dict[str, Any]) -> bool:
    """Whether a body is the provider error envelope (keyed on ``errcode``)."""
    return "errcode" in body


def _parse_error(body: dict[str, Any]) -> ProviderError:
    try:
        error = ProviderError.model_validate(body)
    except PydanticValidationError as e:
        raise ErrorFactory.invalid_response(
            f"Malformed error envelope: {e.error_count()} validation errors",
            body=sorted(body),
        ) from e
    if not error.ok:
        get_logger().info(
            "wechat_provider_error",
            errcode=error.error_code,
            errmsg=error.error_message,
        )
    return error


def parse_token_response(body: dict[str, Any]) -> TokenResult:
    """Discriminate a token endpoint body into TokenPair or ProviderError.

    Raises:
        InvalidResponseError: If the body is neither shape.
    """
    if is_error_envelope(body):
        return _parse_error(body)
    try:
        return TokenPair.model_validate(body)
    except PydanticValidationError as e:
        raise ErrorFactory.invalid_response(
            f"Malformed token response: {e.error_count()} validation errors",
            body=sorted(body),
        ) from e


def parse_user_profile(body: dict[str, Any]) -> ProfileResult:
    """Discriminate a userinfo body into UserProfile or ProviderError.

    Raises:
        InvalidResponseError: If the body is neither shape.
    """
    if is_error_envelope(body):
        return _parse_error(body)
    try:
        return UserProfile.model_validate(body)
    except PydanticValidationError as e:
        raise ErrorFactory.invalid_response(
            f"Malformed user profile: {e.error_count()} validation errors",
            body=sorted(body),
        ) from e


def parse_check_response(body: dict[str, Any]) -> ProviderError:
    """Parse the token check body, which is always the error envelope.

    Raises:
        InvalidResponseError: If ``errcode`` is missing.
    """
    if not is_error_envelope(body):
        raise ErrorFactory.invalid_response(
            "Token check response has no errcode",
            body=sorted(body),
        )
    return _parse_error(body)


class TokenOperations:
    """Query parameter builders shared by sync and async clients."""

    def __init__(self, config: WeChatOAuthConfig) -> None:
        self.config = config

    def build_exchange_params(self, code: str) -> dict[str, str]:
        """Build query for exchanging an authorization code.

        Raises:
            ValidationError: If ``code`` is empty.
        """
        if not code:
            raise ErrorFactory.missing_argument("code")
        return {
            "appid": self.config.app_id,
            "secret": self.config.app_secret.get_secret_value(),
            "code": code,
            "grant_type": AUTHORIZATION_CODE_GRANT,
        }

    def build_refresh_params(
        self,
        refresh_token: str,
        grant_type: str = REFRESH_TOKEN_GRANT,
    ) -> dict[str, str]:
        """Build query for refreshing an access token.

        The application secret is not part of this request; WeChat
        authenticates the refresh with the refresh token itself.
        """
        return {
            "appid": self.config.app_id,
            "grant_type": grant_type,
            "refresh_token": refresh_token,
        }

    def build_check_params(self, user_id: str, access_token: str) -> dict[str, str]:
        """Build query for validating an access token."""
        return {"openid": user_id, "access_token": access_token}

    def build_user_info_params(
        self,
        user_id: str,
        access_token: str,
        language: Language | str | None = None,
    ) -> dict[str, str]:
        """Build query for fetching a user profile.

        ``lang`` is sent only when a language is given; WeChat defaults
        to simplified Chinese otherwise.
        """
        params = {"openid": user_id, "access_token": access_token}
        if language:
            params["lang"] = str(language)
        return params
