"""Error classes for the WeChat OAuth client.

Transport-level failures are raised from the ``WeChatOAuthError`` hierarchy.
Logical failures reported by WeChat itself are returned as
:class:`~wechat_oauth.models.ProviderError` values and only become
exceptions when a caller opts in through ``ProviderError.raise_for_error``.
"""

from __future__ import annotations

from enum import StrEnum
from typing import Any


class ErrorCode(StrEnum):
    """Standardized error codes for the WeChat OAuth client."""

    # Validation errors (2xxx)
    VALIDATION_ERROR = "VAL_2001"
    INVALID_CONFIG = "VAL_2002"

    # Network errors (3xxx)
    NETWORK_ERROR = "NET_3001"
    TIMEOUT_ERROR = "NET_3002"
    INVALID_RESPONSE = "NET_3004"

    # Server errors (5xxx)
    SERVER_ERROR = "SRV_5001"

    # Provider errors (8xxx)
    PROVIDER_ERROR = "WX_8001"


class WeChatOAuthError(Exception):
    """Base error for the WeChat OAuth client with structured error information."""

    def __init__(
        self,
        message: str,
        code: ErrorCode | str,
        *,
        status_code: int | None = None,
        correlation_id: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = str(code)
        self.status_code = status_code
        self.correlation_id = correlation_id
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        """Convert error to dictionary for logging/serialization."""
        return {
            "error": self.message,
            "code": self.code,
            "status_code": self.status_code,
            "correlation_id": self.correlation_id,
            "details": self.details,
        }

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(code={self.code!r}, message={self.message!r})"


class ValidationError(WeChatOAuthError):
    """Caller input rejected before any request was made."""

    def __init__(
        self,
        message: str,
        *,
        correlation_id: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            message,
            ErrorCode.VALIDATION_ERROR,
            status_code=400,
            correlation_id=correlation_id,
            details=details,
        )


class InvalidConfigError(WeChatOAuthError):
    """Invalid client configuration."""

    def __init__(
        self,
        message: str,
        *,
        field: str | None = None,
    ) -> None:
        super().__init__(
            message,
            ErrorCode.INVALID_CONFIG,
            details={"field": field} if field else None,
        )


class NetworkError(WeChatOAuthError):
    """Network request failed."""

    def __init__(
        self,
        message: str = "Network request failed",
        *,
        correlation_id: str | None = None,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(
            message,
            ErrorCode.NETWORK_ERROR,
            correlation_id=correlation_id,
            details={"cause": str(cause)} if cause else None,
        )
        self.__cause__ = cause


class TimeoutError(WeChatOAuthError):
    """Request timed out."""

    def __init__(
        self,
        message: str = "Request timed out",
        *,
        correlation_id: str | None = None,
    ) -> None:
        super().__init__(
            message,
            ErrorCode.TIMEOUT_ERROR,
            status_code=408,
            correlation_id=correlation_id,
        )


class ServerError(WeChatOAuthError):
    """Infrastructure answered with a non-200 status."""

    def __init__(
        self,
        message: str = "Server error",
        *,
        status_code: int = 500,
        correlation_id: str | None = None,
    ) -> None:
        super().__init__(
            message,
            ErrorCode.SERVER_ERROR,
            status_code=status_code,
            correlation_id=correlation_id,
        )


class InvalidResponseError(WeChatOAuthError):
    """Response body is not JSON or matches no known response shape."""

    def __init__(
        self,
        message: str = "Invalid response body",
        *,
        correlation_id: str | None = None,
        body: Any = None,
    ) -> None:
        super().__init__(
            message,
            ErrorCode.INVALID_RESPONSE,
            status_code=200,
            correlation_id=correlation_id,
            details={"body": body} if body is not None else None,
        )


class ProviderAPIError(WeChatOAuthError):
    """Raised on request when a caller escalates a provider error envelope."""

    def __init__(
        self,
        error_code: int,
        error_message: str,
        *,
        correlation_id: str | None = None,
    ) -> None:
        super().__init__(
            f"WeChat error {error_code}: {error_message}",
            ErrorCode.PROVIDER_ERROR,
            status_code=200,
            correlation_id=correlation_id,
            details={"errcode": error_code, "errmsg": error_message},
        )
        self.error_code = error_code
        self.error_message = error_message
