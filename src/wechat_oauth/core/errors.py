"""Centralized error factory for the WeChat OAuth client.

Maps httpx responses and exceptions onto the client's transport error
hierarchy. Provider error envelopes are not handled here: they are values.
"""

from __future__ import annotations

import uuid
from typing import Any

import httpx

from ..errors import (
    InvalidResponseError,
    NetworkError,
    ServerError,
    TimeoutError,
    ValidationError,
    WeChatOAuthError,
)


class ErrorFactory:
    """Centralized error creation with consistent structure.

    All errors created through this factory include:
    - Standardized error codes
    - A correlation ID for tracing
    """

    @staticmethod
    def generate_correlation_id() -> str:
        """Generate a unique correlation ID."""
        return str(uuid.uuid4())

    @staticmethod
    def from_http_response(
        response: httpx.Response,
        *,
        correlation_id: str | None = None,
    ) -> WeChatOAuthError:
        """Create client error from a non-200 HTTP response.

        WeChat reports its own failures with HTTP 200, so any other status
        comes from the infrastructure in front of it.

        Args:
            response: HTTP response object.
            correlation_id: Optional correlation ID for tracing.

        Returns:
            ServerError carrying the status code.
        """
        correlation_id = correlation_id or ErrorFactory.generate_correlation_id()
        return ServerError(
            f"Unexpected HTTP status: {response.status_code}",
            status_code=response.status_code,
            correlation_id=correlation_id,
        )

    @staticmethod
    def from_exception(
        exc: httpx.HTTPError,
        *,
        correlation_id: str | None = None,
    ) -> WeChatOAuthError:
        """Create client error from an httpx transport exception.

        Args:
            exc: Exception raised while sending the request.
            correlation_id: Optional correlation ID for tracing.

        Returns:
            TimeoutError for timeouts, NetworkError otherwise.
        """
        correlation_id = correlation_id or ErrorFactory.generate_correlation_id()

        if isinstance(exc, httpx.TimeoutException):
            return TimeoutError(
                f"Request timed out: {exc}",
                correlation_id=correlation_id,
            )

        if isinstance(exc, httpx.ConnectError):
            return NetworkError(
                f"Connection failed: {exc}",
                correlation_id=correlation_id,
                cause=exc,
            )

        return NetworkError(
            f"HTTP error: {exc}",
            correlation_id=correlation_id,
            cause=exc,
        )

    @staticmethod
    def invalid_response(
        message: str,
        *,
        body: Any = None,
        correlation_id: str | None = None,
    ) -> InvalidResponseError:
        """Create error for a body that is not a usable JSON object.

        Args:
            message: Error message.
            body: Offending body, kept in the error details.
            correlation_id: Optional correlation ID.

        Returns:
            InvalidResponseError with the body attached.
        """
        return InvalidResponseError(
            message,
            body=body,
            correlation_id=correlation_id or ErrorFactory.generate_correlation_id(),
        )

    @staticmethod
    def missing_argument(name: str) -> ValidationError:
        """Create error for a required argument that is empty.

        Args:
            name: Argument name.

        Returns:
            ValidationError naming the argument.
        """
        return ValidationError(
            f"{name} must not be empty",
            details={"field": name},
        )
