"""HTTP executors for the WeChat OAuth client.

Provide the ``get(path, params)`` transport shared by the sync and async
clients: one GET per call, JSON-decoded body out, transport failures
raised as client errors. No retries.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

import httpx

from ..telemetry import get_logger, redact_params, trace_operation
from .errors import ErrorFactory

if TYPE_CHECKING:
    from collections.abc import Mapping


class Transport(Protocol):
    """Synchronous transport collaborator."""

    def get(self, path: str, params: Mapping[str, str]) -> dict[str, Any]:
        """Perform a GET request and return the decoded JSON object."""
        ...


class AsyncTransport(Protocol):
    """Asynchronous transport collaborator."""

    async def get(self, path: str, params: Mapping[str, str]) -> dict[str, Any]:
        """Perform a GET request and return the decoded JSON object."""
        ...


def decode_body(response: httpx.Response, correlation_id: str) -> dict[str, Any]:
    """Check status and decode a response body into a JSON object.

    WeChat serves JSON as ``text/plain``, so the content type is ignored.

    Args:
        response: HTTP response.
        correlation_id: Correlation ID attached to any error raised.

    Returns:
        Decoded JSON object.

    Raises:
        ServerError: On a non-200 status.
        InvalidResponseError: If the body is not a JSON object.
    """
    if response.status_code != 200:
        raise ErrorFactory.from_http_response(response, correlation_id=correlation_id)

    try:
        body = response.json()
    except ValueError as e:
        raise ErrorFactory.invalid_response(
            f"Response is not valid JSON: {e}",
            body=response.text[:200],
            correlation_id=correlation_id,
        ) from e

    if not isinstance(body, dict):
        raise ErrorFactory.invalid_response(
            "Response is not a JSON object",
            body=body,
            correlation_id=correlation_id,
        )
    return body


class SyncHTTPExecutor:
    """Synchronous GET executor over an httpx client."""

    def __init__(self, client: httpx.Client) -> None:
        """Initialize sync HTTP executor.

        Args:
            client: HTTP client (carries base URL and timeouts).
        """
        self._client = client
        self._logger = get_logger()

    def get(self, path: str, params: Mapping[str, str]) -> dict[str, Any]:
        """Execute a GET request.

        Args:
            path: Endpoint path relative to the client base URL.
            params: Query parameters.

        Returns:
            Decoded JSON object.

        Raises:
            WeChatOAuthError: On any transport failure.
        """
        correlation_id = ErrorFactory.generate_correlation_id()
        self._logger.debug(
            "wechat_request",
            path=path,
            params=redact_params(params),
            correlation_id=correlation_id,
        )
        with trace_operation(
            "http_request",
            attributes={"http.method": "GET", "http.url": path},
        ):
            try:
                response = self._client.get(path, params=dict(params))
            except httpx.HTTPError as e:
                raise ErrorFactory.from_exception(e, correlation_id=correlation_id) from e
            return decode_body(response, correlation_id)


class AsyncHTTPExecutor:
    """Asynchronous GET executor over an httpx async client."""

    def __init__(self, client: httpx.AsyncClient) -> None:
        """Initialize async HTTP executor.

        Args:
            client: Async HTTP client (carries base URL and timeouts).
        """
        self._client = client
        self._logger = get_logger()

    async def get(self, path: str, params: Mapping[str, str]) -> dict[str, Any]:
        """Execute an async GET request.

        Args:
            path: Endpoint path relative to the client base URL.
            params: Query parameters.

        Returns:
            Decoded JSON object.

        Raises:
            WeChatOAuthError: On any transport failure.
        """
        correlation_id = ErrorFactory.generate_correlation_id()
        self._logger.debug(
            "wechat_request",
            path=path,
            params=redact_params(params),
            correlation_id=correlation_id,
        )
        with trace_operation(
            "http_request",
            attributes={"http.method": "GET", "http.url": path},
        ):
            try:
                response = await self._client.get(path, params=dict(params))
            except httpx.HTTPError as e:
                raise ErrorFactory.from_exception(e, correlation_id=correlation_id) from e
            return decode_body(response, correlation_id)
