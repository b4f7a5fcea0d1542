"""Core components for the WeChat OAuth client.

Request building, response discrimination and transport execution
shared between sync and async clients.
"""

from __future__ import annotations

from .errors import ErrorFactory
from .http_executor import AsyncHTTPExecutor, AsyncTransport, SyncHTTPExecutor, Transport
from .token_ops import (
    TokenOperations,
    parse_check_response,
    parse_token_response,
    parse_user_profile,
)

__all__ = [
    "ErrorFactory",
    "TokenOperations",
    "SyncHTTPExecutor",
    "AsyncHTTPExecutor",
    "Transport",
    "AsyncTransport",
    "parse_token_response",
    "parse_user_profile",
    "parse_check_response",
]
