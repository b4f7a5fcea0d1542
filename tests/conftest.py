"""
Shared test fixtures for WeChat OAuth client tests.

Provides configuration, provider payloads and stub transports that
record outbound requests.
"""

from __future__ import annotations

import json
from typing import Any, Callable

import httpx
import pytest

from wechat_oauth.config import TelemetryConfig, WeChatOAuthConfig


class StubTransport:
    """Transport returning canned bodies and recording (path, params) calls."""

    def __init__(self, body: dict[str, Any] | None = None, error: Exception | None = None):
        self.body = body or {}
        self.error = error
        self.calls: list[tuple[str, dict[str, str]]] = []

    def get(self, path: str, params: dict[str, str]) -> dict[str, Any]:
        self.calls.append((path, dict(params)))
        if self.error is not None:
            raise self.error
        return dict(self.body)


class AsyncStubTransport(StubTransport):
    """Async flavour of StubTransport."""

    async def get(self, path: str, params: dict[str, str]) -> dict[str, Any]:  # type: ignore[override]
        return StubTransport.get(self, path, params)


class RecordingHandler:
    """httpx.MockTransport handler that records requests."""

    def __init__(
        self,
        body: Any = None,
        *,
        status_code: int = 200,
        raw: bytes | None = None,
        error: Exception | None = None,
    ) -> None:
        self.body = body if body is not None else {}
        self.status_code = status_code
        self.raw = raw
        self.error = error
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.error is not None:
            raise self.error
        # WeChat serves JSON as text/plain
        content = self.raw if self.raw is not None else json.dumps(self.body).encode()
        return httpx.Response(
            self.status_code,
            content=content,
            headers={"Content-Type": "text/plain"},
        )

    @property
    def last_params(self) -> dict[str, str]:
        return dict(self.requests[-1].url.params)


@pytest.fixture
def base_config() -> WeChatOAuthConfig:
    """Provide a basic client configuration for testing."""
    return WeChatOAuthConfig(
        app_id="wx-test-appid",
        app_secret="test-app-secret",
        telemetry=TelemetryConfig(enabled=False),
    )


@pytest.fixture
def sample_token_response() -> dict:
    """Provide a sample token exchange response."""
    return {
        "access_token": "AT1",
        "expires_in": 7200,
        "refresh_token": "RT1",
        "openid": "OID1",
        "scope": "snsapi_userinfo",
    }


@pytest.fixture
def sample_user_profile() -> dict:
    """Provide a sample userinfo response."""
    return {
        "openid": "OID1",
        "nickname": "NICKNAME",
        "sex": 1,
        "province": "PROVINCE",
        "city": "CITY",
        "country": "COUNTRY",
        "headimgurl": "https://thirdwx.qlogo.cn/mmopen/g3MonUZtNHkdmzicIlibx6iaFqAc56vxLSUfpb6n5WKSYVY0ChQKkiaJSgQ1dZuTOgvLLrhJbERQQ4eMsv84eavHiaiceqxibJxCfHe/0",
        "privilege": ["PRIVILEGE1", "PRIVILEGE2"],
        "unionid": "o6_bmasdasdsad6_2sgVt7hMZOPfL",
    }


@pytest.fixture
def invalid_code_error() -> dict:
    """Provide the provider's invalid code envelope."""
    return {"errcode": 40029, "errmsg": "invalid code"}


@pytest.fixture
def make_handler() -> Callable[..., RecordingHandler]:
    """Provide a factory for recording httpx mock handlers."""
    return RecordingHandler


@pytest.fixture
def stub_transport() -> type[StubTransport]:
    """Provide the synchronous stub transport class."""
    return StubTransport


@pytest.fixture
def async_stub_transport() -> type[AsyncStubTransport]:
    """Provide the asynchronous stub transport class."""
    return AsyncStubTransport
