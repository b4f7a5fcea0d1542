"""WeChat web authorization (OAuth 2.0) client."""

from .async_client import AsyncWeChatOAuthClient
from .client import WeChatOAuthClient
from .config import TelemetryConfig, WeChatOAuthConfig
from .errors import (
    ErrorCode,
    InvalidConfigError,
    InvalidResponseError,
    NetworkError,
    ProviderAPIError,
    ServerError,
    TimeoutError,
    ValidationError,
    WeChatOAuthError,
)
from .models import (
    Language,
    ProviderError,
    ProviderErrorCode,
    Sex,
    TokenPair,
    UserProfile,
)
from .telemetry import configure_telemetry

__all__ = [
    "AsyncWeChatOAuthClient",
    "WeChatOAuthClient",
    "WeChatOAuthConfig",
    "TelemetryConfig",
    "configure_telemetry",
    "ErrorCode",
    "WeChatOAuthError",
    "InvalidConfigError",
    "InvalidResponseError",
    "NetworkError",
    "ProviderAPIError",
    "ServerError",
    "TimeoutError",
    "ValidationError",
    "Language",
    "ProviderError",
    "ProviderErrorCode",
    "Sex",
    "TokenPair",
    "UserProfile",
]

__version__ = "0.1.0"
