"""Configuration for the WeChat OAuth client.

Uses Pydantic v2 for validation with sensible defaults.
"""

from __future__ import annotations

from typing import Annotated, Any, Self

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    HttpUrl,
    SecretStr,
    field_validator,
)
from pydantic import ValidationError as PydanticValidationError

from .errors import InvalidConfigError

DEFAULT_BASE_URL = "https://api.weixin.qq.com/sns"


class TelemetryConfig(BaseModel):
    """OpenTelemetry and structured logging configuration."""

    model_config = ConfigDict(frozen=True)

    enabled: bool = True
    service_name: str = "wechat-oauth"
    log_level: str = "INFO"

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level is a known level name."""
        level = v.upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            msg = f"Unsupported log level: {v}"
            raise ValueError(msg)
        return level


class WeChatOAuthConfig(BaseModel):
    """Main configuration for the WeChat OAuth client."""

    model_config = ConfigDict(frozen=True, validate_default=True)

    # Credentials issued with the application registration
    app_id: str = Field(..., min_length=1)
    app_secret: SecretStr

    base_url: HttpUrl = Field(default=DEFAULT_BASE_URL)

    # HTTP settings
    timeout: Annotated[float, Field(gt=0, le=300)] = 30.0
    connect_timeout: Annotated[float, Field(gt=0, le=60)] = 10.0
    user_agent: str = "wechat-oauth/0.1.0 Python"

    telemetry: TelemetryConfig = Field(default_factory=TelemetryConfig)

    @field_validator("app_secret")
    @classmethod
    def validate_app_secret(cls, v: SecretStr) -> SecretStr:
        """Reject an empty application secret."""
        if not v.get_secret_value():
            msg = "app_secret must not be empty"
            raise ValueError(msg)
        return v

    @property
    def base_url_str(self) -> str:
        """Get base URL as string without trailing slash."""
        return str(self.base_url).rstrip("/")

    def with_overrides(self, **kwargs: Any) -> Self:
        """Create new config with overridden values."""
        data = self.model_dump()
        data["app_secret"] = self.app_secret.get_secret_value()
        data.update(kwargs)
        return self.__class__(**data)

    @classmethod
    def from_credentials(
        cls, app_id: str | None, app_secret: str | None, **kwargs: Any
    ) -> Self:
        """Create config from application credentials.

        Raises:
            InvalidConfigError: If a credential is missing or invalid.
        """
        if not app_id:
            raise InvalidConfigError("app_id is required", field="app_id")
        if not app_secret:
            raise InvalidConfigError("app_secret is required", field="app_secret")
        try:
            return cls(app_id=app_id, app_secret=app_secret, **kwargs)
        except PydanticValidationError as e:
            field = ".".join(str(p) for p in e.errors()[0]["loc"]) or None
            raise InvalidConfigError(
                f"Invalid configuration: {e.errors()[0]['msg']}", field=field
            ) from e

    @classmethod
    def from_env(cls, prefix: str = "WECHAT_OAUTH_") -> Self:
        """Create config from environment variables."""
        import os

        def get_env(key: str, default: Any = None) -> Any:
            return os.environ.get(f"{prefix}{key}", default)

        app_id = get_env("APP_ID")
        if not app_id:
            raise InvalidConfigError(
                f"{prefix}APP_ID environment variable is required", field="app_id"
            )

        app_secret = get_env("APP_SECRET")
        if not app_secret:
            raise InvalidConfigError(
                f"{prefix}APP_SECRET environment variable is required",
                field="app_secret",
            )

        raw_timeout = get_env("TIMEOUT", "30.0")
        try:
            timeout = float(raw_timeout)
        except ValueError as e:
            raise InvalidConfigError(
                f"{prefix}TIMEOUT must be a number, got {raw_timeout!r}",
                field="timeout",
            ) from e

        return cls.from_credentials(
            app_id,
            app_secret,
            base_url=get_env("BASE_URL", DEFAULT_BASE_URL),
            timeout=timeout,
        )
