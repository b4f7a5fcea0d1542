"""Pydantic models for the WeChat OAuth client.

Field names follow Python conventions while aliases carry the wire names
used by WeChat, so ``model_dump(by_alias=True, exclude_unset=True)`` gives
back the provider body unmodified.
"""

from __future__ import annotations

from enum import IntEnum, StrEnum
from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field

from .errors import ProviderAPIError


class Language(StrEnum):
    """Languages accepted by the profile endpoint."""

    ZH_CN = "zh_CN"
    ZH_TW = "zh_TW"
    EN = "en"


class Sex(IntEnum):
    """Profile sex as reported by WeChat."""

    UNKNOWN = 0
    MALE = 1
    FEMALE = 2


class ProviderErrorCode(IntEnum):
    """Documented ``errcode`` values of the web authorization endpoints."""

    SYSTEM_BUSY = -1
    OK = 0
    INVALID_CREDENTIAL = 40001
    INVALID_OPENID = 40003
    INVALID_CODE = 40029
    INVALID_REFRESH_TOKEN = 40030
    CODE_BEEN_USED = 40163
    ACCESS_TOKEN_MISSING = 41001
    APPID_MISSING = 41002
    REFRESH_TOKEN_MISSING = 41003
    APPSECRET_MISSING = 41004
    CODE_MISSING = 41008
    ACCESS_TOKEN_EXPIRED = 42001
    REFRESH_TOKEN_EXPIRED = 42002
    CODE_EXPIRED = 42003


class TokenPair(BaseModel):
    """Token pair returned by the exchange and refresh endpoints."""

    model_config = ConfigDict(frozen=True, extra="allow", populate_by_name=True)

    access_token: str = Field(..., min_length=1)
    expires_in: Annotated[int, Field(ge=0)]
    refresh_token: str = Field(..., min_length=1)
    user_id: str = Field(..., alias="openid", min_length=1)
    scope: str = ""
    union_id: str | None = Field(default=None, alias="unionid")

    @property
    def scopes(self) -> list[str]:
        """Get granted scopes (WeChat separates them with commas)."""
        return [s for s in self.scope.split(",") if s]


class UserProfile(BaseModel):
    """User profile returned by the userinfo endpoint."""

    model_config = ConfigDict(frozen=True, extra="allow", populate_by_name=True)

    user_id: str = Field(..., alias="openid", min_length=1)
    nickname: str = ""
    sex: int = 0
    province: str = ""
    city: str = ""
    country: str = ""
    # Last path segment selects the square size (0, 46, 64, 96, 132); empty without avatar
    avatar_url: str = Field(default="", alias="headimgurl")
    privileges: list[str] = Field(default_factory=list, alias="privilege")
    union_id: str | None = Field(default=None, alias="unionid")

    @property
    def gender(self) -> Sex:
        """Get sex as an enum, falling back to UNKNOWN for unexpected values."""
        try:
            return Sex(self.sex)
        except ValueError:
            return Sex.UNKNOWN


class ProviderError(BaseModel):
    """WeChat error envelope, also the success shape of the token check."""

    model_config = ConfigDict(frozen=True, extra="ignore", populate_by_name=True)

    error_code: int = Field(..., alias="errcode")
    error_message: str = Field(default="", alias="errmsg")

    @property
    def ok(self) -> bool:
        """Whether the envelope reports success (``errcode == 0``)."""
        return self.error_code == ProviderErrorCode.OK

    @property
    def known_code(self) -> ProviderErrorCode | None:
        """Get the documented error code, or None for undocumented values."""
        try:
            return ProviderErrorCode(self.error_code)
        except ValueError:
            return None

    def raise_for_error(self) -> None:
        """Raise ProviderAPIError when the envelope reports a failure."""
        if not self.ok:
            raise ProviderAPIError(self.error_code, self.error_message)


TokenResult = TokenPair | ProviderError
ProfileResult = UserProfile | ProviderError
