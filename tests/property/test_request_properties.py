"""
Property-based tests for request building.

For any credentials and arguments, each operation puts exactly its
documented parameter set on the wire.
"""

from __future__ import annotations

from hypothesis import given, settings
from hypothesis import strategies as st

from wechat_oauth.config import WeChatOAuthConfig
from wechat_oauth.core.token_ops import TokenOperations
from wechat_oauth.models import Language

# Strategy for non-empty printable identifiers
token_text = st.text(
    alphabet=st.characters(min_codepoint=33, max_codepoint=126), min_size=1, max_size=64
)


def make_ops(app_id: str, app_secret: str) -> TokenOperations:
    return TokenOperations(WeChatOAuthConfig(app_id=app_id, app_secret=app_secret))


class TestRequestParameterProperties:
    """Property tests for outbound query parameters."""

    @given(app_id=token_text, app_secret=token_text, code=token_text)
    @settings(max_examples=100)
    def test_exchange_parameters(self, app_id: str, app_secret: str, code: str) -> None:
        """Exchange always carries exactly appid, secret, code and grant_type."""
        params = make_ops(app_id, app_secret).build_exchange_params(code)

        assert params == {
            "appid": app_id,
            "secret": app_secret,
            "code": code,
            "grant_type": "authorization_code",
        }

    @given(
        app_id=token_text,
        app_secret=token_text,
        refresh_token=token_text,
        grant_type=st.one_of(st.none(), token_text),
    )
    @settings(max_examples=100)
    def test_refresh_never_sends_secret(
        self,
        app_id: str,
        app_secret: str,
        refresh_token: str,
        grant_type: str | None,
    ) -> None:
        """Refresh carries appid, grant_type and refresh_token, never the secret."""
        ops = make_ops(app_id, app_secret)
        if grant_type is None:
            params = ops.build_refresh_params(refresh_token)
            expected_grant = "refresh_token"
        else:
            params = ops.build_refresh_params(refresh_token, grant_type)
            expected_grant = grant_type

        assert params == {
            "appid": app_id,
            "grant_type": expected_grant,
            "refresh_token": refresh_token,
        }
        assert "secret" not in params

    @given(user_id=token_text, access_token=token_text)
    @settings(max_examples=100)
    def test_check_parameters(self, user_id: str, access_token: str) -> None:
        """Check carries exactly openid and access_token."""
        params = make_ops("wx", "secret").build_check_params(user_id, access_token)

        assert params == {"openid": user_id, "access_token": access_token}

    @given(
        user_id=token_text,
        access_token=token_text,
        language=st.one_of(st.none(), st.sampled_from(list(Language))),
    )
    @settings(max_examples=100)
    def test_lang_only_when_supplied(
        self,
        user_id: str,
        access_token: str,
        language: Language | None,
    ) -> None:
        """lang is present iff a language was given."""
        params = make_ops("wx", "secret").build_user_info_params(
            user_id, access_token, language
        )

        if language is None:
            assert params == {"openid": user_id, "access_token": access_token}
        else:
            assert params == {
                "openid": user_id,
                "access_token": access_token,
                "lang": language.value,
            }
