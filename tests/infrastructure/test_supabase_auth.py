"""
Tests for the Supabase identity provider and access-token validator.
"""

import asyncio
import json
import time

import httpx
import pytest
from jose import jwt

from src.domain.entities.app_state import User
from src.domain.errors import ConfigurationError, UpstreamError
from src.infrastructure.auth.supabase_identity_provider import SupabaseIdentityProvider
from src.infrastructure.auth.supabase_token_validator import SupabaseTokenValidator

SECRET = "super-secret-jwt-token-with-at-least-32-characters"


def _provider(handler):
    client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
    return SupabaseIdentityProvider("https://proj.supabase.co", "anon-key", client=client)


class TestIdentityProvider:
    def test_sign_in_splits_user_and_session(self):
        seen = []

        def handler(request):
            seen.append(request)
            return httpx.Response(
                200,
                json={"access_token": "tok", "token_type": "bearer", "user": {"id": "u-1", "email": "a@b.c"}},
            )

        result = asyncio.run(_provider(handler).sign_in("a@b.c", "secret"))
        assert seen[0].url.path == "/auth/v1/token"
        assert seen[0].url.params["grant_type"] == "password"
        assert json.loads(seen[0].content) == {"email": "a@b.c", "password": "secret"}
        assert seen[0].headers["apikey"] == "anon-key"
        assert result["user"] == {"id": "u-1", "email": "a@b.c"}
        assert result["session"] == {"access_token": "tok", "token_type": "bearer"}

    def test_sign_up_returns_user(self):
        def handler(request):
            return httpx.Response(200, json={"id": "u-2", "email": "new@b.c"})

        result = asyncio.run(_provider(handler).sign_up("new@b.c", "secret"))
        assert result == {"user": {"id": "u-2", "email": "new@b.c"}}

    def test_sign_out_uses_user_token(self):
        seen = []

        def handler(request):
            seen.append(request)
            return httpx.Response(204)

        asyncio.run(_provider(handler).sign_out("user-token"))
        assert seen[0].url.path == "/auth/v1/logout"
        assert seen[0].headers["Authorization"] == "Bearer user-token"

    def test_provider_message_forwarded(self):
        def handler(request):
            return httpx.Response(
                400, json={"error": "invalid_grant", "error_description": "Invalid login credentials"}
            )

        with pytest.raises(UpstreamError, match="Invalid login credentials"):
            asyncio.run(_provider(handler).sign_in("a@b.c", "wrong"))

    def test_missing_configuration(self):
        with pytest.raises(ConfigurationError):
            asyncio.run(SupabaseIdentityProvider(None, None).sign_in("a@b.c", "secret"))


class TestTokenValidator:
    def _token(self, **overrides):
        claims = {
            "sub": "u-1",
            "email": "a@b.c",
            "aud": "authenticated",
            "role": "authenticated",
            "exp": int(time.time()) + 3600,
        }
        claims.update(overrides)
        return jwt.encode(claims, SECRET, algorithm="HS256")

    def test_valid_token_yields_user(self):
        assert SupabaseTokenValidator(SECRET).validate(self._token()) == User("u-1", "a@b.c")

    def test_expired_token_rejected(self):
        with pytest.raises(ValueError, match="Token validation failed"):
            SupabaseTokenValidator(SECRET).validate(self._token(exp=int(time.time()) - 10))

    def test_wrong_audience_rejected(self):
        with pytest.raises(ValueError):
            SupabaseTokenValidator(SECRET).validate(self._token(aud="anon"))

    def test_wrong_secret_rejected(self):
        with pytest.raises(ValueError):
            SupabaseTokenValidator("another-secret").validate(self._token())

    def test_unconfigured_secret_rejected(self):
        with pytest.raises(ValueError, match="not configured"):
            SupabaseTokenValidator(None).validate(self._token())
