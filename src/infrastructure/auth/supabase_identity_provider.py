"""
Infrastructure adapter: Supabase Auth (GoTrue) → IIdentityProvider.

Sign-up, password sign-in and sign-out are forwarded to the project's
/auth/v1 endpoints with the anon key. Provider errors become UpstreamError
carrying the provider's own message.
"""

import logging
from typing import Optional

import httpx

from src.domain.errors import ConfigurationError, UpstreamError
from src.domain.ports.identity_provider_port import IIdentityProvider

logger = logging.getLogger(__name__)


class SupabaseIdentityProvider(IIdentityProvider):
    """Delegates authentication to Supabase Auth over its REST API."""

    def __init__(
        self,
        url: Optional[str],
        anon_key: Optional[str],
        client: Optional[httpx.AsyncClient] = None,
        timeout: float = 10.0,
    ) -> None:
        self._url = url.rstrip("/") if url else None
        self._anon_key = anon_key
        self._client = client
        self._timeout = timeout

    async def sign_up(self, email: str, password: str) -> dict:
        data = await self._post("/auth/v1/signup", {"email": email, "password": password})
        # With e-mail confirmation enabled GoTrue returns the bare user object.
        return {"user": data.get("user", data)}

    async def sign_in(self, email: str, password: str) -> dict:
        data = await self._post(
            "/auth/v1/token",
            {"email": email, "password": password},
            params={"grant_type": "password"},
        )
        session = {k: v for k, v in data.items() if k != "user"}
        return {"user": data.get("user"), "session": session}

    async def sign_out(self, access_token: Optional[str] = None) -> None:
        if not access_token:
            return
        await self._post("/auth/v1/logout", None, token=access_token)

    async def _post(
        self,
        path: str,
        body: Optional[dict],
        params: Optional[dict] = None,
        token: Optional[str] = None,
    ) -> dict:
        if not self._url or not self._anon_key:
            raise ConfigurationError("Supabase URL and anon key are not configured")

        headers = {
            "apikey": self._anon_key,
            "Authorization": f"Bearer {token or self._anon_key}",
        }
        url = f"{self._url}{path}"
        try:
            if self._client is not None:
                response = await self._client.post(url, json=body, params=params, headers=headers)
            else:
                async with httpx.AsyncClient(timeout=self._timeout) as client:
                    response = await client.post(url, json=body, params=params, headers=headers)
        except httpx.HTTPError as exc:
            logger.warning("Supabase auth request %s failed: %s", path, exc)
            raise UpstreamError("Authentication failed") from exc

        data = _json_or_empty(response)
        if response.is_error:
            raise UpstreamError(
                data.get("msg")
                or data.get("error_description")
                or data.get("message")
                or data.get("error")
                or "Authentication failed"
            )
        return data


def _json_or_empty(response: httpx.Response) -> dict:
    if not response.content:
        return {}
    try:
        data = response.json()
    except ValueError:
        return {}
    return data if isinstance(data, dict) else {}
