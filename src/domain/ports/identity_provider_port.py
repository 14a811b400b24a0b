"""
Port (interface) for the external identity provider.
Infrastructure adapters (e.g. SupabaseIdentityProvider) must implement this interface.
The provider's result payloads are forwarded to the caller untouched.
"""

from abc import ABC, abstractmethod
from typing import Optional


class IIdentityProvider(ABC):
    @abstractmethod
    async def sign_up(self, email: str, password: str) -> dict:
        """Register a new user. Returns {"user": ...}."""
        ...

    @abstractmethod
    async def sign_in(self, email: str, password: str) -> dict:
        """Password sign-in. Returns {"user": ..., "session": ...}."""
        ...

    @abstractmethod
    async def sign_out(self, access_token: Optional[str] = None) -> None: ...
