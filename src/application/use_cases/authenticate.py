"""
Use-case: auth passthrough to the external identity provider.
Depends only on Domain ports and entities; no infrastructure imports.

The provider's result is forwarded as-is; its errors propagate unchanged.
"""

from typing import Optional

from src.domain.errors import ValidationError
from src.domain.ports.identity_provider_port import IIdentityProvider

ACTIONS = ("signup", "signin", "signout")


class AuthenticateUseCase:
    def __init__(self, identity_provider: IIdentityProvider) -> None:
        self._identity_provider = identity_provider

    async def execute(
        self,
        action: str,
        email: Optional[str] = None,
        password: Optional[str] = None,
        access_token: Optional[str] = None,
    ) -> dict:
        """Dispatch *action* to the identity provider.

        Returns:
            {"success": True} merged with the provider's user/session payload.

        Raises:
            ValidationError: on an unknown action or missing credentials.
            UpstreamError / ConfigurationError from the identity provider.
        """
        if action not in ACTIONS:
            raise ValidationError("Invalid action", valid=list(ACTIONS))

        if action == "signout":
            await self._identity_provider.sign_out(access_token)
            return {"success": True}

        if not email or not password:
            raise ValidationError("Email and password required")

        if action == "signup":
            result = await self._identity_provider.sign_up(email, password)
        else:
            result = await self._identity_provider.sign_in(email, password)
        return {"success": True, **result}
