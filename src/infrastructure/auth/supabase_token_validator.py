"""
Infrastructure adapter: Supabase JWT secret → ITokenValidator.

Validates HS256-signed Supabase access tokens with the project's JWT secret
and checks the 'authenticated' audience. The user id comes from the 'sub'
claim and the e-mail from the 'email' claim.
"""

from typing import Optional

from jose import JWTError, jwt

from src.domain.entities.app_state import User
from src.domain.ports.token_validator_port import ITokenValidator


class SupabaseTokenValidator(ITokenValidator):
    """Validates Supabase access tokens against the project's JWT secret."""

    AUDIENCE = "authenticated"

    def __init__(self, jwt_secret: Optional[str]) -> None:
        self._jwt_secret = jwt_secret

    def validate(self, token: str) -> User:
        """Decode and validate a Supabase access token.

        Raises:
            ValueError: on any validation failure (no secret configured, bad
                        signature, expiry, wrong audience, missing subject).
        """
        if not self._jwt_secret:
            raise ValueError("SUPABASE_JWT_SECRET not configured")
        try:
            claims = jwt.decode(
                token,
                self._jwt_secret,
                algorithms=["HS256"],
                audience=self.AUDIENCE,
            )
        except JWTError as exc:
            raise ValueError(f"Token validation failed: {exc}") from exc

        subject = claims.get("sub")
        if not subject:
            raise ValueError("Token has no subject claim")
        return User(id=subject, email=claims.get("email", ""))
