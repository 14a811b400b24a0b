"""
Port (interface) for access-token validators.
Infrastructure adapters (e.g. SupabaseTokenValidator) must implement this interface.
"""

from abc import ABC, abstractmethod

from src.domain.entities.app_state import User


class ITokenValidator(ABC):
    @abstractmethod
    def validate(self, token: str) -> User:
        """Validate an access token and return the user it was issued to.

        Raises:
            ValueError: if the token is invalid, expired, or fails the audience check.
        """
        ...
