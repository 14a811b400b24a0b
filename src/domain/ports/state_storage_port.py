"""
Port (interface) for durable client-state storage.
Infrastructure adapters (e.g. JsonFileStateStorage) must implement this interface.
"""

from abc import ABC, abstractmethod
from typing import Optional

from src.domain.entities.app_state import PersistedState


class IStateStorage(ABC):
    @abstractmethod
    def load(self) -> Optional[PersistedState]:
        """Return the stored snapshot, or None if nothing usable is stored."""
        ...

    @abstractmethod
    def save(self, snapshot: PersistedState) -> None:
        """Overwrite the stored snapshot wholesale.

        Raises:
            OSError: if the underlying storage is unavailable.
        """
        ...
