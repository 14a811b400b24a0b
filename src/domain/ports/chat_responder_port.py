"""
Port (interface) for chat assistant responders.
Infrastructure adapters (e.g. KeywordChatResponder) must implement this interface.
"""

from abc import ABC, abstractmethod


class IChatResponder(ABC):
    @abstractmethod
    async def reply(self, message: str, symbol: str) -> str:
        """Answer *message* in the context of the currently charted *symbol*."""
        ...
