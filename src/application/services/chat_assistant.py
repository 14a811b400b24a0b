"""
Application service: the chat panel's conversation.

Holds the message history and delegates replies to an IChatResponder,
passing the symbol currently selected in the state store as context.
"""

from dataclasses import dataclass
from typing import Literal, Optional

from src.application.state.store import AppStateStore
from src.domain.ports.chat_responder_port import IChatResponder

GREETING = (
    "Hey! I'm your AI trading assistant. Ask me about chart patterns, "
    "price movements, or any trading questions."
)


@dataclass(frozen=True)
class ChatMessage:
    id: int
    role: Literal["user", "assistant"]
    content: str


class ChatAssistant:
    def __init__(self, responder: IChatResponder, store: AppStateStore) -> None:
        self._responder = responder
        self._store = store
        self.messages: list[ChatMessage] = [ChatMessage(1, "assistant", GREETING)]
        self.loading = False

    async def send(self, text: str) -> Optional[ChatMessage]:
        """Append the user's message and the assistant's reply.

        Blank input, or input sent while a reply is pending, is ignored and
        returns None.
        """
        if not text.strip() or self.loading:
            return None

        self._append("user", text)
        self.loading = True
        try:
            reply = await self._responder.reply(text, self._store.state.symbol)
        finally:
            self.loading = False
        return self._append("assistant", reply)

    def _append(self, role: Literal["user", "assistant"], content: str) -> ChatMessage:
        message = ChatMessage(len(self.messages) + 1, role, content)
        self.messages.append(message)
        return message
