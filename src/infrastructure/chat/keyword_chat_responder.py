"""
Infrastructure adapter: canned keyword replies → IChatResponder.

Placeholder assistant until a language model is wired in: the first keyword
found in the message (support, resistance, trend, volume) selects a canned
answer, otherwise a default prompt about the current symbol is returned.
"""

from src.domain.ports.chat_responder_port import IChatResponder


class KeywordChatResponder(IChatResponder):
    _KEYWORDS = ("support", "resistance", "trend", "volume")

    async def reply(self, message: str, symbol: str) -> str:
        responses = {
            "support": f"For {symbol}, look at recent swing lows for support levels.",
            "resistance": f"Check recent swing highs on {symbol} for resistance.",
            "trend": "Higher highs + higher lows = uptrend. Lower highs + lower lows = downtrend.",
            "volume": "Volume confirms moves. Rising price + rising volume = strong move.",
        }
        lowered = message.lower()
        for keyword in self._KEYWORDS:
            if keyword in lowered:
                return responses[keyword]
        return f"Looking at {symbol}. What timeframe are you analyzing?"
