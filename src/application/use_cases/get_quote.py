"""
Use-case: retrieve the current quote for a given symbol.
Depends only on Domain ports and entities; no infrastructure imports.
"""

from src.domain.entities.market_data import Quote
from src.domain.errors import ValidationError
from src.domain.ports.market_data_port import IMarketDataProvider


class GetQuoteUseCase:
    def __init__(self, provider: IMarketDataProvider) -> None:
        self._provider = provider

    async def execute(self, symbol: str) -> Quote:
        """Fetch the current quote for *symbol* (uppercased).

        Raises:
            ValidationError: if *symbol* is blank.
            Any MarketDataError propagated from the IMarketDataProvider.
        """
        if not symbol or not symbol.strip():
            raise ValidationError("Symbol required")
        return await self._provider.get_quote(symbol.upper().strip())
