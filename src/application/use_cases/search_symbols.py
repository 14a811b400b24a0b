"""
Use-case: free-text symbol search.
Depends only on Domain ports and entities; no infrastructure imports.
"""

from src.domain.entities.market_data import SymbolSearchResult
from src.domain.errors import ValidationError
from src.domain.ports.market_data_port import IMarketDataProvider


class SearchSymbolsUseCase:
    def __init__(self, provider: IMarketDataProvider) -> None:
        self._provider = provider

    async def execute(self, query: str) -> list[SymbolSearchResult]:
        """Return matching instruments; an empty list when nothing matches.

        Raises:
            ValidationError: if *query* is blank.
        """
        if not query or not query.strip():
            raise ValidationError("Search query required")
        return await self._provider.search_symbols(query.strip())
