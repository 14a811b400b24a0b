"""
Port (interface) for market-data providers.
Infrastructure adapters (e.g. TwelveDataMarketDataProvider) must implement this interface.
"""

from abc import ABC, abstractmethod

from src.domain.entities.market_data import ChartData, Quote, SymbolSearchResult


class IMarketDataProvider(ABC):
    @abstractmethod
    async def get_time_series(self, symbol: str, timeframe: str) -> ChartData:
        """Return candles for *symbol* in ascending time order.

        Raises:
            ConfigurationError: if the upstream API key is missing.
            UpstreamError: on an upstream error or malformed payload.
        """
        ...

    @abstractmethod
    async def get_quote(self, symbol: str) -> Quote: ...

    @abstractmethod
    async def search_symbols(self, query: str) -> list[SymbolSearchResult]: ...
