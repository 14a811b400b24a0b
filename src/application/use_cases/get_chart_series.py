"""
Use-case: retrieve a normalized candle series for a symbol and timeframe key.
Depends only on Domain ports and entities; no infrastructure imports.

The input contract is enforced here, before the provider is ever called:
symbols are 1-5 letters and the timeframe must be a key of TIMEFRAMES.
"""

import re

from src.domain.entities.market_data import DEFAULT_TIMEFRAME, TIMEFRAMES, ChartData
from src.domain.errors import ValidationError
from src.domain.ports.market_data_port import IMarketDataProvider

SYMBOL_PATTERN = re.compile(r"^[A-Za-z]{1,5}$")
SYMBOL_FORMAT_HINT = "1-5 letters (e.g., AAPL, MSFT)"


class GetChartSeriesUseCase:
    def __init__(self, provider: IMarketDataProvider) -> None:
        self._provider = provider

    async def execute(self, symbol: str, timeframe: str = DEFAULT_TIMEFRAME) -> ChartData:
        """Fetch the chart series for *symbol* (uppercased).

        Args:
            symbol:    Ticker symbol, 1-5 letters, case-insensitive.
            timeframe: One of the TIMEFRAMES keys (e.g. 'daily', '5m', '1y').

        Raises:
            ValidationError: if *symbol* or *timeframe* is not acceptable.
            ConfigurationError / UpstreamError propagated from the provider.
        """
        if not symbol or not SYMBOL_PATTERN.match(symbol):
            raise ValidationError(f"Invalid symbol format: {symbol!r}, expected {SYMBOL_FORMAT_HINT}")
        if timeframe not in TIMEFRAMES:
            raise ValidationError(f"Invalid timeframe: {timeframe!r}", valid=list(TIMEFRAMES))
        return await self._provider.get_time_series(symbol.upper(), timeframe)
