"""
Pytest configuration and shared fixtures for Runnr tests.
"""

from typing import Optional

import pytest

from src.domain.entities.app_state import PersistedState
from src.domain.entities.market_data import (
    Candle,
    ChartData,
    ChartMeta,
    Quote,
    SymbolSearchResult,
)
from src.domain.errors import UpstreamError
from src.domain.ports.market_data_port import IMarketDataProvider
from src.domain.ports.state_storage_port import IStateStorage


class InMemoryStateStorage(IStateStorage):
    """Keeps the last saved snapshot; counts saves."""

    def __init__(self, snapshot: Optional[PersistedState] = None) -> None:
        self.snapshot = snapshot
        self.saves = 0

    def load(self) -> Optional[PersistedState]:
        return self.snapshot

    def save(self, snapshot: PersistedState) -> None:
        self.saves += 1
        self.snapshot = snapshot


class BrokenStateStorage(IStateStorage):
    def load(self) -> Optional[PersistedState]:
        raise OSError("storage unavailable")

    def save(self, snapshot: PersistedState) -> None:
        raise OSError("storage unavailable")


class RecordingMarketDataProvider(IMarketDataProvider):
    """Fake provider: records calls and returns canned data."""

    def __init__(self) -> None:
        self.calls: list[tuple] = []
        self.failing_symbols: set[str] = set()

    async def get_time_series(self, symbol: str, timeframe: str) -> ChartData:
        self.calls.append(("series", symbol, timeframe))
        return make_chart_data(symbol, timeframe)

    async def get_quote(self, symbol: str) -> Quote:
        self.calls.append(("quote", symbol))
        if symbol in self.failing_symbols:
            raise UpstreamError(f"Quote not found: {symbol}")
        return make_quote(symbol)

    async def search_symbols(self, query: str) -> list[SymbolSearchResult]:
        self.calls.append(("search", query))
        return [SymbolSearchResult(query.upper(), f"{query} Inc.", "Common Stock", "NASDAQ", "United States")]


def make_chart_data(symbol: str = "AAPL", timeframe: str = "daily") -> ChartData:
    candles = (
        Candle(time=1704326400, open=184.2, high=185.9, low=183.4, close=185.6, volume=58414460),
        Candle(time=1704412800, open=181.9, high=182.7, low=180.1, close=181.2, volume=62379661),
    )
    return ChartData(
        symbol=symbol,
        timeframe=timeframe,
        interval="1day",
        exchange="NASDAQ",
        currency="USD",
        candles=candles,
        meta=ChartMeta(
            first_date="2024-01-04T00:00:00Z",
            last_date="2024-01-05T00:00:00Z",
            count=len(candles),
        ),
    )


def make_quote(symbol: str = "AAPL") -> Quote:
    return Quote(
        symbol=symbol,
        name=f"{symbol} Corp",
        exchange="NASDAQ",
        price=190.5,
        open=188.0,
        high=191.0,
        low=187.5,
        previous_close=187.0,
        change=3.5,
        change_percent=1.87,
        volume=48_000_000,
    )


@pytest.fixture
def provider() -> RecordingMarketDataProvider:
    return RecordingMarketDataProvider()


@pytest.fixture
def storage() -> InMemoryStateStorage:
    return InMemoryStateStorage()


@pytest.fixture
def time_series_payload() -> dict:
    """Twelve Data /time_series response: newest row first, one unparsable row."""
    return {
        "meta": {
            "symbol": "AAPL",
            "interval": "1day",
            "currency": "USD",
            "exchange_timezone": "America/New_York",
            "exchange": "NASDAQ",
            "type": "Common Stock",
        },
        "values": [
            {"datetime": "2024-01-08", "open": "182.09", "high": "185.60", "low": "181.50", "close": "185.56", "volume": "59144500"},
            {"datetime": "2024-01-05", "open": "181.99", "high": "182.76", "low": "180.17", "close": "181.18", "volume": "62379661"},
            {"datetime": "2024-01-04", "open": "n/a", "high": "183.09", "low": "180.88", "close": "181.91", "volume": "71983600"},
            {"datetime": "2024-01-03", "open": "184.22", "high": "185.88", "low": "183.43", "close": "184.25", "volume": ""},
        ],
        "status": "ok",
    }
