"""
Domain entities for chart, quote and symbol-search data.
Zero external dependencies; plain dataclasses only.

TIMEFRAMES maps every recognized timeframe key to the upstream sampling
interval and the number of rows requested.
"""

from dataclasses import dataclass, field
from typing import Optional


@dataclass(frozen=True)
class TimeframeConfig:
    interval: str
    outputsize: int


TIMEFRAMES: dict[str, TimeframeConfig] = {
    "1m": TimeframeConfig("1min", 390),
    "5m": TimeframeConfig("5min", 390),
    "15m": TimeframeConfig("15min", 390),
    "1h": TimeframeConfig("1h", 500),
    "daily": TimeframeConfig("1day", 365),
    "weekly": TimeframeConfig("1week", 260),
    "monthly": TimeframeConfig("1month", 120),
    "3mo": TimeframeConfig("1day", 90),
    "6mo": TimeframeConfig("1day", 180),
    "1y": TimeframeConfig("1day", 365),
    "5y": TimeframeConfig("1week", 260),
}

DEFAULT_TIMEFRAME = "daily"


@dataclass(frozen=True)
class Candle:
    time: int
    open: float
    high: float
    low: float
    close: float
    volume: int


@dataclass(frozen=True)
class ChartMeta:
    first_date: Optional[str]
    last_date: Optional[str]
    count: int


@dataclass(frozen=True)
class ChartData:
    symbol: str
    timeframe: str
    interval: str
    candles: tuple[Candle, ...]
    meta: ChartMeta
    exchange: Optional[str] = None
    currency: Optional[str] = "USD"


@dataclass(frozen=True)
class Quote:
    symbol: str
    name: str
    exchange: str
    price: Optional[float]
    open: Optional[float]
    high: Optional[float]
    low: Optional[float]
    previous_close: Optional[float]
    change: Optional[float]
    change_percent: Optional[float]
    volume: Optional[int]


@dataclass(frozen=True)
class SymbolSearchResult:
    symbol: str
    name: str
    type: str
    exchange: str
    country: str = field(default="")
