"""
Domain entities for client-side application state.
Zero external dependencies; plain dataclasses only.

AppState is an immutable value: every store action produces a new instance.
Only the PERSISTED_FIELDS subset survives a restart.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

from src.domain.entities.market_data import DEFAULT_TIMEFRAME


class Tab(str, Enum):
    CHART = "chart"
    SCANNER = "scanner"
    JOURNAL = "journal"


@dataclass(frozen=True)
class WatchlistItem:
    symbol: str
    name: str


@dataclass(frozen=True)
class User:
    id: str
    email: str


DEFAULT_SYMBOL = "AAPL"

DEFAULT_WATCHLIST: tuple[WatchlistItem, ...] = (
    WatchlistItem("AAPL", "Apple Inc."),
    WatchlistItem("MSFT", "Microsoft"),
    WatchlistItem("GOOGL", "Alphabet"),
    WatchlistItem("AMZN", "Amazon"),
    WatchlistItem("NVDA", "NVIDIA"),
    WatchlistItem("TSLA", "Tesla"),
    WatchlistItem("META", "Meta"),
    WatchlistItem("SPY", "S&P 500 ETF"),
)

PERSISTED_FIELDS = ("watchlist", "symbol", "timeframe")


@dataclass(frozen=True)
class AppState:
    symbol: str = DEFAULT_SYMBOL
    timeframe: str = DEFAULT_TIMEFRAME
    active_tab: Tab = Tab.CHART
    chat_open: bool = False
    watchlist: tuple[WatchlistItem, ...] = field(default=DEFAULT_WATCHLIST)
    user: Optional[User] = None


@dataclass(frozen=True)
class PersistedState:
    """The subset of AppState written to durable storage."""

    watchlist: tuple[WatchlistItem, ...]
    symbol: str
    timeframe: str

    @classmethod
    def from_state(cls, state: AppState) -> "PersistedState":
        return cls(watchlist=state.watchlist, symbol=state.symbol, timeframe=state.timeframe)
