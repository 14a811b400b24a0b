"""
Application service: serialized quote refresh for the watchlist.

Quotes are requested one at a time, in watchlist order, with a fixed delay
between requests to stay under the upstream rate limit. A failed symbol is
logged and skipped. When the watchlist changes the running pass is cancelled
and a new pass starts over the new snapshot.
"""

import asyncio
import logging
from typing import Awaitable, Callable, Optional

from src.application.state.store import AppStateStore
from src.domain.entities.app_state import AppState, WatchlistItem
from src.domain.entities.market_data import Quote
from src.domain.errors import MarketDataError

logger = logging.getLogger(__name__)

QuoteLoader = Callable[[str], Awaitable[Quote]]


class WatchlistQuoteRefresher:
    REQUEST_DELAY_SECONDS = 0.5

    def __init__(
        self,
        store: AppStateStore,
        load_quote: QuoteLoader,
        delay: float = REQUEST_DELAY_SECONDS,
    ) -> None:
        self._store = store
        self._load_quote = load_quote
        self._delay = delay
        self._task: Optional[asyncio.Task] = None
        self.quotes: dict[str, Quote] = {}
        self._unsubscribe = store.subscribe(self._on_state_change)

    @property
    def task(self) -> Optional[asyncio.Task]:
        """The pass currently running, or the last one that ran."""
        return self._task

    def start(self) -> asyncio.Task:
        """Cancel any running pass and start a new one over the current watchlist."""
        if self._task is not None and not self._task.done():
            self._task.cancel()
        self._task = asyncio.get_running_loop().create_task(
            self.run(self._store.state.watchlist)
        )
        return self._task

    async def run(self, watchlist: tuple[WatchlistItem, ...]) -> None:
        for index, item in enumerate(watchlist):
            if index:
                await asyncio.sleep(self._delay)
            try:
                self.quotes[item.symbol] = await self._load_quote(item.symbol)
            except MarketDataError as exc:
                logger.warning("Quote fetch failed for %s: %s", item.symbol, exc)

    def close(self) -> None:
        self._unsubscribe()
        if self._task is not None:
            self._task.cancel()

    def _on_state_change(self, state: AppState, previous: AppState) -> None:
        if state.watchlist != previous.watchlist:
            self.start()
