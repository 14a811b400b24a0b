"""
Application service: debounced symbol search for the search box.

Each submit() cancels the pending search task, if any, before scheduling the
next one, so only the last query typed within the delay window reaches the
upstream API.
"""

import asyncio
import logging
from typing import Awaitable, Callable, Optional

from src.domain.entities.market_data import SymbolSearchResult
from src.domain.errors import MarketDataError

logger = logging.getLogger(__name__)

Search = Callable[[str], Awaitable[list[SymbolSearchResult]]]
ResultsCallback = Callable[[list[SymbolSearchResult]], None]


class DebouncedSymbolSearch:
    DEBOUNCE_SECONDS = 0.3

    def __init__(
        self,
        search: Search,
        on_results: ResultsCallback,
        delay: float = DEBOUNCE_SECONDS,
    ) -> None:
        self._search = search
        self._on_results = on_results
        self._delay = delay
        self._pending: Optional[asyncio.Task] = None

    @property
    def pending(self) -> Optional[asyncio.Task]:
        return self._pending

    def submit(self, query: str) -> Optional[asyncio.Task]:
        self.cancel()
        if not query:
            self._on_results([])
            return None
        self._pending = asyncio.get_running_loop().create_task(self._run(query))
        return self._pending

    def cancel(self) -> None:
        if self._pending is not None and not self._pending.done():
            self._pending.cancel()
        self._pending = None

    close = cancel

    async def _run(self, query: str) -> None:
        await asyncio.sleep(self._delay)
        try:
            results = await self._search(query)
        except MarketDataError as exc:
            logger.warning("Symbol search failed for %r: %s", query, exc)
            return
        self._on_results(results)
