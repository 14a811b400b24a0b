"""
Application service: keeps the chart snapshot in step with the state store.

Subscribes to AppStateStore and loads a new ChartData whenever the selected
symbol or timeframe changes. In-flight requests are not cancelled; instead a
response is dropped when its (symbol, timeframe) no longer matches the store,
so a late reply to an earlier selection never overwrites a newer one.
"""

import asyncio
import logging
from typing import Awaitable, Callable, Optional

from src.application.state.store import AppStateStore
from src.domain.entities.app_state import AppState
from src.domain.entities.market_data import ChartData
from src.domain.errors import MarketDataError

logger = logging.getLogger(__name__)

SeriesLoader = Callable[[str, str], Awaitable[ChartData]]


class ChartSession:
    def __init__(self, store: AppStateStore, load_series: SeriesLoader) -> None:
        """
        Args:
            store:       The application's state store.
            load_series: Coroutine function ``(symbol, timeframe) -> ChartData``,
                         typically GetChartSeriesUseCase.execute.
        """
        self._store = store
        self._load_series = load_series
        self._tasks: set[asyncio.Task] = set()
        self.data: Optional[ChartData] = None
        self.error: Optional[str] = None
        self.loading = False
        self._unsubscribe = store.subscribe(self._on_state_change)

    async def refresh(self) -> None:
        """Load the series for the store's current selection."""
        state = self._store.state
        symbol, timeframe = state.symbol, state.timeframe
        if not symbol:
            return

        self.loading = True
        self.error = None
        try:
            data = await self._load_series(symbol, timeframe)
        except MarketDataError as exc:
            if self._is_current(symbol, timeframe):
                logger.warning("Chart load failed for %s/%s: %s", symbol, timeframe, exc)
                self.error = str(exc)
                self.data = None
                self.loading = False
            return

        if not self._is_current(symbol, timeframe):
            logger.debug("Discarding stale chart response for %s/%s", symbol, timeframe)
            return
        self.data = data
        self.loading = False

    @property
    def pending(self) -> tuple[asyncio.Task, ...]:
        """Loads scheduled by store changes that have not finished yet."""
        return tuple(self._tasks)

    async def retry(self) -> None:
        await self.refresh()

    def close(self) -> None:
        self._unsubscribe()
        for task in list(self._tasks):
            task.cancel()

    def _is_current(self, symbol: str, timeframe: str) -> bool:
        state = self._store.state
        return state.symbol == symbol and state.timeframe == timeframe

    def _on_state_change(self, state: AppState, previous: AppState) -> None:
        if (state.symbol, state.timeframe) == (previous.symbol, previous.timeframe):
            return
        task = asyncio.get_running_loop().create_task(self.refresh())
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)
