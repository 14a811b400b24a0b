"""
Application state store: the single source of truth for cross-view UI state.

The store is an explicit object owned by the application root (no module-level
singleton), so each test can build a fresh instance. It holds an immutable
AppState, replaces it on every action, notifies subscribers, and writes the
{watchlist, symbol, timeframe} subset through an injected IStateStorage.

Actions never fail under normal conditions; storage failures are logged and
swallowed so the in-memory state stays authoritative.
"""

import logging
from dataclasses import replace
from typing import Callable, Optional, Union

from src.domain.entities.app_state import (
    DEFAULT_SYMBOL,
    PERSISTED_FIELDS,
    AppState,
    PersistedState,
    Tab,
    User,
    WatchlistItem,
)
from src.domain.entities.market_data import DEFAULT_TIMEFRAME, TIMEFRAMES
from src.domain.ports.state_storage_port import IStateStorage

logger = logging.getLogger(__name__)

Listener = Callable[[AppState, AppState], None]


class AppStateStore:
    def __init__(self, storage: Optional[IStateStorage] = None) -> None:
        """
        Args:
            storage: Optional IStateStorage implementation. The persisted snapshot
                     is read once here to seed the initial state.
        """
        self._storage = storage
        self._listeners: list[Listener] = []
        self._state = self._initial_state()

    @property
    def state(self) -> AppState:
        return self._state

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register *listener* as ``listener(state, previous)``; returns an unsubscribe callable."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    # ------------------------------------------------------------------
    # Actions
    # ------------------------------------------------------------------

    def set_symbol(self, symbol: str) -> None:
        self._set(symbol=symbol)

    def set_timeframe(self, timeframe: str) -> None:
        self._set(timeframe=timeframe)

    def set_active_tab(self, tab: Union[Tab, str]) -> None:
        """Switch the active view.

        Raises:
            ValueError: if *tab* is not one of chart, scanner, journal.
        """
        self._set(active_tab=Tab(tab))

    def toggle_chat(self) -> None:
        self._set(chat_open=not self._state.chat_open)

    def add_to_watchlist(self, item: WatchlistItem) -> None:
        """Append *item* unless its symbol is already present."""
        watchlist = self._state.watchlist
        if any(existing.symbol == item.symbol for existing in watchlist):
            self._set()
            return
        self._set(watchlist=watchlist + (item,))

    def remove_from_watchlist(self, symbol: str) -> None:
        self._set(
            watchlist=tuple(item for item in self._state.watchlist if item.symbol != symbol)
        )

    def set_user(self, user: Optional[User]) -> None:
        self._set(user=user)

    # ------------------------------------------------------------------
    # Private helpers
    # ------------------------------------------------------------------

    def _set(self, **changes) -> None:
        previous = self._state
        self._state = replace(previous, **changes)
        if any(name in changes for name in PERSISTED_FIELDS):
            self._persist()
        self._notify(previous)

    def _notify(self, previous: AppState) -> None:
        for listener in list(self._listeners):
            try:
                listener(self._state, previous)
            except Exception:
                logger.exception("State listener %r failed", listener)

    def _persist(self) -> None:
        if self._storage is None:
            return
        try:
            self._storage.save(PersistedState.from_state(self._state))
        except Exception as exc:
            logger.warning("Could not persist app state, continuing in memory: %s", exc)

    def _initial_state(self) -> AppState:
        if self._storage is None:
            return AppState()
        try:
            snapshot = self._storage.load()
        except Exception as exc:
            logger.warning("Could not read persisted app state, using defaults: %s", exc)
            return AppState()
        if snapshot is None:
            return AppState()

        timeframe = snapshot.timeframe
        if timeframe not in TIMEFRAMES:
            logger.warning(
                "Persisted timeframe %r is not recognized, using %r", timeframe, DEFAULT_TIMEFRAME
            )
            timeframe = DEFAULT_TIMEFRAME

        return AppState(
            symbol=snapshot.symbol or DEFAULT_SYMBOL,
            timeframe=timeframe,
            watchlist=_dedupe(snapshot.watchlist),
        )


def _dedupe(watchlist: tuple[WatchlistItem, ...]) -> tuple[WatchlistItem, ...]:
    seen: set[str] = set()
    unique = []
    for item in watchlist:
        if item.symbol not in seen:
            seen.add(item.symbol)
            unique.append(item)
    return tuple(unique)
