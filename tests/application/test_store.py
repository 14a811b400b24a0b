"""
Tests for src/application/state/store.py - the application state store.
"""

import pytest

from conftest import BrokenStateStorage, InMemoryStateStorage
from src.application.state.store import AppStateStore
from src.domain.entities.app_state import (
    DEFAULT_WATCHLIST,
    AppState,
    PersistedState,
    Tab,
    User,
    WatchlistItem,
)


class TestDefaults:
    def test_fresh_store_has_defaults(self):
        state = AppStateStore().state
        assert state == AppState()
        assert state.symbol == "AAPL"
        assert state.timeframe == "daily"
        assert state.active_tab is Tab.CHART
        assert state.chat_open is False
        assert state.watchlist == DEFAULT_WATCHLIST
        assert state.user is None

    def test_instances_do_not_share_state(self):
        first, second = AppStateStore(), AppStateStore()
        first.set_symbol("MSFT")
        assert second.state.symbol == "AAPL"


class TestWatchlist:
    def test_add_new_item_appends_last(self):
        store = AppStateStore()
        before = len(store.state.watchlist)
        store.add_to_watchlist(WatchlistItem("AMD", "Advanced Micro"))
        assert len(store.state.watchlist) == before + 1
        assert store.state.watchlist[-1] == WatchlistItem("AMD", "Advanced Micro")

    @pytest.mark.parametrize("item", DEFAULT_WATCHLIST)
    def test_add_existing_symbol_is_noop(self, item):
        store = AppStateStore()
        store.add_to_watchlist(WatchlistItem(item.symbol, "Different name"))
        assert store.state.watchlist == DEFAULT_WATCHLIST

    def test_remove_twice_is_idempotent(self):
        store = AppStateStore()
        store.remove_from_watchlist("TSLA")
        after_first = store.state.watchlist
        store.remove_from_watchlist("TSLA")
        assert store.state.watchlist == after_first
        assert all(item.symbol != "TSLA" for item in after_first)
        assert len(after_first) == len(DEFAULT_WATCHLIST) - 1

    def test_remove_absent_symbol_is_noop(self):
        store = AppStateStore()
        store.remove_from_watchlist("ZZZZ")
        assert store.state.watchlist == DEFAULT_WATCHLIST


class TestActions:
    def test_set_symbol_accepts_any_string(self):
        store = AppStateStore()
        store.set_symbol("not-a-ticker")
        assert store.state.symbol == "not-a-ticker"

    def test_set_timeframe_is_unconditional(self):
        store = AppStateStore()
        store.set_timeframe("bogus")
        assert store.state.timeframe == "bogus"

    def test_set_active_tab_accepts_enum_and_value(self):
        store = AppStateStore()
        store.set_active_tab(Tab.SCANNER)
        assert store.state.active_tab is Tab.SCANNER
        store.set_active_tab("journal")
        assert store.state.active_tab is Tab.JOURNAL

    def test_set_active_tab_rejects_unknown_view(self):
        store = AppStateStore()
        with pytest.raises(ValueError):
            store.set_active_tab("settings")
        assert store.state.active_tab is Tab.CHART

    def test_toggle_chat_flips(self):
        store = AppStateStore()
        store.toggle_chat()
        assert store.state.chat_open is True
        store.toggle_chat()
        assert store.state.chat_open is False

    def test_set_user_replaces_wholesale(self):
        store = AppStateStore()
        store.set_user(User("u-1", "trader@example.com"))
        assert store.state.user == User("u-1", "trader@example.com")
        store.set_user(None)
        assert store.state.user is None


class TestSubscribe:
    def test_every_action_notifies(self):
        store = AppStateStore()
        seen = []
        store.subscribe(lambda state, previous: seen.append((state, previous)))

        store.set_symbol("MSFT")
        store.toggle_chat()
        store.add_to_watchlist(WatchlistItem("AAPL", "Apple Inc."))  # no-op still notifies
        assert len(seen) == 3
        assert seen[0][0].symbol == "MSFT"
        assert seen[0][1].symbol == "AAPL"

    def test_unsubscribe_stops_notifications(self):
        store = AppStateStore()
        seen = []
        unsubscribe = store.subscribe(lambda state, previous: seen.append(state))
        unsubscribe()
        store.set_symbol("MSFT")
        assert seen == []

    def test_failing_listener_does_not_block_others(self):
        store = AppStateStore()
        seen = []

        def broken(state, previous):
            raise RuntimeError("boom")

        store.subscribe(broken)
        store.subscribe(lambda state, previous: seen.append(state.symbol))
        store.set_symbol("NVDA")
        assert seen == ["NVDA"]


class TestPersistence:
    def test_round_trip_restores_only_persisted_subset(self):
        storage = InMemoryStateStorage()
        store = AppStateStore(storage)
        store.set_symbol("NVDA")
        store.set_timeframe("1h")
        store.add_to_watchlist(WatchlistItem("AMD", "Advanced Micro"))
        store.set_active_tab(Tab.SCANNER)
        store.toggle_chat()
        store.set_user(User("u-1", "trader@example.com"))

        reloaded = AppStateStore(storage).state
        assert reloaded.symbol == "NVDA"
        assert reloaded.timeframe == "1h"
        assert reloaded.watchlist == store.state.watchlist
        assert reloaded.active_tab is Tab.CHART
        assert reloaded.chat_open is False
        assert reloaded.user is None

    def test_only_persisted_fields_trigger_save(self, storage):
        store = AppStateStore(storage)
        store.toggle_chat()
        store.set_active_tab(Tab.JOURNAL)
        store.set_user(User("u-1", "a@b.c"))
        assert storage.saves == 0

        store.set_symbol("MSFT")
        store.set_timeframe("weekly")
        store.remove_from_watchlist("SPY")
        assert storage.saves == 3
        assert storage.snapshot == PersistedState.from_state(store.state)

    def test_storage_failure_is_swallowed(self):
        store = AppStateStore(BrokenStateStorage())
        store.set_symbol("MSFT")
        store.add_to_watchlist(WatchlistItem("AMD", "Advanced Micro"))
        assert store.state.symbol == "MSFT"
        assert store.state.watchlist[-1].symbol == "AMD"

    def test_unknown_persisted_timeframe_falls_back_to_default(self):
        storage = InMemoryStateStorage(
            PersistedState(watchlist=DEFAULT_WATCHLIST, symbol="MSFT", timeframe="bogus")
        )
        state = AppStateStore(storage).state
        assert state.symbol == "MSFT"
        assert state.timeframe == "daily"

    def test_duplicate_persisted_watchlist_entries_collapse(self):
        storage = InMemoryStateStorage(
            PersistedState(
                watchlist=(
                    WatchlistItem("AAPL", "Apple Inc."),
                    WatchlistItem("AAPL", "Apple again"),
                    WatchlistItem("MSFT", "Microsoft"),
                ),
                symbol="AAPL",
                timeframe="daily",
            )
        )
        watchlist = AppStateStore(storage).state.watchlist
        assert watchlist == (WatchlistItem("AAPL", "Apple Inc."), WatchlistItem("MSFT", "Microsoft"))
