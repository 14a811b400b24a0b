"""
Headless client: Composition Root for the client-side state layer.

Wires the persisted AppStateStore to the market-data use-cases and the
client services (chart session, watchlist quote refresher, debounced search,
chat assistant). ``main()`` is a small terminal front-end over the same
objects: it loads the chart for the persisted selection and refreshes the
watchlist quotes once.

Run:
    export TWELVE_DATA_API_KEY=<key>
    python -m src.infrastructure.entrypoints.client [SYMBOL] [TIMEFRAME]
"""

import asyncio
import logging
import sys
from dataclasses import dataclass
from typing import Optional

from src.application.services.chart_session import ChartSession
from src.application.services.chart_view import build_chart_view
from src.application.services.chat_assistant import ChatAssistant
from src.application.services.symbol_search import DebouncedSymbolSearch
from src.application.services.watchlist_quotes import WatchlistQuoteRefresher
from src.application.state.store import AppStateStore
from src.application.use_cases.get_chart_series import GetChartSeriesUseCase
from src.application.use_cases.get_quote import GetQuoteUseCase
from src.application.use_cases.search_symbols import SearchSymbolsUseCase
from src.domain.entities.market_data import TIMEFRAMES, SymbolSearchResult
from src.domain.ports.market_data_port import IMarketDataProvider
from src.infrastructure.chat.keyword_chat_responder import KeywordChatResponder
from src.infrastructure.config.settings import Settings
from src.infrastructure.market_data.twelve_data_adapter import TwelveDataMarketDataProvider
from src.infrastructure.persistence.json_file_state_storage import JsonFileStateStorage

logger = logging.getLogger(__name__)


@dataclass
class RunnrClient:
    store: AppStateStore
    chart: ChartSession
    quotes: WatchlistQuoteRefresher
    search: DebouncedSymbolSearch
    chat: ChatAssistant
    search_results: list[SymbolSearchResult]

    def close(self) -> None:
        self.chart.close()
        self.quotes.close()
        self.search.close()


def build_client(
    settings: Settings,
    provider: Optional[IMarketDataProvider] = None,
    quote_delay: float = WatchlistQuoteRefresher.REQUEST_DELAY_SECONDS,
) -> RunnrClient:
    """Build the client object graph. Must be called inside a running event loop
    before any store action that triggers a fetch."""
    provider = provider or TwelveDataMarketDataProvider(
        api_key=settings.twelve_data_api_key,
        base_url=settings.twelve_data_base_url,
    )
    store = AppStateStore(JsonFileStateStorage(settings.state_path))
    search_results: list[SymbolSearchResult] = []

    def on_results(results: list[SymbolSearchResult]) -> None:
        search_results[:] = results

    return RunnrClient(
        store=store,
        chart=ChartSession(store, GetChartSeriesUseCase(provider).execute),
        quotes=WatchlistQuoteRefresher(store, GetQuoteUseCase(provider).execute, delay=quote_delay),
        search=DebouncedSymbolSearch(SearchSymbolsUseCase(provider).execute, on_results),
        chat=ChatAssistant(KeywordChatResponder(), store),
        search_results=search_results,
    )


async def run(argv: list[str], settings: Optional[Settings] = None) -> int:
    if len(argv) > 1 and argv[1] not in TIMEFRAMES:
        print(f"Unknown timeframe {argv[1]!r}; valid: {', '.join(TIMEFRAMES)}")
        return 2

    settings = settings or Settings.from_env()
    client = build_client(settings)
    try:
        if argv:
            client.store.set_symbol(argv[0].upper())
        if len(argv) > 1:
            client.store.set_timeframe(argv[1])
        if client.chart.pending:
            await asyncio.gather(*client.chart.pending)
        else:
            await client.chart.refresh()

        state = client.store.state
        if client.chart.error:
            print(f"Failed to load chart for {state.symbol}/{state.timeframe}: {client.chart.error}")
        elif client.chart.data is not None:
            header = build_chart_view(client.chart.data).header
            if header is None:
                print(f"{state.symbol}: no candles returned")
            else:
                print(
                    f"{header.symbol} [{state.timeframe}]  O {header.open}  H {header.high}  "
                    f"L {header.low}  C {header.close}  {header.change} ({header.change_percent})  "
                    f"Vol {header.volume}"
                )

        await client.quotes.start()
        for item in state.watchlist:
            quote = client.quotes.quotes.get(item.symbol)
            if quote is None or quote.price is None:
                print(f"  {item.symbol:<6} {item.name:<20} --")
            else:
                pct = quote.change_percent or 0.0
                print(f"  {item.symbol:<6} {item.name:<20} ${quote.price:,.2f}  {pct:+.2f}%")
        return 1 if client.chart.error else 0
    finally:
        client.close()


def main() -> None:
    logging.basicConfig(
        level=Settings.from_env().log_level,
        format="%(asctime)s - %(levelname)s - %(message)s",
    )
    sys.exit(asyncio.run(run(sys.argv[1:])))


if __name__ == "__main__":
    main()
