"""
Infrastructure adapter: Twelve Data REST API → IMarketDataProvider.
All Twelve Data specifics (endpoints, parameter names, row layout, error
envelope) are confined here; the rest of the codebase depends only on
IMarketDataProvider.

Upstream returns time-series rows newest-first; they are reversed here so
every consumer receives candles in ascending time order.
"""

import logging
import math
from datetime import datetime, timezone
from typing import Any, Optional
from zoneinfo import ZoneInfo

import httpx

from src.domain.entities.market_data import (
    TIMEFRAMES,
    Candle,
    ChartData,
    ChartMeta,
    Quote,
    SymbolSearchResult,
)
from src.domain.errors import ConfigurationError, UpstreamError
from src.domain.ports.market_data_port import IMarketDataProvider

logger = logging.getLogger(__name__)

EXCHANGE_TIMEZONE = "America/New_York"
SEARCH_OUTPUT_SIZE = 10


class TwelveDataMarketDataProvider(IMarketDataProvider):
    """Fetches candles, quotes and symbol matches from api.twelvedata.com."""

    def __init__(
        self,
        api_key: Optional[str],
        base_url: str = "https://api.twelvedata.com",
        client: Optional[httpx.AsyncClient] = None,
        timeout: float = 10.0,
    ) -> None:
        """
        Args:
            api_key: Twelve Data API key; None defers a ConfigurationError to
                     the first request.
            client:  Optional pre-built AsyncClient (tests pass one with a
                     MockTransport). A client is created per request otherwise.
        """
        self._api_key = api_key
        self._base_url = base_url.rstrip("/")
        self._client = client
        self._timeout = timeout

    # ------------------------------------------------------------------
    # IMarketDataProvider interface
    # ------------------------------------------------------------------

    async def get_time_series(self, symbol: str, timeframe: str) -> ChartData:
        config = TIMEFRAMES[timeframe]
        symbol = symbol.upper()
        data = await self._get(
            "/time_series",
            {
                "symbol": symbol,
                "interval": config.interval,
                "outputsize": str(config.outputsize),
                "format": "JSON",
                "timezone": EXCHANGE_TIMEZONE,
            },
            default_error="API error",
        )

        values = data.get("values") or []
        if not isinstance(values, list):
            raise UpstreamError("Malformed time series payload")
        candles = _to_candles(values)
        meta = data.get("meta") or {}

        return ChartData(
            symbol=symbol,
            timeframe=timeframe,
            interval=config.interval,
            exchange=meta.get("exchange"),
            currency=meta.get("currency") or "USD",
            candles=candles,
            meta=ChartMeta(
                first_date=_iso(candles[0].time) if candles else None,
                last_date=_iso(candles[-1].time) if candles else None,
                count=len(candles),
            ),
        )

    async def get_quote(self, symbol: str) -> Quote:
        data = await self._get(
            "/quote", {"symbol": symbol.upper()}, default_error="Quote not found"
        )
        return Quote(
            symbol=data.get("symbol", symbol.upper()),
            name=data.get("name", ""),
            exchange=data.get("exchange", ""),
            price=_to_float(data.get("close")),
            open=_to_float(data.get("open")),
            high=_to_float(data.get("high")),
            low=_to_float(data.get("low")),
            previous_close=_to_float(data.get("previous_close")),
            change=_to_float(data.get("change")),
            change_percent=_to_float(data.get("percent_change")),
            volume=_to_int(data.get("volume")),
        )

    async def search_symbols(self, query: str) -> list[SymbolSearchResult]:
        data = await self._get(
            "/symbol_search",
            {"symbol": query, "outputsize": str(SEARCH_OUTPUT_SIZE)},
            default_error="Search failed",
        )
        items = data.get("data") or []
        if not isinstance(items, list):
            raise UpstreamError("Malformed search payload")
        return [
            SymbolSearchResult(
                symbol=item.get("symbol", ""),
                name=item.get("instrument_name", ""),
                type=item.get("instrument_type", ""),
                exchange=item.get("exchange", ""),
                country=item.get("country", ""),
            )
            for item in items
            if isinstance(item, dict)
        ]

    # ------------------------------------------------------------------
    # Private helpers
    # ------------------------------------------------------------------

    async def _get(self, path: str, params: dict, default_error: str) -> dict:
        if not self._api_key:
            raise ConfigurationError("TWELVE_DATA_API_KEY not configured")

        url = f"{self._base_url}{path}"
        query = {**params, "apikey": self._api_key}
        try:
            if self._client is not None:
                response = await self._client.get(url, params=query)
            else:
                async with httpx.AsyncClient(timeout=self._timeout) as client:
                    response = await client.get(url, params=query)
            data = response.json()
        except httpx.HTTPError as exc:
            logger.warning("Twelve Data request %s failed: %s", path, exc)
            raise UpstreamError(f"Upstream request failed: {exc}") from exc
        except ValueError as exc:
            raise UpstreamError("Upstream returned a non-JSON response") from exc

        if not isinstance(data, dict):
            raise UpstreamError("Malformed upstream payload")
        if data.get("status") == "error":
            raise UpstreamError(data.get("message") or default_error)
        return data


def _to_candles(rows: list[Any]) -> tuple[Candle, ...]:
    candles: list[Candle] = []
    for row in rows:
        if not isinstance(row, dict):
            continue
        open_, close = _to_float(row.get("open")), _to_float(row.get("close"))
        high, low = _to_float(row.get("high")), _to_float(row.get("low"))
        time = _to_epoch(row.get("datetime"))
        if open_ is None or close is None or time is None:
            continue
        candles.append(
            Candle(
                time=time,
                open=open_,
                high=max(open_, close) if high is None else high,
                low=min(open_, close) if low is None else low,
                close=close,
                volume=max(_to_int(row.get("volume")) or 0, 0),
            )
        )
    candles.reverse()

    unique: dict[int, Candle] = {}
    for candle in candles:
        unique.setdefault(candle.time, candle)
    return tuple(sorted(unique.values(), key=lambda c: c.time))


def _to_epoch(value: Any) -> Optional[int]:
    """Parse a row datetime to epoch seconds.

    Date-only values ('YYYY-MM-DD') are UTC midnight; intraday values
    ('YYYY-MM-DD HH:MM:SS') are in the exchange timezone requested upstream.
    """
    if not isinstance(value, str):
        return None
    value = value.strip()
    try:
        parsed = datetime.fromisoformat(value)
    except ValueError:
        return None
    if parsed.tzinfo is None:
        tz = timezone.utc if len(value) == 10 else ZoneInfo(EXCHANGE_TIMEZONE)
        parsed = parsed.replace(tzinfo=tz)
    return int(parsed.timestamp())


def _iso(epoch: int) -> str:
    return datetime.fromtimestamp(epoch, tz=timezone.utc).isoformat().replace("+00:00", "Z")


def _to_float(value: Any) -> Optional[float]:
    try:
        result = float(value)
    except (TypeError, ValueError):
        return None
    return result if math.isfinite(result) else None


def _to_int(value: Any) -> Optional[int]:
    try:
        return int(float(value))
    except (TypeError, ValueError, OverflowError):
        return None
