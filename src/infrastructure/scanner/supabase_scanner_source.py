"""
Infrastructure adapter: Supabase PostgREST tables → IScannerDataSource.

Each scanner section lives in its own table and is read with
``select=*&order=rank.asc``. Rows may use the snake_case column names of the
database or the camelCase keys of the JSON contract. Any HTTP or parsing
failure propagates; GetScannerPayloadUseCase owns the fallback decision.
"""

from typing import Any, Callable, Optional, TypeVar

import httpx

from src.domain.entities.scanner import (
    Catalyst,
    FilterChip,
    FocusStack,
    ScanResult,
    SummaryCard,
)
from src.domain.ports.scanner_source_port import IScannerDataSource

T = TypeVar("T")

SUMMARY_TABLE = "scanner_summary"
FILTERS_TABLE = "scanner_filters"
SIGNALS_TABLE = "scanner_signals"
CATALYSTS_TABLE = "scanner_catalysts"
FOCUS_TABLE = "scanner_focus"


class SupabaseScannerDataSource(IScannerDataSource):
    """Reads scanner sections from Supabase with the service-role key."""

    def __init__(
        self,
        url: Optional[str],
        service_role_key: Optional[str],
        client: Optional[httpx.AsyncClient] = None,
        timeout: float = 10.0,
    ) -> None:
        self._url = url.rstrip("/") if url else None
        self._key = service_role_key
        self._client = client
        self._timeout = timeout

    @property
    def is_configured(self) -> bool:
        return bool(self._url and self._key)

    async def fetch_summary_cards(self) -> list[SummaryCard]:
        return await self._select(SUMMARY_TABLE, _summary_card)

    async def fetch_filter_chips(self) -> list[FilterChip]:
        return await self._select(FILTERS_TABLE, _filter_chip)

    async def fetch_scan_results(self) -> list[ScanResult]:
        return await self._select(SIGNALS_TABLE, _scan_result)

    async def fetch_catalysts(self) -> list[Catalyst]:
        return await self._select(CATALYSTS_TABLE, _catalyst)

    async def fetch_focus_stacks(self) -> list[FocusStack]:
        return await self._select(FOCUS_TABLE, _focus_stack)

    # ------------------------------------------------------------------
    # Private helpers
    # ------------------------------------------------------------------

    async def _select(self, table: str, to_entity: Callable[[dict], T]) -> list[T]:
        url = f"{self._url}/rest/v1/{table}"
        params = {"select": "*", "order": "rank.asc"}
        headers = {"apikey": self._key, "Authorization": f"Bearer {self._key}"}
        if self._client is not None:
            response = await self._client.get(url, params=params, headers=headers)
        else:
            async with httpx.AsyncClient(timeout=self._timeout) as client:
                response = await client.get(url, params=params, headers=headers)
        response.raise_for_status()
        rows = response.json()
        if not isinstance(rows, list):
            raise ValueError(f"Unexpected payload for table {table!r}")
        return [to_entity(row) for row in rows]


def _get(row: dict, snake: str, camel: Optional[str] = None, default: Any = None) -> Any:
    if snake in row:
        return row[snake]
    if camel and camel in row:
        return row[camel]
    return default


def _summary_card(row: dict) -> SummaryCard:
    return SummaryCard(
        title=row["title"],
        value=str(row["value"]),
        change=str(_get(row, "change", default="")),
        icon_key=_get(row, "icon_key", "iconKey", "Activity"),
        tone=_get(row, "tone", default=""),
        detail=_get(row, "detail", default=""),
    )


def _filter_chip(row: dict) -> FilterChip:
    return FilterChip(label=row["label"], value=str(row["value"]))


def _scan_result(row: dict) -> ScanResult:
    return ScanResult(
        symbol=row["symbol"],
        name=_get(row, "name", default=""),
        price=float(row["price"]),
        change=float(_get(row, "change", default=0)),
        volume=str(_get(row, "volume", default="")),
        rvol=float(_get(row, "rvol", default=0)),
        float=str(_get(row, "float", default="")),
        setup=_get(row, "setup", default=""),
        conviction=int(_get(row, "conviction", default=0)),
        trend=tuple(float(point) for point in _get(row, "trend", default=None) or ()),
    )


def _catalyst(row: dict) -> Catalyst:
    return Catalyst(
        title=row["title"],
        description=_get(row, "description", default=""),
        detail=_get(row, "detail", default=""),
    )


def _focus_stack(row: dict) -> FocusStack:
    return FocusStack(
        label=row["label"],
        value=str(row["value"]),
        change=str(_get(row, "change", default="")),
    )
