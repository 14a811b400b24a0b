"""
Pydantic request/response schemas for the HTTP surface.

Domain entities are plain dataclasses; these models read them via
from_attributes and dump them with the camelCase keys of the JSON contract
(previousClose, changePercent, summaryCards, ...).
"""

from typing import Literal, Optional

from pydantic import AliasGenerator, BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=AliasGenerator(serialization_alias=to_camel),
        from_attributes=True,
    )


# ---------------------------------------------------------------------------
# Requests
# ---------------------------------------------------------------------------


class AuthRequest(BaseModel):
    action: str
    email: Optional[str] = None
    password: Optional[str] = None


class ChatRequest(BaseModel):
    message: str
    symbol: Optional[str] = None


# ---------------------------------------------------------------------------
# Market data
# ---------------------------------------------------------------------------


class CandleOut(CamelModel):
    time: int
    open: float
    high: float
    low: float
    close: float
    volume: int


class ChartMetaOut(CamelModel):
    first_date: Optional[str]
    last_date: Optional[str]
    count: int


class ChartDataOut(CamelModel):
    symbol: str
    timeframe: str
    interval: str
    exchange: Optional[str] = None
    currency: Optional[str] = None
    candles: list[CandleOut]
    meta: ChartMetaOut


class QuoteOut(CamelModel):
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


class SearchResultOut(CamelModel):
    symbol: str
    name: str
    type: str
    exchange: str
    country: str


# ---------------------------------------------------------------------------
# Scanner
# ---------------------------------------------------------------------------


class SummaryCardOut(CamelModel):
    title: str
    value: str
    change: str
    icon_key: str
    tone: str
    detail: str


class FilterChipOut(CamelModel):
    label: str
    value: str


class ScanResultOut(CamelModel):
    symbol: str
    name: str
    price: float
    change: float
    volume: str
    rvol: float
    float: str
    setup: str
    conviction: int
    trend: list[float]


class CatalystOut(CamelModel):
    title: str
    description: str
    detail: str


class FocusStackOut(CamelModel):
    label: str
    value: str
    change: str


class ScannerPayloadOut(CamelModel):
    summary_cards: list[SummaryCardOut]
    filter_chips: list[FilterChipOut]
    scan_results: list[ScanResultOut]
    catalysts: list[CatalystOut]
    focus_stacks: list[FocusStackOut]
    source: Literal["default", "live"]


def dump(model: type[CamelModel], entity: object) -> dict:
    """Validate a domain dataclass through *model* and dump it with camelCase keys."""
    return model.model_validate(entity).model_dump(by_alias=True)
