"""
Domain entities for the scanner view.
Pure Python dataclasses, no external dependencies.
"""

from dataclasses import dataclass
from typing import Literal

SOURCE_DEFAULT = "default"
SOURCE_LIVE = "live"


@dataclass(frozen=True)
class SummaryCard:
    title: str
    value: str
    change: str
    icon_key: Literal["TrendingUp", "BarChart3", "Activity"]
    tone: str
    detail: str


@dataclass(frozen=True)
class FilterChip:
    label: str
    value: str


@dataclass(frozen=True)
class ScanResult:
    symbol: str
    name: str
    price: float
    change: float
    volume: str
    rvol: float
    float: str
    setup: str
    conviction: int
    trend: tuple[float, ...]


@dataclass(frozen=True)
class Catalyst:
    title: str
    description: str
    detail: str


@dataclass(frozen=True)
class FocusStack:
    label: str
    value: str
    change: str


@dataclass(frozen=True)
class ScannerSections:
    """The five independently queried row-sets behind a ScannerPayload."""

    summary_cards: tuple[SummaryCard, ...]
    filter_chips: tuple[FilterChip, ...]
    scan_results: tuple[ScanResult, ...]
    catalysts: tuple[Catalyst, ...]
    focus_stacks: tuple[FocusStack, ...]


@dataclass(frozen=True)
class ScannerPayload(ScannerSections):
    source: Literal["default", "live"] = SOURCE_DEFAULT
