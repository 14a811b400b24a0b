"""
Chart view-model: turns a ChartData snapshot into the series the charting
widget consumes plus the OHLCV header shown above it.

Volume is drawn as a histogram on its own "volume" price scale, pinned to
the bottom 15% of the pane, instead of sharing the price scale with candles.
"""

from dataclasses import dataclass
from typing import Optional

from src.domain.entities.market_data import Candle, ChartData

VOLUME_PRICE_SCALE_ID = "volume"
VOLUME_SCALE_MARGINS = {"top": 0.85, "bottom": 0.0}
BULL_VOLUME_COLOR = "rgba(34, 197, 94, 0.5)"
BEAR_VOLUME_COLOR = "rgba(239, 68, 68, 0.5)"


@dataclass(frozen=True)
class VolumeBar:
    time: int
    value: int
    color: str


@dataclass(frozen=True)
class OhlcvHeader:
    symbol: str
    exchange: Optional[str]
    open: str
    high: str
    low: str
    close: str
    change: str
    change_percent: str
    volume: str
    bullish: bool


@dataclass(frozen=True)
class ChartView:
    candles: tuple[Candle, ...]
    volume: tuple[VolumeBar, ...]
    volume_price_scale_id: str
    header: Optional[OhlcvHeader]


def format_price(price: float) -> str:
    return f"{price:,.2f}"


def format_volume(volume: int) -> str:
    if volume >= 1e9:
        return f"{volume / 1e9:.2f}B"
    if volume >= 1e6:
        return f"{volume / 1e6:.2f}M"
    if volume >= 1e3:
        return f"{volume / 1e3:.2f}K"
    return str(volume)


def build_header(symbol: str, exchange: Optional[str], candle: Candle) -> OhlcvHeader:
    change = candle.close - candle.open
    change_pct = (change / candle.open) * 100 if candle.open else 0.0
    sign = "+" if change >= 0 else ""
    pct_sign = "+" if change_pct >= 0 else ""
    return OhlcvHeader(
        symbol=symbol,
        exchange=exchange,
        open=format_price(candle.open),
        high=format_price(candle.high),
        low=format_price(candle.low),
        close=format_price(candle.close),
        change=f"{sign}{format_price(change)}",
        change_percent=f"{pct_sign}{change_pct:.2f}%",
        volume=format_volume(candle.volume),
        bullish=change >= 0,
    )


def build_chart_view(data: ChartData, crosshair: Optional[Candle] = None) -> ChartView:
    """Build the widget contract for *data*; the header follows *crosshair* when set,
    otherwise the latest candle."""
    volume = tuple(
        VolumeBar(
            time=c.time,
            value=c.volume,
            color=BULL_VOLUME_COLOR if c.close >= c.open else BEAR_VOLUME_COLOR,
        )
        for c in data.candles
    )
    display = crosshair or (data.candles[-1] if data.candles else None)
    header = build_header(data.symbol, data.exchange, display) if display else None
    return ChartView(
        candles=data.candles,
        volume=volume,
        volume_price_scale_id=VOLUME_PRICE_SCALE_ID,
        header=header,
    )
