"""
Tests for src/application/services/chart_view.py - the charting widget contract.
"""

import pytest

from conftest import make_chart_data
from src.application.services.chart_view import (
    BEAR_VOLUME_COLOR,
    BULL_VOLUME_COLOR,
    VOLUME_PRICE_SCALE_ID,
    build_chart_view,
    format_price,
    format_volume,
)
from src.domain.entities.market_data import Candle, ChartData, ChartMeta


@pytest.mark.parametrize(
    "volume, expected",
    [(950, "950"), (1_500, "1.50K"), (58_414_460, "58.41M"), (2_340_000_000, "2.34B")],
)
def test_format_volume(volume, expected):
    assert format_volume(volume) == expected


def test_format_price_uses_thousands_separator():
    assert format_price(1495.8) == "1,495.80"


def test_volume_bars_on_dedicated_scale_colored_by_direction():
    view = build_chart_view(make_chart_data())
    assert view.volume_price_scale_id == VOLUME_PRICE_SCALE_ID
    assert [bar.color for bar in view.volume] == [BULL_VOLUME_COLOR, BEAR_VOLUME_COLOR]
    assert [bar.time for bar in view.volume] == [c.time for c in view.candles]


def test_header_tracks_latest_candle():
    view = build_chart_view(make_chart_data())
    header = view.header
    assert header.symbol == "AAPL"
    assert header.exchange == "NASDAQ"
    assert header.close == "181.20"
    assert header.change == "-0.70"
    assert header.change_percent == "-0.38%"
    assert header.volume == "62.38M"
    assert header.bullish is False


def test_header_follows_crosshair():
    crosshair = Candle(time=1, open=100.0, high=110.0, low=99.0, close=105.0, volume=1200)
    header = build_chart_view(make_chart_data(), crosshair=crosshair).header
    assert header.change == "+5.00"
    assert header.change_percent == "+5.00%"
    assert header.volume == "1.20K"
    assert header.bullish is True


def test_empty_series_has_no_header():
    data = ChartData(
        symbol="AAPL",
        timeframe="daily",
        interval="1day",
        candles=(),
        meta=ChartMeta(first_date=None, last_date=None, count=0),
    )
    view = build_chart_view(data)
    assert view.header is None
    assert view.volume == ()
