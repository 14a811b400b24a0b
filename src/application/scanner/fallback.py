"""
Built-in fallback scanner dataset.

Served whenever the scanner database is not configured or a query fails,
and used slice-by-slice to fill sections the database returns empty.
"""

from src.domain.entities.scanner import (
    SOURCE_DEFAULT,
    Catalyst,
    FilterChip,
    FocusStack,
    ScannerPayload,
    ScanResult,
    SummaryCard,
)

DEFAULT_SUMMARY_CARDS = (
    SummaryCard(
        title="Momentum Score",
        value="92.4",
        change="+4.2 this week",
        icon_key="TrendingUp",
        tone="text-bull",
        detail="Breakout velocity across top 200 leaders",
    ),
    SummaryCard(
        title="Liquidity Pulse",
        value="$18.6B",
        change="+12.8% avg volume",
        icon_key="BarChart3",
        tone="text-accent-primary",
        detail="Institutional flow above 30-day mean",
    ),
    SummaryCard(
        title="Risk Regime",
        value="Controlled",
        change="Volatility -7.4%",
        icon_key="Activity",
        tone="text-bull",
        detail="Tight spreads across mega & mid caps",
    ),
)

DEFAULT_FILTER_CHIPS = (
    FilterChip("US Equities", "Universe"),
    FilterChip("Above $1B", "Market Cap"),
    FilterChip("Float < 300M", "Float"),
    FilterChip("RSI > 60", "Momentum"),
    FilterChip("RVOL > 1.8", "Volume"),
    FilterChip("Above 20D EMA", "Trend"),
    FilterChip("Catalyst: Earnings", "Event"),
)

DEFAULT_SCAN_RESULTS = (
    ScanResult(
        symbol="NVDA",
        name="NVIDIA Corp.",
        price=129.42,
        change=3.8,
        volume="92.1M",
        rvol=2.4,
        float="24%",
        setup="Momentum Breakout",
        conviction=96,
        trend=(10, 14, 12, 16, 18, 22, 20, 24, 29, 33),
    ),
    ScanResult(
        symbol="META",
        name="Meta Platforms",
        price=512.34,
        change=2.1,
        volume="27.4M",
        rvol=1.9,
        float="13%",
        setup="Earnings Drift",
        conviction=91,
        trend=(12, 13, 14, 13, 15, 17, 18, 19, 21, 23),
    ),
    ScanResult(
        symbol="AVGO",
        name="Broadcom",
        price=1495.8,
        change=1.6,
        volume="3.4M",
        rvol=2.1,
        float="19%",
        setup="Institutional Push",
        conviction=88,
        trend=(8, 9, 11, 12, 13, 15, 16, 19, 20, 22),
    ),
    ScanResult(
        symbol="SMCI",
        name="Super Micro",
        price=913.2,
        change=-1.2,
        volume="10.8M",
        rvol=1.7,
        float="32%",
        setup="Pullback Support",
        conviction=83,
        trend=(18, 17, 16, 15, 14, 14, 15, 16, 17, 18),
    ),
    ScanResult(
        symbol="AMD",
        name="Advanced Micro",
        price=171.6,
        change=0.9,
        volume="45.3M",
        rvol=2.0,
        float="28%",
        setup="Range Expansion",
        conviction=86,
        trend=(11, 12, 13, 13, 14, 16, 17, 18, 18, 19),
    ),
)

DEFAULT_CATALYSTS = (
    Catalyst("Earnings Wave", "23 names reporting in next 5 days", "Semi, AI infra, Cloud"),
    Catalyst("Options Heat", "Call skew accelerating", "Top 15 high gamma tickers"),
    Catalyst("Macro Signal", "Rates stabilizing", "10Y yield < 4.4%"),
)

DEFAULT_FOCUS_STACKS = (
    FocusStack("Leadership Board", "AI Infrastructure", "+18% MoM breadth"),
    FocusStack("Institutional Flow", "Net +$2.1B", "5-day positive streak"),
    FocusStack("Risk Radar", "Low", "VIX < 14.2"),
)

DEFAULT_SCANNER_PAYLOAD = ScannerPayload(
    summary_cards=DEFAULT_SUMMARY_CARDS,
    filter_chips=DEFAULT_FILTER_CHIPS,
    scan_results=DEFAULT_SCAN_RESULTS,
    catalysts=DEFAULT_CATALYSTS,
    focus_stacks=DEFAULT_FOCUS_STACKS,
    source=SOURCE_DEFAULT,
)
