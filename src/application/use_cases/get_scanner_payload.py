"""
Use-case: produce the scanner payload, failing open to the built-in dataset.
Depends only on Domain ports and entities; no infrastructure imports.

Fallback policy:
  - no configured source      → full fallback, source="default", no I/O;
  - live, some sections empty → each empty section replaced by its fallback
                                slice, source="live";
  - any source failure        → full fallback, source="default".
The error is logged and never reaches the caller.
"""

import asyncio
import logging
from typing import Optional

from src.application.scanner.fallback import DEFAULT_SCANNER_PAYLOAD
from src.domain.entities.scanner import SOURCE_LIVE, ScannerPayload
from src.domain.ports.scanner_source_port import IScannerDataSource

logger = logging.getLogger(__name__)


class GetScannerPayloadUseCase:
    def __init__(self, source: Optional[IScannerDataSource] = None) -> None:
        self._source = source

    async def execute(self) -> ScannerPayload:
        if self._source is None or not self._source.is_configured:
            return DEFAULT_SCANNER_PAYLOAD

        try:
            summary, filters, signals, catalysts, focus = await asyncio.gather(
                self._source.fetch_summary_cards(),
                self._source.fetch_filter_chips(),
                self._source.fetch_scan_results(),
                self._source.fetch_catalysts(),
                self._source.fetch_focus_stacks(),
            )
        except Exception:
            logger.exception("Scanner query failed, serving fallback data")
            return DEFAULT_SCANNER_PAYLOAD

        fallback = DEFAULT_SCANNER_PAYLOAD
        return ScannerPayload(
            summary_cards=tuple(summary) or fallback.summary_cards,
            filter_chips=tuple(filters) or fallback.filter_chips,
            scan_results=tuple(signals) or fallback.scan_results,
            catalysts=tuple(catalysts) or fallback.catalysts,
            focus_stacks=tuple(focus) or fallback.focus_stacks,
            source=SOURCE_LIVE,
        )
