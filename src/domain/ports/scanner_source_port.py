"""
Port (interface) for scanner data sources.
Infrastructure adapters (e.g. SupabaseScannerDataSource) must implement this interface.
"""

from abc import ABC, abstractmethod

from src.domain.entities.scanner import (
    Catalyst,
    FilterChip,
    FocusStack,
    ScanResult,
    SummaryCard,
)


class IScannerDataSource(ABC):
    @property
    @abstractmethod
    def is_configured(self) -> bool:
        """True when the credentials needed to reach the database are present."""
        ...

    @abstractmethod
    async def fetch_summary_cards(self) -> list[SummaryCard]: ...

    @abstractmethod
    async def fetch_filter_chips(self) -> list[FilterChip]: ...

    @abstractmethod
    async def fetch_scan_results(self) -> list[ScanResult]: ...

    @abstractmethod
    async def fetch_catalysts(self) -> list[Catalyst]: ...

    @abstractmethod
    async def fetch_focus_stacks(self) -> list[FocusStack]: ...
