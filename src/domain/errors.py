"""
Domain errors raised by the market-data, scanner, and auth layers.
Zero external dependencies.

ValidationError:    bad caller input, rejected before any I/O.
ConfigurationError: a required credential or key is missing.
UpstreamError:      the external data/auth provider returned an error or
                     malformed data.
"""

from typing import Optional


class MarketDataError(Exception):
    """Base class for every error surfaced by the data adapters."""


class ValidationError(MarketDataError):
    def __init__(self, message: str, valid: Optional[list[str]] = None) -> None:
        super().__init__(message)
        self.valid = valid


class ConfigurationError(MarketDataError):
    pass


class UpstreamError(MarketDataError):
    DEFAULT_MESSAGE = "Failed to fetch data"

    def __init__(self, message: Optional[str] = None) -> None:
        super().__init__(message or self.DEFAULT_MESSAGE)
