"""Exceptions raised by the fx_ptax public API."""

from __future__ import annotations


class PTAXError(Exception):
    """Base class for PTAX-related failures."""


class CurrencyNotFoundError(PTAXError):
    """Raised when a currency code is absent from the resolved rate set."""

    def __init__(self, currency: str) -> None:
        super().__init__(f"Currency not found: {currency}")
        self.currency = currency


class DataUnavailableError(PTAXError):
    """Raised once the lookback window is exhausted without usable data."""

    def __init__(self, days: int) -> None:
        super().__init__(f"No PTAX data available in the last {days} days")
        self.days = days


__all__ = ["PTAXError", "CurrencyNotFoundError", "DataUnavailableError"]
