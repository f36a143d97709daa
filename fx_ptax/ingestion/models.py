"""Data models shared across ingestion and conversion modules."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from enum import Enum
from typing import Literal

from fx_ptax.utils.bcb import DEFAULT_MAX_RETRIES, DEFAULT_TIMEOUT_MS, RATE_KINDS

RateKind = Literal["buy", "sell"]
CurrencyKind = Literal["A", "B"]


@dataclass(slots=True, frozen=True)
class PtaxRateRecord:
    """One currency's PTAX quote for a single business day.

    Rates are expressed in BRL per unit of the foreign currency. Parities are
    carried through from the feed but are not used by the conversion maths.
    """

    rate_date: date
    currency_numeric_code: int
    currency_kind: CurrencyKind
    currency: str
    buy_rate: float
    sell_rate: float
    buy_parity: float
    sell_parity: float

    def rate_for(self, rate_kind: RateKind) -> float:
        """Return the buy or sell side of the quote."""

        if rate_kind == "buy":
            return self.buy_rate
        if rate_kind == "sell":
            return self.sell_rate
        raise ValueError(f"rate_kind must be one of {RATE_KINDS}, got {rate_kind!r}")


@dataclass(slots=True, frozen=True)
class ConversionResult:
    """Outcome of a single currency conversion."""

    from_currency: str
    to_currency: str
    amount: float
    result: float
    rate: float
    rate_kind: RateKind
    rate_date: date


class FetchStatus(str, Enum):
    """Outcome of a single download attempt."""

    SUCCESS = "success"
    NO_DATA = "no_data"
    TRANSIENT_FAILURE = "transient_failure"


@dataclass(slots=True, frozen=True)
class FetchOutcome:
    status: FetchStatus
    url: str
    text: str = ""
    detail: str | None = None

    @property
    def ok(self) -> bool:
        return self.status is FetchStatus.SUCCESS


@dataclass(slots=True, frozen=True)
class PtaxOptions:
    """Knobs shared by every public operation.

    ``timeout`` is expressed in milliseconds. ``rate_kind`` only matters for
    conversions.
    """

    max_retries: int = DEFAULT_MAX_RETRIES
    timeout: int = DEFAULT_TIMEOUT_MS
    rate_kind: RateKind = "sell"

    def __post_init__(self) -> None:
        if self.max_retries < 1:
            raise ValueError("max_retries must be at least 1")
        if self.timeout <= 0:
            raise ValueError("timeout must be positive")
        if self.rate_kind not in RATE_KINDS:
            raise ValueError(f"rate_kind must be one of {RATE_KINDS}")

    @property
    def timeout_seconds(self) -> float:
        return self.timeout / 1000


__all__ = [
    "PtaxRateRecord",
    "ConversionResult",
    "PtaxOptions",
    "FetchStatus",
    "FetchOutcome",
    "RateKind",
    "CurrencyKind",
]
