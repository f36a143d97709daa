"""Public interface for the fx_ptax package."""

from __future__ import annotations

import dataclasses
from datetime import date, datetime
from importlib import metadata as importlib_metadata
from typing import Any

from fx_ptax.cache import RateSetCache
from fx_ptax.converter import convert as _convert
from fx_ptax.converter import find_rate, supported_currencies
from fx_ptax.errors import CurrencyNotFoundError, DataUnavailableError, PTAXError
from fx_ptax.ingestion.bcb_requests import BCBRequestsClient
from fx_ptax.ingestion.models import ConversionResult, PtaxOptions, PtaxRateRecord
from fx_ptax.ingestion.strategy import FeedStrategy
from fx_ptax.resolver import PtaxResolver, ResolvedRates
from fx_ptax.utils.dates import coerce_date

__all__ = [
    "__version__",
    "FxPtax",
    "PtaxOptions",
    "PtaxRateRecord",
    "ConversionResult",
    "ResolvedRates",
    "PTAXError",
    "CurrencyNotFoundError",
    "DataUnavailableError",
    "fetch_rates",
    "get_latest_rates",
    "get_rates_by_date",
    "clear_cache",
    "get_rate",
    "get_supported_currencies",
    "convert",
]

try:
    __version__ = importlib_metadata.version("fx-ptax")
except importlib_metadata.PackageNotFoundError:  # pragma: no cover - fallback for local runs
    __version__ = "0.1.0"


class FxPtax:
    """Package facade that owns the resolver, its cache and its transport."""

    __slots__ = ("resolver", "default_options")

    __version__ = __version__

    def __init__(
        self,
        feed: FeedStrategy | None = None,
        *,
        cache: RateSetCache | None = None,
        options: PtaxOptions | None = None,
    ) -> None:
        """Build a facade around a :class:`PtaxResolver`.

        ``feed`` defaults to :class:`BCBRequestsClient`, which talks to the
        public BCB archive. Tests and callers with their own HTTP stack can
        inject any object implementing :class:`FeedStrategy`. ``options``
        become the defaults for every call that does not pass its own.
        """

        self.resolver = PtaxResolver(feed or BCBRequestsClient(), cache=cache)
        self.default_options = options or PtaxOptions()

    def _options(self, options: PtaxOptions | None, overrides: dict[str, Any]) -> PtaxOptions:
        base = options or self.default_options
        changes = {key: value for key, value in overrides.items() if value is not None}
        return dataclasses.replace(base, **changes) if changes else base

    def fetch_rates(
        self,
        start_date: date | datetime | str | None = None,
        options: PtaxOptions | None = None,
        *,
        max_retries: int | None = None,
        timeout: int | None = None,
    ) -> ResolvedRates:
        """Resolve rates on or before ``start_date`` (today when omitted)."""

        start = coerce_date(start_date) if start_date is not None else date.today()
        opts = self._options(options, {"max_retries": max_retries, "timeout": timeout})
        return self.resolver.resolve(start, opts)

    def latest_rates(
        self,
        options: PtaxOptions | None = None,
        *,
        max_retries: int | None = None,
        timeout: int | None = None,
    ) -> list[PtaxRateRecord]:
        return self.fetch_rates(None, options, max_retries=max_retries, timeout=timeout).rates

    def rates_by_date(
        self,
        day: date | datetime | str,
        options: PtaxOptions | None = None,
        *,
        max_retries: int | None = None,
        timeout: int | None = None,
    ) -> list[PtaxRateRecord]:
        return self.fetch_rates(day, options, max_retries=max_retries, timeout=timeout).rates

    def clear_cache(self) -> None:
        self.resolver.clear_cache()

    def rate(
        self,
        currency: str,
        options: PtaxOptions | None = None,
        *,
        max_retries: int | None = None,
        timeout: int | None = None,
    ) -> PtaxRateRecord:
        """Return the latest quote for ``currency``."""

        rates = self.latest_rates(options, max_retries=max_retries, timeout=timeout)
        return find_rate(rates, currency)

    def supported_currencies(
        self,
        options: PtaxOptions | None = None,
        *,
        max_retries: int | None = None,
        timeout: int | None = None,
    ) -> list[str]:
        rates = self.latest_rates(options, max_retries=max_retries, timeout=timeout)
        return supported_currencies(rates)

    def convert(
        self,
        amount: float,
        from_currency: str,
        to_currency: str,
        options: PtaxOptions | None = None,
        *,
        max_retries: int | None = None,
        timeout: int | None = None,
        rate_kind: str | None = None,
    ) -> ConversionResult:
        """Convert ``amount`` using the latest resolvable PTAX rate set."""

        opts = self._options(
            options,
            {"max_retries": max_retries, "timeout": timeout, "rate_kind": rate_kind},
        )
        rates = self.latest_rates(opts)
        return _convert(rates, amount, from_currency, to_currency, opts.rate_kind)


_DEFAULT_CLIENT: FxPtax | None = None


def _default_client() -> FxPtax:
    global _DEFAULT_CLIENT
    if _DEFAULT_CLIENT is None:
        _DEFAULT_CLIENT = FxPtax()
    return _DEFAULT_CLIENT


def fetch_rates(
    start_date: date | datetime | str | None = None, options: PtaxOptions | None = None
) -> ResolvedRates:
    return _default_client().fetch_rates(start_date, options)


def get_latest_rates(options: PtaxOptions | None = None) -> list[PtaxRateRecord]:
    return _default_client().latest_rates(options)


def get_rates_by_date(
    day: date | datetime | str, options: PtaxOptions | None = None
) -> list[PtaxRateRecord]:
    return _default_client().rates_by_date(day, options)


def clear_cache() -> None:
    _default_client().clear_cache()


def get_rate(currency: str, options: PtaxOptions | None = None) -> PtaxRateRecord:
    return _default_client().rate(currency, options)


def get_supported_currencies(options: PtaxOptions | None = None) -> list[str]:
    return _default_client().supported_currencies(options)


def convert(
    amount: float,
    from_currency: str,
    to_currency: str,
    options: PtaxOptions | None = None,
) -> ConversionResult:
    return _default_client().convert(amount, from_currency, to_currency, options)
