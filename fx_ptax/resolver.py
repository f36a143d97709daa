"""Walk back from a start date until BCB has published a PTAX closing file."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date

from fx_ptax.cache import RateSetCache
from fx_ptax.errors import DataUnavailableError
from fx_ptax.ingestion.bcb_requests import BCBRequestsClient
from fx_ptax.ingestion.models import PtaxOptions, PtaxRateRecord
from fx_ptax.ingestion.ptax_csv import PTAXCSVParser
from fx_ptax.ingestion.strategy import FeedStrategy
from fx_ptax.utils.dates import format_cache_key, previous_day
from fx_ptax.utils.logger import get_logger

LOGGER = get_logger(__name__)


@dataclass(slots=True, frozen=True)
class ResolvedRates:
    rates: list[PtaxRateRecord]
    resolved_date: date
    attempts: int


class PtaxResolver:
    """Resolve the most recent rate set on or before a given day.

    Weekends, holidays and upstream gaps are expected, so a failed attempt for
    one day simply moves the search to the previous calendar day. Only running
    out of attempts is reported, as :class:`DataUnavailableError`.
    """

    __slots__ = ("feed", "cache", "parser")

    def __init__(
        self,
        feed: FeedStrategy | None = None,
        *,
        cache: RateSetCache | None = None,
        parser: PTAXCSVParser | None = None,
    ) -> None:
        self.feed: FeedStrategy = feed or BCBRequestsClient()
        self.cache = cache if cache is not None else RateSetCache()
        self.parser = parser or PTAXCSVParser()

    def resolve(self, start_date: date, options: PtaxOptions | None = None) -> ResolvedRates:
        opts = options or PtaxOptions()
        candidate = start_date

        for attempt in range(1, opts.max_retries + 1):
            key = format_cache_key(candidate)
            cached = self.cache.get(key)
            if cached is not None:
                LOGGER.debug("Cache hit for PTAX rates on %s", key)
                return ResolvedRates(rates=cached, resolved_date=candidate, attempts=attempt)

            rates = self._fetch_day(candidate, opts.timeout_seconds)
            if rates:
                self.cache.put(key, rates)
                LOGGER.info(
                    "Resolved %s PTAX rates for %s (requested %s, attempt %s/%s)",
                    len(rates),
                    candidate,
                    start_date,
                    attempt,
                    opts.max_retries,
                )
                return ResolvedRates(rates=rates, resolved_date=candidate, attempts=attempt)

            candidate = previous_day(candidate)

        LOGGER.info(
            "No PTAX data found in %s days ending %s", opts.max_retries, start_date
        )
        raise DataUnavailableError(opts.max_retries)

    def _fetch_day(self, day: date, timeout: float) -> list[PtaxRateRecord]:
        outcome = self.feed.fetch(day, timeout=timeout)
        if not outcome.ok:
            LOGGER.debug(
                "No PTAX data for %s (%s: %s)", day, outcome.status.value, outcome.detail
            )
            return []
        rates = self.parser.parse(outcome.text)
        if not rates:
            LOGGER.debug("PTAX file for %s contained no usable rows", day)
        return rates

    def clear_cache(self) -> None:
        self.cache.clear()


__all__ = ["PtaxResolver", "ResolvedRates"]
