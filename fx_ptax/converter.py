"""Currency lookup and conversion on top of a resolved PTAX rate set."""

from __future__ import annotations

from datetime import date
from typing import Sequence

from fx_ptax.errors import CurrencyNotFoundError
from fx_ptax.ingestion.models import ConversionResult, PtaxRateRecord, RateKind
from fx_ptax.utils.bcb import BASE_CURRENCY, RATE_KINDS


def find_rate(rates: Sequence[PtaxRateRecord], currency: str) -> PtaxRateRecord:
    """Return the first record matching ``currency`` case-insensitively."""

    wanted = currency.upper()
    for record in rates:
        if record.currency.upper() == wanted:
            return record
    raise CurrencyNotFoundError(currency)


def supported_currencies(rates: Sequence[PtaxRateRecord]) -> list[str]:
    return sorted(record.currency for record in rates)


def convert(
    rates: Sequence[PtaxRateRecord],
    amount: float,
    from_currency: str,
    to_currency: str,
    rate_kind: RateKind = "sell",
) -> ConversionResult:
    """Convert ``amount`` between two currencies using BRL as the pivot.

    PTAX quotes are BRL per unit of foreign currency, so BRL -> X divides by
    the X rate, X -> BRL multiplies, and X -> Y goes through BRL. For cross
    conversions the reported ``rate`` is the implied ``X/Y`` ratio.
    """

    if rate_kind not in RATE_KINDS:
        raise ValueError(f"rate_kind must be one of {RATE_KINDS}, got {rate_kind!r}")

    source = from_currency.upper()
    target = to_currency.upper()

    if source == target:
        return ConversionResult(
            from_currency=source,
            to_currency=target,
            amount=amount,
            result=amount,
            rate=1.0,
            rate_kind=rate_kind,
            rate_date=rates[0].rate_date if rates else date.today(),
        )

    if source == BASE_CURRENCY:
        target_record = find_rate(rates, target)
        rate = target_record.rate_for(rate_kind)
        return ConversionResult(
            from_currency=source,
            to_currency=target,
            amount=amount,
            result=amount / rate,
            rate=rate,
            rate_kind=rate_kind,
            rate_date=target_record.rate_date,
        )

    if target == BASE_CURRENCY:
        source_record = find_rate(rates, source)
        rate = source_record.rate_for(rate_kind)
        return ConversionResult(
            from_currency=source,
            to_currency=target,
            amount=amount,
            result=amount * rate,
            rate=rate,
            rate_kind=rate_kind,
            rate_date=source_record.rate_date,
        )

    source_record = find_rate(rates, source)
    target_record = find_rate(rates, target)
    source_rate = source_record.rate_for(rate_kind)
    target_rate = target_record.rate_for(rate_kind)
    return ConversionResult(
        from_currency=source,
        to_currency=target,
        amount=amount,
        result=amount * source_rate / target_rate,
        rate=source_rate / target_rate,
        rate_kind=rate_kind,
        rate_date=source_record.rate_date,
    )


__all__ = ["find_rate", "supported_currencies", "convert"]
