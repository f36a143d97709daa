"""Parser for the semicolon-delimited PTAX closing files published by BCB."""

from __future__ import annotations

import math
from typing import Iterable, cast

from fx_ptax.ingestion.models import CurrencyKind, PtaxRateRecord
from fx_ptax.utils.bcb import CURRENCY_KINDS
from fx_ptax.utils.dates import parse_ptax_date
from fx_ptax.utils.logger import get_logger

LOGGER = get_logger(__name__)

FIELD_DELIMITER = ";"
MIN_FIELDS = 8


def _parse_decimal(value: str) -> float:
    """Convert a comma-decimal number such as ``5,39230000`` into ``float``."""

    number = float(value.strip().replace(",", "."))
    if not math.isfinite(number):
        raise ValueError(f"non-finite value {value!r}")
    return number


def _parse_rate(value: str) -> float:
    rate = _parse_decimal(value)
    if rate <= 0:
        raise ValueError(f"rate must be positive, got {value!r}")
    return rate


class PTAXCSVParser:
    """Turn raw feed text into :class:`PtaxRateRecord` rows.

    Each line carries ``date;code;kind;currency;buy;sell;buy_parity;sell_parity``
    with no header row. Lines that are short, carry an unknown kind or hold
    values that cannot be converted are skipped; they never abort the parse.
    """

    def __init__(self, *, delimiter: str = FIELD_DELIMITER) -> None:
        self.delimiter = delimiter

    def parse(self, text: str) -> list[PtaxRateRecord]:
        rows: list[PtaxRateRecord] = []
        for line in self._iter_lines(text):
            record = self.parse_line(line)
            if record is not None:
                rows.append(record)
        return rows

    def parse_line(self, line: str) -> PtaxRateRecord | None:
        parts = line.split(self.delimiter)
        if len(parts) < MIN_FIELDS:
            return None

        date_raw, code_raw, kind, currency, buy, sell, buy_parity, sell_parity = parts[:MIN_FIELDS]
        if kind not in CURRENCY_KINDS:
            return None

        try:
            return PtaxRateRecord(
                rate_date=parse_ptax_date(date_raw),
                currency_numeric_code=int(code_raw.strip()),
                currency_kind=cast(CurrencyKind, kind),
                currency=currency.strip(),
                buy_rate=_parse_rate(buy),
                sell_rate=_parse_rate(sell),
                buy_parity=_parse_decimal(buy_parity),
                sell_parity=_parse_decimal(sell_parity),
            )
        except ValueError as exc:
            LOGGER.debug("Skipping malformed PTAX line %r: %s", line, exc)
            return None

    @staticmethod
    def _iter_lines(text: str) -> Iterable[str]:
        for raw_line in text.splitlines():
            line = raw_line.strip()
            if line:
                yield line


def parse_ptax_csv(text: str) -> list[PtaxRateRecord]:
    """Parse a whole feed body with the default parser settings."""

    return PTAXCSVParser().parse(text)


__all__ = ["PTAXCSVParser", "parse_ptax_csv", "FIELD_DELIMITER", "MIN_FIELDS"]
