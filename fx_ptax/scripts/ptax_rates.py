"""Query BCB PTAX rates and convert amounts from the command line."""

from __future__ import annotations

import argparse
import sys
from datetime import date
from typing import Sequence

from fx_ptax import FxPtax
from fx_ptax.errors import PTAXError
from fx_ptax.ingestion.models import PtaxOptions, PtaxRateRecord
from fx_ptax.utils.bcb import DEFAULT_MAX_RETRIES, DEFAULT_TIMEOUT_MS, RATE_KINDS
from fx_ptax.utils.logger import configure_logging

__all__ = ["parse_args", "main"]


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument(
        "--max-retries",
        type=int,
        default=DEFAULT_MAX_RETRIES,
        help="Number of calendar days (start day included) to search for data",
    )
    parser.add_argument(
        "--timeout",
        type=int,
        default=DEFAULT_TIMEOUT_MS,
        help="Per-request timeout in milliseconds",
    )
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=("DEBUG", "INFO", "WARNING", "ERROR"),
        default=None,
        help="Logging level for fx_ptax (defaults to $FX_PTAX_LOG_LEVEL or WARNING)",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    rates_parser = subparsers.add_parser("rates", help="Print every rate for a day")
    rates_parser.add_argument(
        "--date",
        dest="day",
        type=date.fromisoformat,
        help="Optional start date (YYYY-MM-DD); defaults to today",
    )

    rate_parser = subparsers.add_parser("rate", help="Print the latest quote for one currency")
    rate_parser.add_argument("currency")

    subparsers.add_parser("currencies", help="List currencies in the latest rate set")

    convert_parser = subparsers.add_parser("convert", help="Convert an amount between currencies")
    convert_parser.add_argument("amount", type=float)
    convert_parser.add_argument("from_currency")
    convert_parser.add_argument("to_currency")
    convert_parser.add_argument(
        "--rate-kind",
        choices=RATE_KINDS,
        default="sell",
        help="Which side of the PTAX quote to use",
    )
    return parser.parse_args(argv)


def _format_record(record: PtaxRateRecord) -> str:
    return (
        f"{record.rate_date.isoformat()} {record.currency:<4} {record.currency_kind} "
        f"buy={record.buy_rate:.4f} sell={record.sell_rate:.4f}"
    )


def main(argv: Sequence[str] | None = None, *, client: FxPtax | None = None) -> int:
    args = parse_args(argv)
    configure_logging(args.log_level)
    try:
        options = PtaxOptions(max_retries=args.max_retries, timeout=args.timeout)
    except ValueError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2
    fx = client or FxPtax(options=options)

    try:
        if args.command == "rates":
            resolved = fx.fetch_rates(args.day, options)
            print(f"PTAX rates for {resolved.resolved_date.isoformat()}")
            for record in resolved.rates:
                print(_format_record(record))
        elif args.command == "rate":
            print(_format_record(fx.rate(args.currency, options)))
        elif args.command == "currencies":
            print("\n".join(fx.supported_currencies(options)))
        else:
            result = fx.convert(
                args.amount,
                args.from_currency,
                args.to_currency,
                options,
                rate_kind=args.rate_kind,
            )
            print(
                f"{result.amount:.2f} {result.from_currency} = {result.result:.4f} "
                f"{result.to_currency} (rate={result.rate:.6f}, {result.rate_kind}, "
                f"{result.rate_date.isoformat()})"
            )
    except PTAXError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":  # pragma: no cover - CLI entry point
    sys.exit(main())
