"""BCB-specific constants shared across the package."""

from __future__ import annotations

from typing import Final

BCB_BASE_URL: Final[str] = "https://www4.bcb.gov.br/Download/fechamento"
BCB_USER_AGENT: Final[str] = "fx-ptax/0.1"
BASE_CURRENCY: Final[str] = "BRL"

DEFAULT_MAX_RETRIES: Final[int] = 5
# Milliseconds, converted to seconds when handed to ``requests``.
DEFAULT_TIMEOUT_MS: Final[int] = 10_000
CACHE_TTL_SECONDS: Final[float] = 5 * 60

RATE_KINDS: Final[tuple[str, ...]] = ("buy", "sell")
CURRENCY_KINDS: Final[tuple[str, ...]] = ("A", "B")


def build_feed_url(url_date: str, base_url: str = BCB_BASE_URL) -> str:
    """Return the CSV location for a ``YYYYMMDD`` date segment."""

    return f"{base_url.rstrip('/')}/{url_date}.csv"


__all__ = [
    "BCB_BASE_URL",
    "BCB_USER_AGENT",
    "BASE_CURRENCY",
    "DEFAULT_MAX_RETRIES",
    "DEFAULT_TIMEOUT_MS",
    "CACHE_TTL_SECONDS",
    "RATE_KINDS",
    "CURRENCY_KINDS",
    "build_feed_url",
]
