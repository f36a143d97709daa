"""Date helpers for PTAX feed addressing and parsing."""

from __future__ import annotations

from datetime import date, datetime, timedelta

PTAX_DATE_FORMAT = "%d/%m/%Y"
URL_DATE_FORMAT = "%Y%m%d"


def parse_ptax_date(value: str) -> date:
    """Parse a ``DD/MM/YYYY`` string from the feed into :class:`date`."""

    return datetime.strptime(value.strip(), PTAX_DATE_FORMAT).date()


def format_ptax_date(value: date) -> str:
    """Format ``value`` back into the feed's ``DD/MM/YYYY`` layout."""

    return value.strftime(PTAX_DATE_FORMAT)


def format_url_date(value: date) -> str:
    """Return the ``YYYYMMDD`` path segment used by the BCB download URL."""

    return value.strftime(URL_DATE_FORMAT)


def format_cache_key(value: date | datetime) -> str:
    """Return the ``YYYY-MM-DD`` key for ``value``, ignoring any time component."""

    if isinstance(value, datetime):
        value = value.date()
    return value.isoformat()


def previous_day(value: date, days: int = 1) -> date:
    return value - timedelta(days=days)


def coerce_date(value: str | date | datetime) -> date:
    """Accept ISO strings, datetimes or dates and return a plain :class:`date`."""

    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    return date.fromisoformat(value.strip())


__all__ = [
    "PTAX_DATE_FORMAT",
    "URL_DATE_FORMAT",
    "parse_ptax_date",
    "format_ptax_date",
    "format_url_date",
    "format_cache_key",
    "previous_day",
    "coerce_date",
]
