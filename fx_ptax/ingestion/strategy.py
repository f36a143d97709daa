"""Abstractions for pluggable feed transports."""

from __future__ import annotations

from datetime import date
from typing import Protocol

from fx_ptax.ingestion.models import FetchOutcome


class FeedStrategy(Protocol):
    """Contract for retrieving one day of PTAX feed text.

    Implementations must never raise for transport problems; they report them
    through :class:`FetchOutcome` so the resolver can move on to the previous
    day.
    """

    def fetch(self, day: date, *, timeout: float) -> FetchOutcome:
        ...  # pragma: no cover - protocol definition


__all__ = ["FeedStrategy"]
