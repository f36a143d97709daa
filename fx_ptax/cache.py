"""In-process TTL cache for resolved PTAX rate sets."""

from __future__ import annotations

import threading
import time
from typing import Callable

from fx_ptax.ingestion.models import PtaxRateRecord
from fx_ptax.utils.bcb import CACHE_TTL_SECONDS


class RateSetCache:
    """Map ``YYYY-MM-DD`` keys to rate sets for ``ttl_seconds``.

    Entries are only evicted lazily, when a read finds them expired, or in bulk
    through :meth:`clear`. There is no size bound.
    """

    __slots__ = ("ttl_seconds", "_clock", "_entries", "_lock")

    def __init__(
        self,
        ttl_seconds: float = CACHE_TTL_SECONDS,
        *,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        if ttl_seconds <= 0:
            raise ValueError("ttl_seconds must be positive")
        self.ttl_seconds = ttl_seconds
        self._clock = clock
        self._entries: dict[str, tuple[list[PtaxRateRecord], float]] = {}
        self._lock = threading.Lock()

    def get(self, key: str) -> list[PtaxRateRecord] | None:
        with self._lock:
            entry = self._entries.get(key)
            if entry is None:
                return None
            rates, stored_at = entry
            if self._clock() - stored_at < self.ttl_seconds:
                return list(rates)
            del self._entries[key]
            return None

    def put(self, key: str, rates: list[PtaxRateRecord]) -> None:
        with self._lock:
            self._entries[key] = (list(rates), self._clock())

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def __contains__(self, key: object) -> bool:
        with self._lock:
            return key in self._entries


__all__ = ["RateSetCache"]
