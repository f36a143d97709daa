from __future__ import annotations

from datetime import date

import pytest

from fx_ptax.ingestion.models import FetchOutcome, FetchStatus
from fx_ptax.ingestion.models import PtaxRateRecord


class FakeFeed:
    """Feed that serves canned bodies per day and records every request."""

    def __init__(self, bodies: dict[date, str] | None = None, failures: dict[date, FetchStatus] | None = None) -> None:
        self.bodies = bodies or {}
        self.failures = failures or {}
        self.calls: list[tuple[date, float]] = []

    def fetch(self, day: date, *, timeout: float) -> FetchOutcome:
        self.calls.append((day, timeout))
        url = f"fake://{day.strftime('%Y%m%d')}.csv"
        if day in self.failures:
            return FetchOutcome(self.failures[day], url, detail="fake failure")
        if day in self.bodies:
            return FetchOutcome(FetchStatus.SUCCESS, url, text=self.bodies[day])
        return FetchOutcome(FetchStatus.NO_DATA, url, detail="HTTP 404")


class FakeClock:
    def __init__(self, start: float = 1000.0) -> None:
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def fake_clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def sample_rates() -> list[PtaxRateRecord]:
    return [
        PtaxRateRecord(
            rate_date=date(2025, 12, 15),
            currency_numeric_code=220,
            currency_kind="A",
            currency="USD",
            buy_rate=5.0,
            sell_rate=5.1,
            buy_parity=1.0,
            sell_parity=1.0,
        ),
        PtaxRateRecord(
            rate_date=date(2025, 12, 15),
            currency_numeric_code=978,
            currency_kind="B",
            currency="EUR",
            buy_rate=6.0,
            sell_rate=6.12,
            buy_parity=1.2,
            sell_parity=1.2,
        ),
    ]


@pytest.fixture
def make_feed():
    return FakeFeed
