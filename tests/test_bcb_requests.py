from __future__ import annotations

from datetime import date
from types import SimpleNamespace

import requests

from fx_ptax.ingestion.bcb_requests import BCBRequestsClient
from fx_ptax.ingestion.models import FetchStatus


class _DummySession:
    def __init__(self, response=None, error: Exception | None = None) -> None:
        self.headers: dict[str, str] = {}
        self.response = response
        self.error = error
        self.calls: list[tuple[str, float]] = []
        self.closed = False

    def get(self, url: str, timeout: float):
        self.calls.append((url, timeout))
        if self.error is not None:
            raise self.error
        return self.response

    def close(self) -> None:
        self.closed = True


def test_url_uses_compact_date_segment() -> None:
    client = BCBRequestsClient(session=_DummySession())

    assert (
        client.url_for(date(2025, 1, 5))
        == "https://www4.bcb.gov.br/Download/fechamento/20250105.csv"
    )


def test_custom_base_url_and_user_agent() -> None:
    session = _DummySession()
    client = BCBRequestsClient(base_url="http://mirror.local/ptax/", session=session)

    assert client.url_for(date(2025, 1, 5)) == "http://mirror.local/ptax/20250105.csv"
    assert session.headers["User-Agent"].startswith("fx-ptax")


def test_fetch_success_returns_body_and_passes_timeout() -> None:
    session = _DummySession(response=SimpleNamespace(status_code=200, text="body"))
    client = BCBRequestsClient(session=session)

    outcome = client.fetch(date(2025, 12, 15), timeout=2.5)

    assert outcome.ok
    assert outcome.status is FetchStatus.SUCCESS
    assert outcome.text == "body"
    assert session.calls == [
        ("https://www4.bcb.gov.br/Download/fechamento/20251215.csv", 2.5)
    ]


def test_fetch_non_success_status_is_no_data() -> None:
    session = _DummySession(response=SimpleNamespace(status_code=404, text="Not Found"))
    outcome = BCBRequestsClient(session=session).fetch(date(2025, 12, 14), timeout=1)

    assert not outcome.ok
    assert outcome.status is FetchStatus.NO_DATA
    assert outcome.text == ""
    assert outcome.detail == "HTTP 404"


def test_fetch_timeout_is_transient_failure() -> None:
    session = _DummySession(error=requests.Timeout("slow"))
    outcome = BCBRequestsClient(session=session).fetch(date(2025, 12, 14), timeout=1)

    assert outcome.status is FetchStatus.TRANSIENT_FAILURE
    assert outcome.detail == "timeout"


def test_fetch_connection_error_is_transient_failure() -> None:
    session = _DummySession(error=requests.ConnectionError("refused"))
    outcome = BCBRequestsClient(session=session).fetch(date(2025, 12, 14), timeout=1)

    assert outcome.status is FetchStatus.TRANSIENT_FAILURE
    assert "refused" in (outcome.detail or "")


def test_client_context_manager_closes_session() -> None:
    session = _DummySession()
    with BCBRequestsClient(session=session):
        pass

    assert session.closed is True
