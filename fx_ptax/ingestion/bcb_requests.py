"""requests-based downloader for the daily BCB PTAX closing files."""

from __future__ import annotations

from datetime import date

import requests

from fx_ptax.ingestion.models import FetchOutcome, FetchStatus
from fx_ptax.utils.bcb import BCB_BASE_URL, BCB_USER_AGENT, build_feed_url
from fx_ptax.utils.dates import format_url_date
from fx_ptax.utils.logger import get_logger

LOGGER = get_logger(__name__)


class BCBRequestsClient:
    """Download ``YYYYMMDD.csv`` files from the BCB closing archive.

    Transport errors, timeouts and non-2xx responses are folded into a
    :class:`FetchOutcome` instead of being raised.
    """

    def __init__(
        self,
        *,
        base_url: str = BCB_BASE_URL,
        session: requests.Session | None = None,
        user_agent: str = BCB_USER_AGENT,
    ) -> None:
        self.base_url = base_url
        self.session = session or requests.Session()
        self.session.headers.setdefault("User-Agent", user_agent)

    def url_for(self, day: date) -> str:
        return build_feed_url(format_url_date(day), self.base_url)

    def fetch(self, day: date, *, timeout: float) -> FetchOutcome:
        url = self.url_for(day)
        try:
            response = self.session.get(url, timeout=timeout)
        except requests.Timeout as exc:
            LOGGER.debug("Timed out after %ss fetching %s: %s", timeout, url, exc)
            return FetchOutcome(FetchStatus.TRANSIENT_FAILURE, url, detail="timeout")
        except requests.RequestException as exc:
            LOGGER.debug("Request for %s failed: %s", url, exc)
            return FetchOutcome(FetchStatus.TRANSIENT_FAILURE, url, detail=str(exc))

        if not 200 <= response.status_code < 300:
            return FetchOutcome(
                FetchStatus.NO_DATA, url, detail=f"HTTP {response.status_code}"
            )
        return FetchOutcome(FetchStatus.SUCCESS, url, text=response.text)

    def close(self) -> None:
        self.session.close()

    def __enter__(self) -> "BCBRequestsClient":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()


__all__ = ["BCBRequestsClient"]
