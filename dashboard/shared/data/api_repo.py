"""Tracking-backend repository implementation."""

from __future__ import annotations

from dataclasses import replace

from gpstelemetry import (
    GpsTelemetryAPIError,
    GpsTelemetryError,
    GpsTrackerClient,
    RecordQuery,
    TimeRange,
)
from gpstelemetry.models import RecordPage, TelemetryRecord
from gpstelemetry.query import MAX_PAGE_LIMIT, select

from .base import TelemetryRepository
from .errors import TelemetryDataError
from ..api_logging import log_api_call


def _fetch_all_pages(tracker: GpsTrackerClient, query: RecordQuery) -> list[TelemetryRecord]:
    """Walk every backend page of *query* at the largest page size.

    The backend paginates even when asked not to, so a single request only
    returns its first page. A response without page metadata is complete.
    """
    records: list[TelemetryRecord] = []
    page_number = 1
    while True:
        page = tracker.records(replace(query, page=page_number, limit=MAX_PAGE_LIMIT))
        records.extend(page.data)
        total_pages = page.meta.total_pages
        if total_pages is None or page_number >= total_pages or not page.data:
            break
        page_number += 1

    expected = page.meta.total_items
    if expected is not None and expected > len(records):
        raise TelemetryDataError(
            f"Backend reported {expected} records for {query} but returned {len(records)}"
        )
    return records


class ApiRepository(TelemetryRepository):
    """Fetches records from the tracking backend over HTTP.

    The backend's ordering is not relied on; fetched records are re-filtered
    and re-ordered locally to honour the query.
    """

    def __init__(self, base_url: str, timeout: float = 30.0) -> None:
        self._base_url = base_url
        self._timeout = timeout

    def _client(self) -> GpsTrackerClient:
        return GpsTrackerClient(base_url=self._base_url, timeout=self._timeout)

    @log_api_call
    def find_records(self, query: RecordQuery) -> list[TelemetryRecord]:
        try:
            with self._client() as tracker:
                fetched = _fetch_all_pages(tracker, query)
        except GpsTelemetryError as exc:
            raise TelemetryDataError(f"Failed to fetch records for {query}: {exc}") from exc
        return select(fetched, query)

    @log_api_call
    def find_page(self, query: RecordQuery) -> RecordPage:
        try:
            with self._client() as tracker:
                return tracker.records(query)
        except GpsTelemetryError as exc:
            raise TelemetryDataError(f"Failed to fetch record page for {query}: {exc}") from exc

    @log_api_call
    def find_latest(self, imei: str) -> TelemetryRecord | None:
        try:
            with self._client() as tracker:
                return tracker.latest(imei)
        except GpsTelemetryAPIError as exc:
            if exc.status_code == 404:
                return None
            raise TelemetryDataError(f"Failed to fetch latest record for {imei}: {exc}") from exc
        except GpsTelemetryError as exc:
            raise TelemetryDataError(f"Failed to fetch latest record for {imei}: {exc}") from exc

    @log_api_call
    def find_latest_for_all(self, time_range: TimeRange | None = None) -> list[TelemetryRecord]:
        try:
            with self._client() as tracker:
                records = tracker.latest_for_all()
        except GpsTelemetryError as exc:
            raise TelemetryDataError(f"Failed to fetch latest records: {exc}") from exc
        if time_range is not None:
            records = [r for r in records if time_range.contains(r.log_timestamp)]
        return sorted(records, key=lambda r: r.imei)
