"""Public client classes for the tracking backend's GPS record API."""

from __future__ import annotations

from typing import Any

from pydantic import TypeAdapter

from gpstelemetry._http import DEFAULT_BASE_URL, DEFAULT_TIMEOUT, AsyncTransport, SyncTransport
from gpstelemetry.exceptions import GpsTelemetryValidationError
from gpstelemetry.models.page import RecordPage
from gpstelemetry.models.record import TelemetryRecord
from gpstelemetry.query import RecordQuery


def _validate(model_type: Any, data: Any, label: str) -> Any:
    """Validate envelope data against a Pydantic type."""
    try:
        return TypeAdapter(model_type).validate_python(data)
    except Exception as exc:
        raise GpsTelemetryValidationError(
            f"Failed to validate {label} response: {exc}"
        ) from exc


def _parse_page(envelope: dict[str, Any]) -> RecordPage:
    return _validate(
        RecordPage,
        {"data": envelope.get("data") or [], "meta": envelope.get("meta") or {}},
        "record page",
    )


def _parse_record(envelope: dict[str, Any]) -> TelemetryRecord:
    return _validate(TelemetryRecord, envelope.get("data"), "latest record")


def _parse_records(envelope: dict[str, Any]) -> list[TelemetryRecord]:
    return _validate(list[TelemetryRecord], envelope.get("data") or [], "record list")


class GpsTrackerClient:
    """Synchronous client for the tracking backend.

    Usage:
        tracker = GpsTrackerClient("http://tracker.local:3000")
        page = tracker.records(RecordQuery(imei="353691845092989", limit=50))
        tracker.close()

        # Or as a context manager:
        with GpsTrackerClient() as tracker:
            latest = tracker.latest("353691845092989")
    """

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = DEFAULT_TIMEOUT,
    ) -> None:
        self._transport = SyncTransport(base_url=base_url, timeout=timeout)

    def __enter__(self) -> GpsTrackerClient:
        return self

    def __exit__(self, *args: object) -> None:
        self.close()

    def close(self) -> None:
        """Close the underlying HTTP connection."""
        self._transport.close()

    # ── Endpoints ──────────────────────────────────────────────

    def records(self, query: RecordQuery | None = None) -> RecordPage:
        """Get telemetry records matching *query* (all records when omitted)."""
        query = query or RecordQuery()
        return _parse_page(self._transport.get("/gps", query.to_params()))

    def latest(self, imei: str) -> TelemetryRecord:
        """Get the newest record for a device; a 404 raises GpsTelemetryAPIError."""
        return _parse_record(self._transport.get(f"/gps/latest/{imei}", []))

    def latest_for_all(self) -> list[TelemetryRecord]:
        """Get the newest record of every device."""
        return _parse_records(self._transport.get("/gps/latest-for-all", []))


class AsyncGpsTrackerClient:
    """Asynchronous client for the tracking backend.

    Usage:
        async with AsyncGpsTrackerClient() as tracker:
            latest = await tracker.latest("353691845092989")
    """

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = DEFAULT_TIMEOUT,
    ) -> None:
        self._transport = AsyncTransport(base_url=base_url, timeout=timeout)

    async def __aenter__(self) -> AsyncGpsTrackerClient:
        return self

    async def __aexit__(self, *args: object) -> None:
        await self.close()

    async def close(self) -> None:
        """Close the underlying HTTP connection."""
        await self._transport.close()

    # ── Endpoints ──────────────────────────────────────────────

    async def records(self, query: RecordQuery | None = None) -> RecordPage:
        """Get telemetry records matching *query* (all records when omitted)."""
        query = query or RecordQuery()
        return _parse_page(await self._transport.get("/gps", query.to_params()))

    async def latest(self, imei: str) -> TelemetryRecord:
        """Get the newest record for a device; a 404 raises GpsTelemetryAPIError."""
        return _parse_record(await self._transport.get(f"/gps/latest/{imei}", []))

    async def latest_for_all(self) -> list[TelemetryRecord]:
        """Get the newest record of every device."""
        return _parse_records(await self._transport.get("/gps/latest-for-all", []))
