"""Per-sensor trend series and coordinate tracks."""

from __future__ import annotations

from typing import Iterable

from gpstelemetry.models.record import TelemetryRecord
from gpstelemetry.models.series import RoutePoint, TrendSeries

from .ordering import ensure_chronological


def extract_trend(records: Iterable[TelemetryRecord], sensor_code: str) -> TrendSeries:
    """Timestamps and raw values of one sensor code, oldest first.

    Records that did not report the code contribute ``None`` so both lists
    stay aligned.
    """
    ordered = ensure_chronological(records)
    return TrendSeries(
        labels=[r.log_timestamp.isoformat() for r in ordered],
        values=[r.reading(sensor_code) for r in ordered],
    )


def extract_route(records: Iterable[TelemetryRecord]) -> list[RoutePoint]:
    """Coordinate track of the records, oldest first."""
    return [
        RoutePoint(
            id=r.id,
            lat=r.lat,
            lng=r.lng,
            location=r.location,
            timestamp=r.log_timestamp,
        )
        for r in ensure_chronological(records)
    ]
