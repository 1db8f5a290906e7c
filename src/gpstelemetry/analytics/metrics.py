"""Trip summary: distance, duration, speed extrema and movement breakdown."""

from __future__ import annotations

from itertools import pairwise
from typing import Iterable

from gpstelemetry.models.record import TelemetryRecord
from gpstelemetry.models.summary import MetricsSummary

from .geo import haversine_km
from .movement import compute_movement_stats
from .ordering import ensure_chronological


def compute_trip_metrics(records: Iterable[TelemetryRecord]) -> MetricsSummary:
    """Summarize a record sequence as one trip.

    Fewer than two records cannot describe any travel, so the result is an
    all-zero summary. Speed extrema consider every record after the first.
    """
    ordered = ensure_chronological(records)
    if len(ordered) < 2:
        return MetricsSummary()

    total_distance = 0.0  # km
    total_duration = 0.0  # seconds
    max_speed: float | None = None
    min_speed: float | None = None

    for prev, curr in pairwise(ordered):
        total_distance += haversine_km(prev.lat, prev.lng, curr.lat, curr.lng)
        total_duration += (curr.log_timestamp - prev.log_timestamp).total_seconds()

        speed = curr.speed
        if max_speed is None or speed > max_speed:
            max_speed = speed
        if min_speed is None or speed < min_speed:
            min_speed = speed

    average_speed = total_distance / (total_duration / 3600) if total_duration > 0 else 0.0

    return MetricsSummary(
        total_distance=total_distance,
        total_duration=total_duration,
        average_speed=average_speed,
        max_speed=max_speed if max_speed is not None else 0.0,
        min_speed=min_speed if min_speed is not None else 0.0,
        movement_stats=compute_movement_stats(ordered),
    )
