"""Telemetry analytics engine: pure functions over ordered record sequences."""

from .dashboard import average_odometer_by_device, compute_dashboard_report, count_gnss_status
from .geo import EARTH_RADIUS_KM, haversine_km
from .metrics import compute_trip_metrics
from .movement import (
    MovementState,
    SegmentAccumulator,
    compute_movement_stats,
    is_engine_on,
    matching_states,
)
from .ordering import ensure_chronological, is_chronological
from .trends import extract_route, extract_trend

__all__ = [
    "EARTH_RADIUS_KM",
    "MovementState",
    "SegmentAccumulator",
    "average_odometer_by_device",
    "compute_dashboard_report",
    "compute_movement_stats",
    "compute_trip_metrics",
    "count_gnss_status",
    "ensure_chronological",
    "extract_route",
    "extract_trend",
    "haversine_km",
    "is_chronological",
    "is_engine_on",
    "matching_states",
]
