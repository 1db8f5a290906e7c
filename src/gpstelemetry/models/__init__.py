"""gpstelemetry data models."""

from gpstelemetry.models.page import PageMeta, RecordPage
from gpstelemetry.models.record import TelemetryRecord
from gpstelemetry.models.series import RoutePoint, TrendSeries
from gpstelemetry.models.summary import (
    DashboardReport,
    GnssFixSummary,
    GnssStatusCounts,
    MetricsSummary,
    MovementStats,
    ValueWithUnit,
)

__all__ = [
    "DashboardReport",
    "GnssFixSummary",
    "GnssStatusCounts",
    "MetricsSummary",
    "MovementStats",
    "PageMeta",
    "RecordPage",
    "RoutePoint",
    "TelemetryRecord",
    "TrendSeries",
    "ValueWithUnit",
]
