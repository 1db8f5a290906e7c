"""gpstelemetry: vehicle telemetry analytics and a typed tracking-backend client."""

from gpstelemetry._filters import TimeRange
from gpstelemetry.client import AsyncGpsTrackerClient, GpsTrackerClient
from gpstelemetry.exceptions import (
    GpsTelemetryAPIError,
    GpsTelemetryConnectionError,
    GpsTelemetryError,
    GpsTelemetryTimeoutError,
    GpsTelemetryValidationError,
)
from gpstelemetry.query import RecordQuery, SortOrder

__all__ = [
    "AsyncGpsTrackerClient",
    "GpsTelemetryAPIError",
    "GpsTelemetryConnectionError",
    "GpsTelemetryError",
    "GpsTelemetryTimeoutError",
    "GpsTelemetryValidationError",
    "GpsTrackerClient",
    "RecordQuery",
    "SortOrder",
    "TimeRange",
]

__version__ = "0.1.0"
