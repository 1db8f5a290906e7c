"""Fleet telemetry service: repository lookups feeding the analytics engine."""

from __future__ import annotations

from datetime import datetime

from gpstelemetry import RecordQuery, SortOrder
from gpstelemetry.analytics import (
    average_odometer_by_device,
    compute_dashboard_report,
    compute_trip_metrics,
    count_gnss_status,
    extract_route,
    extract_trend,
)
from gpstelemetry.models import (
    DashboardReport,
    GnssStatusCounts,
    MetricsSummary,
    RecordPage,
    RoutePoint,
    TelemetryRecord,
    TrendSeries,
)

from ..api_logging import log_service_call
from ..data.base import TelemetryRepository
from ..data.errors import DeviceNotFoundError


class FleetMetricsService:
    """Encapsulates the fleet analytics used by the dashboard pages.

    Filtering happens in the repository; every engine call receives an
    ascending, already filtered record list. Empty selections produce
    zero-valued results. Only :meth:`latest_record` reports a missing device.
    """

    def __init__(self, repo: TelemetryRepository) -> None:
        self._repo = repo

    def _records(
        self,
        imei: str | None,
        start: datetime | None,
        end: datetime | None,
    ) -> list[TelemetryRecord]:
        return self._repo.find_records(RecordQuery.between(imei, start, end))

    @log_service_call
    def dashboard_report(
        self,
        imei: str | None = None,
        start: datetime | None = None,
        end: datetime | None = None,
    ) -> DashboardReport:
        """Rollup report for one device, or the whole fleet when *imei* is None."""
        return compute_dashboard_report(self._records(imei, start, end))

    @log_service_call
    def trip_metrics(
        self,
        imei: str,
        start: datetime | None = None,
        end: datetime | None = None,
    ) -> MetricsSummary:
        return compute_trip_metrics(self._records(imei, start, end))

    @log_service_call
    def gnss_status_counts(self, imei: str) -> GnssStatusCounts:
        """GNSS status tally over the device's full history (no time window)."""
        return count_gnss_status(self._records(imei, None, None))

    @log_service_call
    def sensor_trend(
        self,
        imei: str,
        sensor_code: str,
        start: datetime | None = None,
        end: datetime | None = None,
    ) -> TrendSeries:
        return extract_trend(self._records(imei, start, end), sensor_code)

    @log_service_call
    def route(
        self,
        imei: str,
        start: datetime | None = None,
        end: datetime | None = None,
    ) -> list[RoutePoint]:
        return extract_route(self._records(imei, start, end))

    @log_service_call
    def latest_record(self, imei: str) -> TelemetryRecord:
        """Newest record of a device; raises DeviceNotFoundError if there is none."""
        record = self._repo.find_latest(imei)
        if record is None:
            raise DeviceNotFoundError(imei)
        return record

    @log_service_call
    def fleet_overview(
        self,
        start: datetime | None = None,
        end: datetime | None = None,
    ) -> list[TelemetryRecord]:
        """Newest record of every device, optionally within a time window."""
        query = RecordQuery.between(None, start, end)
        return self._repo.find_latest_for_all(query.time_range)

    @log_service_call
    def average_odometer(self) -> dict[str, float]:
        """Mean raw odometer reading per device across all records."""
        return average_odometer_by_device(self._repo.find_records(RecordQuery()))

    @log_service_call
    def record_page(self, imei: str | None = None, page: int = 1, limit: int = 10) -> RecordPage:
        """Newest-first page of raw records for the records table."""
        return self._repo.find_page(
            RecordQuery(imei=imei or None, page=page, limit=limit, order=SortOrder.DESC)
        )
