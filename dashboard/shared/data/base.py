"""Abstract base repository for telemetry record access."""

from __future__ import annotations

from abc import ABC, abstractmethod

from gpstelemetry import RecordQuery, TimeRange
from gpstelemetry.models import RecordPage, TelemetryRecord


class TelemetryRepository(ABC):
    """Source-agnostic interface for telemetry record access.

    ``find_records`` returns every matching record in the query's order and
    ignores pagination; ``find_page`` honours it.
    """

    @abstractmethod
    def find_records(self, query: RecordQuery) -> list[TelemetryRecord]: ...

    @abstractmethod
    def find_page(self, query: RecordQuery) -> RecordPage: ...

    @abstractmethod
    def find_latest(self, imei: str) -> TelemetryRecord | None: ...

    @abstractmethod
    def find_latest_for_all(self, time_range: TimeRange | None = None) -> list[TelemetryRecord]: ...

    def list_devices(self) -> list[str]:
        """Identifiers of every device with at least one record."""
        return sorted({r.imei for r in self.find_latest_for_all()})
