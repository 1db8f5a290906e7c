"""In-memory repository backed by records loaded from seed files."""

from __future__ import annotations

from pathlib import Path
from typing import Iterable

from gpstelemetry import GpsTelemetryError, RecordQuery, SortOrder, TimeRange
from gpstelemetry.models import RecordPage, TelemetryRecord
from gpstelemetry.query import paginate, select
from gpstelemetry.seed import load_seed_files

from .base import TelemetryRepository
from .errors import TelemetryDataError
from ..api_logging import log_api_call


class InMemoryRepository(TelemetryRepository):
    """Serves queries from a fixed record list."""

    def __init__(self, records: Iterable[TelemetryRecord]) -> None:
        self._records = tuple(records)

    @classmethod
    def from_seed_dir(cls, seed_dir: str | Path) -> InMemoryRepository:
        """Load every ``*.json`` seed file in *seed_dir* (sorted by name)."""
        paths = sorted(Path(seed_dir).glob("*.json"))
        try:
            return cls(load_seed_files(paths))
        except GpsTelemetryError as exc:
            raise TelemetryDataError(f"Failed to load seed files from {seed_dir}: {exc}") from exc

    def __len__(self) -> int:
        return len(self._records)

    @log_api_call
    def find_records(self, query: RecordQuery) -> list[TelemetryRecord]:
        return select(self._records, query)

    @log_api_call
    def find_page(self, query: RecordQuery) -> RecordPage:
        return paginate(select(self._records, query), query)

    @log_api_call
    def find_latest(self, imei: str) -> TelemetryRecord | None:
        matches = select(self._records, RecordQuery(imei=imei, order=SortOrder.DESC))
        return matches[0] if matches else None

    @log_api_call
    def find_latest_for_all(self, time_range: TimeRange | None = None) -> list[TelemetryRecord]:
        query = RecordQuery(time_range=time_range or TimeRange(), order=SortOrder.DESC)
        latest: dict[str, TelemetryRecord] = {}
        for record in select(self._records, query):
            latest.setdefault(record.imei, record)
        return [latest[imei] for imei in sorted(latest)]
