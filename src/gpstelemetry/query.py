"""Explicit record-selection options shared by every telemetry store."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Iterable

from gpstelemetry._filters import TimeRange, build_query_params
from gpstelemetry.models.page import PageMeta, RecordPage
from gpstelemetry.models.record import TelemetryRecord

MAX_PAGE_LIMIT = 100
DEFAULT_PAGE_LIMIT = 10


class SortOrder(str, Enum):
    """Ordering by capture timestamp."""

    ASC = "ASC"
    DESC = "DESC"


@dataclass(frozen=True)
class RecordQuery:
    """Filter, ordering and pagination options for a record lookup.

    Every field is optional and always passed; stores read an absent field as
    "no constraint". Pagination applies only when ``limit`` is set.
    """

    imei: str | None = None
    time_range: TimeRange = field(default_factory=TimeRange)
    page: int | None = None
    limit: int | None = None
    order: SortOrder = SortOrder.ASC

    @classmethod
    def between(
        cls,
        imei: str | None = None,
        start: datetime | None = None,
        end: datetime | None = None,
        order: SortOrder = SortOrder.ASC,
    ) -> RecordQuery:
        """Shortcut for the common device + time window selection.

        An empty device identifier is treated the same as no identifier.
        """
        return cls(imei=imei or None, time_range=TimeRange(start=start, end=end), order=order)

    @property
    def is_paginated(self) -> bool:
        return self.limit is not None

    @property
    def effective_limit(self) -> int:
        """Page size clamped to ``1..MAX_PAGE_LIMIT``."""
        if self.limit is None:
            return DEFAULT_PAGE_LIMIT
        return max(1, min(self.limit, MAX_PAGE_LIMIT))

    @property
    def effective_page(self) -> int:
        return max(1, self.page or 1)

    def matches(self, record: TelemetryRecord) -> bool:
        """Evaluate the device and time predicates against one record."""
        if self.imei is not None and record.imei != self.imei:
            return False
        return self.time_range.contains(record.log_timestamp)

    def to_params(self) -> list[tuple[str, str]]:
        """Render the query as tracking-backend query parameters."""
        return build_query_params(
            imei=self.imei,
            range=self.time_range,
            order=self.order.value,
            isPaginated=self.is_paginated,
            page=self.effective_page if self.is_paginated else None,
            limit=self.effective_limit if self.is_paginated else None,
        )


def select(records: Iterable[TelemetryRecord], query: RecordQuery) -> list[TelemetryRecord]:
    """Filter and order records in memory according to *query* (no pagination)."""
    selected = [r for r in records if query.matches(r)]
    selected.sort(key=lambda r: r.log_timestamp, reverse=query.order == SortOrder.DESC)
    return selected


def paginate(records: list[TelemetryRecord], query: RecordQuery) -> RecordPage:
    """Slice an already selected list into the page requested by *query*."""
    if not query.is_paginated:
        return RecordPage(data=records)

    limit = query.effective_limit
    page = query.effective_page
    offset = (page - 1) * limit
    data = records[offset:offset + limit]
    meta = PageMeta(
        total_items=len(records),
        item_count=len(data),
        items_per_page=limit,
        total_pages=math.ceil(len(records) / limit),
        current_page=page,
    )
    return RecordPage(data=data, meta=meta)
