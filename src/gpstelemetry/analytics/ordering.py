"""Chronological-order precondition for the sequence-based calculators."""

from __future__ import annotations

import logging
from itertools import pairwise
from typing import Iterable

from gpstelemetry.models.record import TelemetryRecord

logger = logging.getLogger(__name__)


def is_chronological(records: Iterable[TelemetryRecord]) -> bool:
    """True if capture timestamps never decrease."""
    return all(b.log_timestamp >= a.log_timestamp for a, b in pairwise(records))


def ensure_chronological(records: Iterable[TelemetryRecord]) -> tuple[TelemetryRecord, ...]:
    """Materialize *records* in ascending capture order.

    Already ordered input is returned as-is; anything else is stably sorted so
    records sharing a timestamp keep their supplied order.
    """
    ordered = tuple(records)
    if is_chronological(ordered):
        return ordered
    logger.debug("Sorting %d out-of-order telemetry records", len(ordered))
    return tuple(sorted(ordered, key=lambda r: r.log_timestamp))
