"""Time-range filter and query-parameter builder for the tracking backend."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any


@dataclass(frozen=True)
class TimeRange:
    """Inclusive capture-timestamp bounds; a missing bound means no constraint.

    Usage:
        TimeRange(start=datetime(2025, 4, 28))            # on or after
        TimeRange(end=datetime(2025, 4, 29))              # on or before
        TimeRange(start=day_start, end=day_end)           # between
    """

    start: datetime | None = None
    end: datetime | None = None

    @property
    def is_open(self) -> bool:
        """True when neither bound is set."""
        return self.start is None and self.end is None

    def contains(self, moment: datetime) -> bool:
        if self.start is not None and moment < self.start:
            return False
        if self.end is not None and moment > self.end:
            return False
        return True

    def to_params(self) -> list[tuple[str, str]]:
        """Convert the set bounds to ``startDate``/``endDate`` query pairs."""
        return build_query_params(startDate=self.start, endDate=self.end)


def _format_param(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, datetime):
        return value.isoformat()
    return str(value)


def build_query_params(**kwargs: Any) -> list[tuple[str, str]]:
    """Build a list of query parameter tuples from keyword arguments.

    ``None`` values are skipped, datetimes become ISO-8601 and booleans
    become ``true``/``false``.

    Returns:
        List of (key, value) tuples suitable for httpx params.
    """
    params: list[tuple[str, str]] = []
    for key, value in kwargs.items():
        if value is None:
            continue
        if isinstance(value, TimeRange):
            params.extend(value.to_params())
        else:
            params.append((key, _format_param(value)))
    return params
