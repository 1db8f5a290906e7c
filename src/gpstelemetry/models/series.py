"""Time-series and track models."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class TrendSeries(BaseModel):
    """Parallel timestamp labels and raw values for one sensor code."""

    model_config = ConfigDict(frozen=True)

    labels: list[str] = Field(default_factory=list)
    values: list[int | float | None] = Field(default_factory=list)


class RoutePoint(BaseModel):
    """One point of a device's coordinate track."""

    model_config = ConfigDict(frozen=True)

    id: int | None = None
    lat: float
    lng: float
    location: str = ""
    timestamp: datetime
