"""Computed analytics results returned by the engine."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class ValueWithUnit(BaseModel):
    """A decoded sensor value with its display unit."""

    model_config = ConfigDict(frozen=True)

    value: float
    unit: str = ""


class MovementStats(BaseModel):
    """Seconds spent in each movement state."""

    model_config = ConfigDict(frozen=True)

    total_moving_time: float = 0.0
    total_idling_time: float = 0.0
    total_stopped_time: float = 0.0

    @property
    def total_classified_time(self) -> float:
        return self.total_moving_time + self.total_idling_time + self.total_stopped_time


class MetricsSummary(BaseModel):
    """Trip-level distance, duration and speed statistics."""

    model_config = ConfigDict(frozen=True)

    total_distance: float = 0.0  # km
    total_duration: float = 0.0  # seconds
    average_speed: float = 0.0  # km/h
    max_speed: float = 0.0
    min_speed: float = 0.0
    movement_stats: MovementStats = Field(default_factory=MovementStats)


class GnssFixSummary(BaseModel):
    """Good (status 1) vs bad (any other reported status) GNSS fixes."""

    model_config = ConfigDict(frozen=True)

    good: int = 0
    bad: int = 0


class GnssStatusCounts(BaseModel):
    """Occurrences of each known raw GNSS status code."""

    model_config = ConfigDict(frozen=True)

    counts: dict[int, int] = Field(default_factory=lambda: {0: 0, 1: 0, 2: 0, 3: 0})

    def __getitem__(self, status: int) -> int:
        return self.counts[status]


class DashboardReport(BaseModel):
    """Fleet rollup over a filtered record set."""

    model_config = ConfigDict(frozen=True)

    total_odometer_sum: ValueWithUnit
    average_battery_voltage: ValueWithUnit
    gsm_signal_distribution: dict[int, int] = Field(default_factory=dict)
    gnss_fix: GnssFixSummary = Field(default_factory=GnssFixSummary)
    base_metrics: MetricsSummary = Field(default_factory=MetricsSummary)
    total_records_processed: int = 0
