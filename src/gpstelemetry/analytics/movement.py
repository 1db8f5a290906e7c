"""Moving / idling / stopped segmentation of a record sequence.

Each state keeps its own segment accumulator. A segment opens on the first
record that satisfies the state and closes on the first record that does not,
adding the elapsed time between the two. Segments still open after the last
record are closed at that record's timestamp.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Iterable

from gpstelemetry.models.record import TelemetryRecord
from gpstelemetry.models.summary import MovementStats
from gpstelemetry.sensors import IGNITION_CODE, MOVEMENT_CODE

from .ordering import ensure_chronological

MOVING_SPEED_THRESHOLD = 1.0  # km/h
IDLING_SPEED_THRESHOLD = 1.0  # km/h

ENGINE_ON_STATUS = "ON"


class MovementState(str, Enum):
    MOVING = "moving"
    IDLING = "idling"
    STOPPED = "stopped"


@dataclass
class SegmentAccumulator:
    """Open-segment start (if any) plus the closed-segment running total."""

    opened_at: datetime | None = None
    total_seconds: float = 0.0

    @property
    def is_open(self) -> bool:
        return self.opened_at is not None

    def update(self, matched: bool, moment: datetime) -> None:
        """Advance with one record: open on a match, close on a miss."""
        if matched:
            if self.opened_at is None:
                self.opened_at = moment
        else:
            self.close(moment)

    def close(self, moment: datetime) -> None:
        if self.opened_at is None:
            return
        self.total_seconds += (moment - self.opened_at).total_seconds()
        self.opened_at = None


def is_engine_on(record: TelemetryRecord) -> bool:
    """Engine counts as on only when the status label and ignition flag agree."""
    return record.engine_status == ENGINE_ON_STATUS and bool(record.reading(IGNITION_CODE))


def matching_states(record: TelemetryRecord) -> set[MovementState]:
    """States whose condition *record* satisfies (empty when unclassified).

    The conditions are mutually exclusive, so the set holds at most one state.
    """
    speed = record.speed
    engine_on = is_engine_on(record)
    movement_on = bool(record.reading(MOVEMENT_CODE))

    states: set[MovementState] = set()
    if movement_on and engine_on and speed > MOVING_SPEED_THRESHOLD:
        states.add(MovementState.MOVING)
    if engine_on and speed <= IDLING_SPEED_THRESHOLD:
        states.add(MovementState.IDLING)
    if not engine_on and speed == 0:
        states.add(MovementState.STOPPED)
    return states


def compute_movement_stats(records: Iterable[TelemetryRecord]) -> MovementStats:
    """Total seconds spent moving, idling and stopped across *records*."""
    ordered = ensure_chronological(records)
    if not ordered:
        return MovementStats()

    segments = {state: SegmentAccumulator() for state in MovementState}
    for record in ordered:
        matched = matching_states(record)
        for state, segment in segments.items():
            segment.update(state in matched, record.log_timestamp)

    last_timestamp = ordered[-1].log_timestamp
    for segment in segments.values():
        segment.close(last_timestamp)

    return MovementStats(
        total_moving_time=segments[MovementState.MOVING].total_seconds,
        total_idling_time=segments[MovementState.IDLING].total_seconds,
        total_stopped_time=segments[MovementState.STOPPED].total_seconds,
    )
