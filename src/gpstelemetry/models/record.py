"""Telemetry record model (one reading captured by a tracking device)."""

from __future__ import annotations

from datetime import datetime

from pydantic import AliasChoices, BaseModel, ConfigDict, Field


class TelemetryRecord(BaseModel):
    """Position, motion and sensor readings for one device at one instant.

    Accepts both the Python field names and the backend's wire names
    (``status_mesin``, ``logTimestamp``).
    """

    model_config = ConfigDict(frozen=True)

    id: int | None = None
    imei: str
    location: str = ""
    lng: float
    lat: float
    date: datetime | None = None
    altitude: float = 0.0
    speed: float = 0.0
    angle: float = 0.0
    engine_status: str = Field(
        default="",
        validation_alias=AliasChoices("engine_status", "status_mesin"),
    )
    iodata: dict[str, int | float] = Field(default_factory=dict)
    log_timestamp: datetime = Field(
        validation_alias=AliasChoices("log_timestamp", "logTimestamp"),
    )

    def reading(self, code: str) -> int | float | None:
        """Raw value reported under a sensor code, or None if not reported."""
        return self.iodata.get(code)
