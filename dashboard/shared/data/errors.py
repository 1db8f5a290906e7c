"""Source-agnostic data errors."""

from __future__ import annotations


class TelemetryDataError(Exception):
    """Source-agnostic data fetch error. UI catches only this."""


class DeviceNotFoundError(TelemetryDataError):
    """Raised when a device has no telemetry record at all."""

    def __init__(self, imei: str) -> None:
        self.imei = imei
        super().__init__(f"No telemetry found for device {imei}")
