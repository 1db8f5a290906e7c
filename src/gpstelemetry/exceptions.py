"""Custom exceptions for the GPS telemetry client and loaders."""

from __future__ import annotations


class GpsTelemetryError(Exception):
    """Base exception for all gpstelemetry errors."""


class GpsTelemetryConnectionError(GpsTelemetryError):
    """Raised when the client cannot connect to the tracking backend."""


class GpsTelemetryTimeoutError(GpsTelemetryError):
    """Raised when a request to the tracking backend times out."""


class GpsTelemetryAPIError(GpsTelemetryError):
    """Raised when the tracking backend returns an error response (4xx/5xx)."""

    def __init__(self, status_code: int, message: str) -> None:
        self.status_code = status_code
        self.message = message
        super().__init__(f"HTTP {status_code}: {message}")


class GpsTelemetryValidationError(GpsTelemetryError):
    """Raised when response or seed-file data fails model validation."""
