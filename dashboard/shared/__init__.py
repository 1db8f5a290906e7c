"""Shared dashboard utilities."""

# --- Constants & formatting ---
from .constants import (
    ACCENT_COLOR,
    DEFAULT_TREND_CODE,
    GNSS_STATUS_LABELS,
    MOVEMENT_COLORS,
    PLOTLY_LAYOUT_DEFAULTS,
)
from .formatters import format_distance, format_duration, format_share, format_speed

# --- Data layer ---
from .data import DataSource, DeviceNotFoundError, TelemetryDataError, get_repository

# --- Service layer ---
from .services import FleetMetricsService

# --- UI components ---
from .sidebar import DeviceSelection, render_device_sidebar

__all__ = [
    "ACCENT_COLOR",
    "DEFAULT_TREND_CODE",
    "DataSource",
    "DeviceNotFoundError",
    "DeviceSelection",
    "FleetMetricsService",
    "GNSS_STATUS_LABELS",
    "MOVEMENT_COLORS",
    "PLOTLY_LAYOUT_DEFAULTS",
    "TelemetryDataError",
    "format_distance",
    "format_duration",
    "format_share",
    "format_speed",
    "get_repository",
    "render_device_sidebar",
]
