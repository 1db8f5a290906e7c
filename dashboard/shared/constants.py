"""Shared constants for the fleet telemetry dashboard."""

from __future__ import annotations

import os
from pathlib import Path

from gpstelemetry._http import DEFAULT_BASE_URL

ACCENT_COLOR = "#1F77B4"

MOVEMENT_COLORS: dict[str, str] = {
    "Moving": "#39B54A",
    "Idling": "#FFC700",
    "Stopped": "#FF3333",
}

GNSS_STATUS_LABELS: dict[int, str] = {
    0: "Off",
    1: "Fix",
    2: "No fix",
    3: "Sleep",
}

PLOTLY_LAYOUT_DEFAULTS = dict(
    paper_bgcolor="rgba(0,0,0,0)",
    plot_bgcolor="rgba(0,0,0,0)",
    font_color="#F0F0F0",
    margin=dict(l=40, r=20, t=40, b=40),
)

# Seed files used by the in-memory data source
SEED_DIR = Path(os.environ.get("GPS_SEED_DIR", Path(__file__).resolve().parent.parent / "data"))

TRACKER_API_URL = os.environ.get("GPS_TRACKER_API_URL", DEFAULT_BASE_URL)

# Sensor code preselected on the trends page (total odometer)
DEFAULT_TREND_CODE = "16"
