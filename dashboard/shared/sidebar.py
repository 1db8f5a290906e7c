"""Shared sidebar rendering for data source, device and time window selection."""

from __future__ import annotations

import datetime
from dataclasses import dataclass

import streamlit as st

from .data import DataSource, TelemetryDataError, get_repository
from .services import FleetMetricsService

_ALL_DEVICES = "All devices"


@dataclass(frozen=True)
class DeviceSelection:
    """Result of the sidebar cascade. ``imei`` is None for the whole fleet."""

    service: FleetMetricsService
    imei: str | None
    start: datetime.datetime | None
    end: datetime.datetime | None


def _day_bounds(
    dates: tuple[datetime.date, ...] | datetime.date,
    tzinfo: datetime.tzinfo | None = None,
) -> tuple[datetime.datetime | None, datetime.datetime | None]:
    """Turn a date_input value into inclusive datetime bounds in *tzinfo*."""
    if isinstance(dates, datetime.date):
        dates = (dates,)
    if not dates:
        return None, None
    start = datetime.datetime.combine(dates[0], datetime.time.min, tzinfo=tzinfo)
    end = datetime.datetime.combine(dates[-1], datetime.time.max, tzinfo=tzinfo)
    return start, end


def render_device_sidebar(allow_fleet: bool = True) -> DeviceSelection | None:
    """Render source/device/date selectors in the sidebar.

    Returns a DeviceSelection on success, or None (with st.stop()) on failure.
    """
    source_label = st.sidebar.radio(
        "Data source",
        [s.value for s in DataSource],
        key="data_source",
    )
    repo = get_repository(DataSource(source_label))
    service = FleetMetricsService(repo)

    try:
        latest = service.fleet_overview()
    except TelemetryDataError as exc:
        st.sidebar.error(f"Failed to load devices: {exc}")
        st.stop()
        return None  # unreachable, but helps type checkers

    if not latest:
        st.sidebar.warning("No telemetry records found.")
        st.stop()
        return None

    devices = [r.imei for r in latest]
    options = ([_ALL_DEVICES] if allow_fleet else []) + devices
    selected = st.sidebar.selectbox("Device (IMEI)", options)
    imei = None if selected == _ALL_DEVICES else selected

    # Default window: the day of the newest record
    newest_at = max(r.log_timestamp for r in latest)
    newest = newest_at.date()
    use_window = st.sidebar.checkbox("Limit to date range", value=True)
    start = end = None
    if use_window:
        dates = st.sidebar.date_input("Date range", value=(newest, newest))
        start, end = _day_bounds(dates, newest_at.tzinfo)

    return DeviceSelection(service=service, imei=imei, start=start, end=end)
