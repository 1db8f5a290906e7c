"""Data source selection for the fleet telemetry dashboard."""

from __future__ import annotations

from enum import Enum

import streamlit as st


class DataSource(str, Enum):
    """Supported data source backends."""

    SEED_FILES = "Seed files"
    TRACKER_API = "Tracker API"


def get_active_source() -> DataSource:
    """Return the currently selected data source from session state."""
    value = st.session_state.get("data_source", DataSource.SEED_FILES.value)
    try:
        return DataSource(value)
    except ValueError:
        return DataSource.SEED_FILES
