"""Data layer: source-agnostic repository factory and re-exports."""

from __future__ import annotations

import streamlit as st

from ..constants import SEED_DIR, TRACKER_API_URL
from .base import TelemetryRepository
from .errors import DeviceNotFoundError, TelemetryDataError
from .source import DataSource, get_active_source


@st.cache_resource
def _seed_repository(seed_dir: str) -> TelemetryRepository:
    from .memory_repo import InMemoryRepository

    return InMemoryRepository.from_seed_dir(seed_dir)


def get_repository(source: DataSource | None = None) -> TelemetryRepository:
    """Return the repository for *source*, defaulting to the user's selection."""
    if (source or get_active_source()) == DataSource.TRACKER_API:
        from .api_repo import ApiRepository

        return ApiRepository(TRACKER_API_URL)
    return _seed_repository(str(SEED_DIR))


__all__ = [
    "DataSource",
    "DeviceNotFoundError",
    "TelemetryDataError",
    "TelemetryRepository",
    "get_active_source",
    "get_repository",
]
