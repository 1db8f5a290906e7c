"""Shared fixtures for dashboard tests."""

from __future__ import annotations

import logging
import sys
from pathlib import Path

import pytest

# Add dashboard to path so `shared` is importable
_dashboard_dir = str(Path(__file__).resolve().parent.parent.parent / "dashboard")
if _dashboard_dir not in sys.path:
    sys.path.insert(0, _dashboard_dir)

from shared.data.memory_repo import InMemoryRepository  # noqa: E402
from shared.services import FleetMetricsService  # noqa: E402

SEED_DIR = Path(_dashboard_dir) / "data"


@pytest.fixture(autouse=True)
def api_log_dir(tmp_path):
    """Redirect the call log to tmp_path and reset the cached logger."""
    import shared.api_logging as mod

    old_logger = mod._logger
    old_dir = mod._LOG_DIR
    old_file = mod._LOG_FILE

    named_logger = logging.getLogger(mod._LOGGER_NAME)
    named_logger.handlers.clear()

    log_dir = tmp_path / "logs"
    mod._logger = None
    mod._LOG_DIR = str(log_dir)
    mod._LOG_FILE = str(log_dir / "api_calls.log")

    yield log_dir

    # Close file handlers to release file locks
    for h in named_logger.handlers[:]:
        h.close()
        named_logger.removeHandler(h)
    mod._logger = old_logger
    mod._LOG_DIR = old_dir
    mod._LOG_FILE = old_file


@pytest.fixture
def fleet_repo(fleet_records) -> InMemoryRepository:
    return InMemoryRepository(fleet_records)


@pytest.fixture
def fleet_service(fleet_repo) -> FleetMetricsService:
    return FleetMetricsService(fleet_repo)


@pytest.fixture
def seed_dir() -> Path:
    """Directory holding the bundled seed files."""
    return SEED_DIR
