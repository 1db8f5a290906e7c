"""Shared test fixtures and sample tracking-backend payloads."""

from __future__ import annotations

import math
from datetime import datetime, timedelta

import pytest

from gpstelemetry.analytics.geo import EARTH_RADIUS_KM
from gpstelemetry.models import TelemetryRecord

BASE_URL = "http://localhost:3000"

T0 = datetime(2025, 4, 28, 7, 0, 0)

# Degrees of latitude spanning exactly 1 km along a meridian
KM_IN_LAT_DEGREES = math.degrees(1 / EARTH_RADIUS_KM)


SAMPLE_RECORD = {
    "id": 1,
    "imei": "353691845092989",
    "location": "Jl. Raya Bekasi",
    "lng": 106.9301,
    "lat": -6.1862,
    "date": "2025-04-28T00:00:00",
    "altitude": 9,
    "speed": 34,
    "angle": 265,
    "status_mesin": "ON",
    "iodata": {"239": 1, "240": 1, "69": 1, "21": 5, "16": 1504810, "67": 12.5},
    "logTimestamp": "2025-04-28T07:08:00.000Z",
}


def _make_record(
    t: float = 0,
    speed: float = 0.0,
    lat: float = -6.2,
    lng: float = 106.8,
    engine_status: str = "ON",
    ignition: int | None = 1,
    movement: int | None = 1,
    imei: str = "X",
    iodata: dict | None = None,
    location: str = "",
) -> TelemetryRecord:
    """Build a record *t* seconds after T0 with ignition/movement flags in iodata."""
    readings: dict = {}
    if ignition is not None:
        readings["239"] = ignition
    if movement is not None:
        readings["240"] = movement
    readings.update(iodata or {})
    return TelemetryRecord(
        imei=imei,
        location=location,
        lat=lat,
        lng=lng,
        speed=speed,
        engine_status=engine_status,
        iodata=readings,
        log_timestamp=T0 + timedelta(seconds=t),
    )


@pytest.fixture
def make_record():
    """Factory fixture for creating telemetry records."""
    return _make_record


@pytest.fixture
def sample_record_json() -> dict:
    return dict(SAMPLE_RECORD)


@pytest.fixture
def straight_trip() -> list[TelemetryRecord]:
    """Three records 60 s apart covering 1 km + 1 km north, engine on throughout."""
    return [
        _make_record(t=0, speed=0, lat=0.0, lng=0.0),
        _make_record(t=60, speed=30, lat=KM_IN_LAT_DEGREES, lng=0.0),
        _make_record(t=120, speed=0, lat=2 * KM_IN_LAT_DEGREES, lng=0.0),
    ]


@pytest.fixture
def fleet_records() -> list[TelemetryRecord]:
    """Two devices over one morning, deliberately not in time order."""
    return [
        _make_record(t=600, imei="A", speed=20, iodata={"69": 1, "16": 1000}),
        _make_record(t=0, imei="A", speed=0, iodata={"69": 1, "16": 900}),
        _make_record(t=300, imei="B", speed=0, engine_status="OFF", ignition=0, iodata={"69": 2}),
        _make_record(t=1200, imei="A", speed=0, iodata={"69": 0, "16": 1100}),
        _make_record(t=900, imei="B", speed=10, iodata={"16": 50}),
    ]


@pytest.fixture
def t0() -> datetime:
    """Capture time of a record built with ``t=0``."""
    return T0


@pytest.fixture
def km_lat() -> float:
    """Latitude delta (degrees) spanning 1 km."""
    return KM_IN_LAT_DEGREES
