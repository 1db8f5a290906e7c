"""Loader for the tracking backend's bulk-load JSON files.

A seed file is one JSON object keyed by capture timestamp::

    {
      "2025-04-28 00:03:55": {
        "imei": "353691845092989", "location": "Jl. Sudirman",
        "lng": "106.8229", "lat": "-6.2088", "date": "2025-04-28",
        "altitude": 12, "speed": 0, "angle": 90, "status_mesin": "ON",
        "iodata": {"239": 1, "240": 0, "69": 1, "16": 1503422}
      },
      ...
    }
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Iterable

from pydantic import ValidationError

from gpstelemetry.exceptions import GpsTelemetryValidationError
from gpstelemetry.models.record import TelemetryRecord


def parse_seed_payload(payload: dict[str, Any]) -> list[TelemetryRecord]:
    """Build records from a decoded seed object, in file order."""
    if not isinstance(payload, dict):
        raise GpsTelemetryValidationError(
            f"Seed payload must be an object keyed by timestamp, got {type(payload).__name__}"
        )

    records: list[TelemetryRecord] = []
    for timestamp, entry in payload.items():
        if not isinstance(entry, dict):
            raise GpsTelemetryValidationError(f"Seed entry {timestamp!r} is not an object")
        try:
            records.append(TelemetryRecord.model_validate({**entry, "logTimestamp": timestamp}))
        except ValidationError as exc:
            raise GpsTelemetryValidationError(
                f"Invalid seed entry {timestamp!r}: {exc}"
            ) from exc
    return records


def load_seed_file(path: str | Path) -> list[TelemetryRecord]:
    """Read and parse one seed file."""
    path = Path(path)
    try:
        payload = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise GpsTelemetryValidationError(f"{path.name} is not valid JSON: {exc}") from exc
    return parse_seed_payload(payload)


def load_seed_files(paths: Iterable[str | Path]) -> list[TelemetryRecord]:
    """Parse several seed files, assigning sequential ids across them."""
    records: list[TelemetryRecord] = []
    for path in paths:
        records.extend(load_seed_file(path))
    return [r.model_copy(update={"id": i}) for i, r in enumerate(records, start=1)]
