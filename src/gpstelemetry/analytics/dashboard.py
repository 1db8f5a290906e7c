"""Fleet rollup report and GNSS status tallies."""

from __future__ import annotations

from collections import defaultdict
from typing import Iterable

from gpstelemetry.models.record import TelemetryRecord
from gpstelemetry.models.summary import (
    DashboardReport,
    GnssFixSummary,
    GnssStatusCounts,
    ValueWithUnit,
)
from gpstelemetry.sensors import GNSS_STATUS_CODE, ODOMETER_CODE, decode_iodata

from .metrics import compute_trip_metrics
from .ordering import ensure_chronological

GNSS_GOOD_FIX = 1
KNOWN_GNSS_STATUSES = (0, 1, 2, 3)


def compute_dashboard_report(records: Iterable[TelemetryRecord]) -> DashboardReport:
    """Fold decoded sensor readings and trip metrics into one report.

    GNSS good/bad only counts records that report a GNSS status at all;
    records without one are left out of both tallies.
    """
    ordered = ensure_chronological(records)

    odometer_sum = 0.0
    voltage_sum = 0.0
    voltage_count = 0
    gsm_levels: dict[int, int] = defaultdict(int)
    gnss_good = 0
    gnss_bad = 0

    for record in ordered:
        decoded = decode_iodata(record.iodata)

        odometer = decoded.get("total_odometer")
        if odometer is not None:
            odometer_sum += odometer.value

        voltage = decoded.get("battery_voltage")
        if voltage is not None:
            voltage_sum += voltage.value
            voltage_count += 1

        gsm = decoded.get("gsm_signal")
        if gsm is not None:
            gsm_levels[int(gsm.value)] += 1

        gnss = decoded.get("gnss_status")
        if gnss is not None:
            if gnss.value == GNSS_GOOD_FIX:
                gnss_good += 1
            else:
                gnss_bad += 1

    voltage_avg = voltage_sum / voltage_count if voltage_count else 0.0

    return DashboardReport(
        total_odometer_sum=ValueWithUnit(value=odometer_sum, unit="m"),
        average_battery_voltage=ValueWithUnit(value=voltage_avg, unit="V"),
        gsm_signal_distribution=dict(sorted(gsm_levels.items())),
        gnss_fix=GnssFixSummary(good=gnss_good, bad=gnss_bad),
        base_metrics=compute_trip_metrics(ordered),
        total_records_processed=len(ordered),
    )


def count_gnss_status(records: Iterable[TelemetryRecord]) -> GnssStatusCounts:
    """Count raw GNSS status codes 0-3; any other or missing status is ignored."""
    counts = {status: 0 for status in KNOWN_GNSS_STATUSES}
    for record in records:
        status = record.reading(GNSS_STATUS_CODE)
        if status in counts:
            counts[int(status)] += 1  # type: ignore[arg-type]
    return GnssStatusCounts(counts=counts)


def average_odometer_by_device(records: Iterable[TelemetryRecord]) -> dict[str, float]:
    """Mean raw odometer reading per device, over records that report one."""
    sums: dict[str, float] = defaultdict(float)
    counts: dict[str, int] = defaultdict(int)
    for record in records:
        odometer = record.reading(ODOMETER_CODE)
        if odometer is None:
            continue
        sums[record.imei] += float(odometer)
        counts[record.imei] += 1
    return {imei: sums[imei] / counts[imei] for imei in sorted(sums)}
