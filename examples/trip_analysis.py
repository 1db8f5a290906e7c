"""Trip and fleet analytics over a bundled seed file."""

import sys
from pathlib import Path

from gpstelemetry.analytics import compute_dashboard_report, count_gnss_status
from gpstelemetry.seed import load_seed_file

DEFAULT_SEED = Path(__file__).resolve().parent.parent / "dashboard" / "data" / "353691845092989_2025_04_28.json"


def main() -> None:
    path = Path(sys.argv[1]) if len(sys.argv) > 1 else DEFAULT_SEED
    records = load_seed_file(path)
    print(f"Loaded {len(records)} records from {path.name}")

    report = compute_dashboard_report(records)
    metrics = report.base_metrics
    movement = metrics.movement_stats

    print("\n=== Trip ===")
    print(f"  Distance:  {metrics.total_distance:.2f} km")
    print(f"  Duration:  {metrics.total_duration / 60:.1f} min")
    print(f"  Avg speed: {metrics.average_speed:.1f} km/h")
    print(f"  Speed:     {metrics.min_speed:.0f}-{metrics.max_speed:.0f} km/h")

    print("\n=== Movement ===")
    print(f"  Moving:  {movement.total_moving_time:.0f}s")
    print(f"  Idling:  {movement.total_idling_time:.0f}s")
    print(f"  Stopped: {movement.total_stopped_time:.0f}s")

    print("\n=== Sensors ===")
    print(f"  Odometer sum:    {report.total_odometer_sum.value:,.0f} {report.total_odometer_sum.unit}")
    print(f"  Battery average: {report.average_battery_voltage.value:.2f} {report.average_battery_voltage.unit}")
    print(f"  GSM levels:      {report.gsm_signal_distribution}")
    print(f"  GNSS good/bad:   {report.gnss_fix.good}/{report.gnss_fix.bad}")

    counts = count_gnss_status(records)
    print(f"  GNSS statuses:   {counts.counts}")


if __name__ == "__main__":
    main()
