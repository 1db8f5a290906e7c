"""Basic usage examples for the tracker client."""

from gpstelemetry import GpsTelemetryAPIError, GpsTrackerClient, RecordQuery, SortOrder
from gpstelemetry.sensors import decode_iodata


def main() -> None:
    with GpsTrackerClient() as tracker:
        # Newest record of every device
        print("=== Fleet ===")
        latest = tracker.latest_for_all()
        for r in latest:
            print(f"  {r.imei} @ {r.log_timestamp:%Y-%m-%d %H:%M:%S} - {r.location or 'unknown'}")

        if not latest:
            print("  No devices found.")
            return

        imei = latest[0].imei

        # Ten newest records for the first device
        print(f"\n=== Last 10 records for {imei} ===")
        page = tracker.records(RecordQuery(imei=imei, limit=10, order=SortOrder.DESC))
        for r in page.data:
            print(f"  {r.log_timestamp:%H:%M:%S} {r.speed:5.1f} km/h engine {r.engine_status}")
        if page.meta.total_items is not None:
            print(f"  ({page.meta.total_items} records in total)")

        # Decoded sensor readings of the newest record
        print(f"\n=== Sensors for {imei} ===")
        for name, reading in decode_iodata(latest[0].iodata).items():
            print(f"  {name}: {reading.value:g} {reading.unit}")

        try:
            tracker.latest("000000000000000")
        except GpsTelemetryAPIError as exc:
            print(f"\nUnknown device: {exc}")


if __name__ == "__main__":
    main()
