"""Tests for sensor trend series and route extraction."""

from __future__ import annotations

from gpstelemetry.analytics.trends import extract_route, extract_trend


class TestExtractTrend:
    def test_aligned_series(self, fleet_records) -> None:
        trend = extract_trend(fleet_records, "16")
        assert trend.values == [900, None, 1000, 50, 1100]
        assert len(trend.labels) == len(trend.values)
        assert trend.labels == sorted(trend.labels)

    def test_label_format(self, make_record) -> None:
        trend = extract_trend([make_record(t=0, iodata={"21": 4})], "21")
        assert trend.labels == ["2025-04-28T07:00:00"]
        assert trend.values == [4]

    def test_unreported_code(self, straight_trip) -> None:
        assert extract_trend(straight_trip, "9999").values == [None, None, None]

    def test_empty(self) -> None:
        trend = extract_trend([], "16")
        assert trend.labels == []
        assert trend.values == []


class TestExtractRoute:
    def test_route_ordered(self, fleet_records) -> None:
        route = extract_route(fleet_records)
        timestamps = [p.timestamp for p in route]
        assert timestamps == sorted(timestamps)
        assert len(route) == 5

    def test_point_fields(self, make_record, t0) -> None:
        point = extract_route([make_record(lat=-6.1, lng=106.9, location="Cakung")])[0]
        assert (point.lat, point.lng) == (-6.1, 106.9)
        assert point.location == "Cakung"
        assert point.timestamp == t0
        assert point.id is None

    def test_empty(self) -> None:
        assert extract_route([]) == []
