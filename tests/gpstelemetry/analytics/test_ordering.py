"""Tests for the chronological-order precondition."""

from __future__ import annotations

import logging

from gpstelemetry.analytics.ordering import ensure_chronological, is_chronological


class TestOrdering:
    def test_sorted_input_untouched(self, straight_trip) -> None:
        assert is_chronological(straight_trip)
        assert ensure_chronological(straight_trip) == tuple(straight_trip)

    def test_out_of_order_sorted(self, fleet_records) -> None:
        assert not is_chronological(fleet_records)
        ordered = ensure_chronological(fleet_records)
        assert is_chronological(ordered)
        assert len(ordered) == len(fleet_records)

    def test_ties_keep_supplied_order(self, make_record) -> None:
        late = make_record(t=60, imei="late")
        first = make_record(t=0, imei="first")
        second = make_record(t=0, imei="second")
        ordered = ensure_chronological([late, first, second])
        assert [r.imei for r in ordered] == ["first", "second", "late"]

    def test_empty(self) -> None:
        assert is_chronological([])
        assert ensure_chronological([]) == ()

    def test_accepts_generator(self, straight_trip) -> None:
        assert len(ensure_chronological(r for r in straight_trip)) == 3

    def test_sorting_logged(self, fleet_records, caplog) -> None:
        with caplog.at_level(logging.DEBUG, logger="gpstelemetry.analytics.ordering"):
            ensure_chronological(fleet_records)
        assert "out-of-order" in caplog.text
