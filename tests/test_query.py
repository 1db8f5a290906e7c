"""Tests for RecordQuery selection, ordering and pagination."""

from __future__ import annotations

from datetime import datetime, timedelta

from gpstelemetry import RecordQuery, SortOrder, TimeRange
from gpstelemetry.query import MAX_PAGE_LIMIT, paginate, select



class TestRecordQuery:
    def test_defaults_unconstrained(self, make_record) -> None:
        query = RecordQuery()
        assert query.matches(make_record(imei="anything"))
        assert not query.is_paginated

    def test_between_treats_empty_imei_as_none(self) -> None:
        assert RecordQuery.between("", None, None).imei is None

    def test_matches_device(self, make_record) -> None:
        query = RecordQuery(imei="A")
        assert query.matches(make_record(imei="A"))
        assert not query.matches(make_record(imei="B"))

    def test_matches_time_range(self, make_record, t0) -> None:
        query = RecordQuery(time_range=TimeRange(start=t0 + timedelta(seconds=60)))
        assert not query.matches(make_record(t=0))
        assert query.matches(make_record(t=60))

    def test_limit_clamped(self) -> None:
        assert RecordQuery(limit=500).effective_limit == MAX_PAGE_LIMIT
        assert RecordQuery(limit=0).effective_limit == 1

    def test_page_defaults_to_one(self) -> None:
        assert RecordQuery(limit=10).effective_page == 1

    def test_to_params_unpaginated(self) -> None:
        query = RecordQuery.between("X", datetime(2025, 4, 28), None)
        assert query.to_params() == [
            ("imei", "X"),
            ("startDate", "2025-04-28T00:00:00"),
            ("order", "ASC"),
            ("isPaginated", "false"),
        ]

    def test_to_params_paginated(self) -> None:
        params = RecordQuery(page=3, limit=20, order=SortOrder.DESC).to_params()
        assert ("isPaginated", "true") in params
        assert ("page", "3") in params
        assert ("limit", "20") in params
        assert ("order", "DESC") in params


class TestSelect:
    def test_filters_and_sorts_ascending(self, fleet_records, t0) -> None:
        result = select(fleet_records, RecordQuery(imei="A"))
        assert [r.log_timestamp for r in result] == [
            t0, t0 + timedelta(seconds=600), t0 + timedelta(seconds=1200),
        ]

    def test_descending(self, fleet_records, t0) -> None:
        result = select(fleet_records, RecordQuery(order=SortOrder.DESC))
        assert result[0].log_timestamp == t0 + timedelta(seconds=1200)
        assert result[-1].log_timestamp == t0

    def test_no_match(self, fleet_records) -> None:
        assert select(fleet_records, RecordQuery(imei="missing")) == []


class TestPaginate:
    def test_unpaginated_returns_everything(self, fleet_records) -> None:
        page = paginate(fleet_records, RecordQuery())
        assert len(page.data) == 5
        assert page.meta.total_items is None

    def test_second_page(self, fleet_records) -> None:
        page = paginate(fleet_records, RecordQuery(page=2, limit=2))
        assert page.data == fleet_records[2:4]
        assert page.meta.total_items == 5
        assert page.meta.item_count == 2
        assert page.meta.items_per_page == 2
        assert page.meta.total_pages == 3
        assert page.meta.current_page == 2

    def test_page_past_end(self, fleet_records) -> None:
        page = paginate(fleet_records, RecordQuery(page=9, limit=2))
        assert page.data == []
        assert page.meta.item_count == 0
