"""
Unit tests for day grouping and paging helpers.
"""

import uuid
from datetime import date, datetime, timedelta, timezone

import pytest

from speedbump.core.event import TrackingEvent
from speedbump.core.grouping import (
    clamp,
    current_page,
    group_by_day,
    local_day,
    newer,
    older,
)


def make_event(timestamp: datetime, is_entry: bool = True) -> TrackingEvent:
    return TrackingEvent(id=uuid.uuid4(), timestamp=timestamp, is_entry=is_entry)


class TestGroupByDay:
    """Tests for calendar-day grouping."""

    def test_empty(self):
        assert group_by_day([], timezone.utc) == []

    def test_groups_sorted_most_recent_first(self, sample_events):
        groups = group_by_day(sample_events, timezone.utc)

        assert [g.day for g in groups] == [date(2024, 12, 14), date(2024, 12, 13)]
        assert groups[0].events == (sample_events[0], sample_events[1])
        assert groups[1].events == (sample_events[2],)

    def test_keeps_store_order_within_day(self):
        # Store order is not chronological here; grouping must not re-sort
        base = datetime(2024, 12, 14, 12, 0, tzinfo=timezone.utc)
        early = make_event(base - timedelta(hours=3))
        late = make_event(base + timedelta(hours=3))

        groups = group_by_day([early, late], timezone.utc)

        assert groups[0].events == (early, late)

    def test_no_duplicate_days(self):
        start = datetime(2024, 12, 1, 0, 30, tzinfo=timezone.utc)
        events = [make_event(start + timedelta(hours=5 * i)) for i in range(40)]

        groups = group_by_day(events, timezone.utc)
        days = [g.day for g in groups]

        assert len(days) == len(set(days))
        assert days == sorted(days, reverse=True)
        assert sum(len(g) for g in groups) == len(events)
        for group in groups:
            assert all(local_day(e, timezone.utc) == group.day for e in group.events)

    def test_timezone_moves_day_boundary(self):
        event = make_event(datetime(2024, 12, 14, 2, 0, tzinfo=timezone.utc))
        pacific = timezone(timedelta(hours=-8))

        assert group_by_day([event], timezone.utc)[0].day == date(2024, 12, 14)
        assert group_by_day([event], pacific)[0].day == date(2024, 12, 13)

    def test_local_time_default(self):
        event = make_event(datetime(2024, 12, 14, 12, 0, tzinfo=timezone.utc))

        groups = group_by_day([event])

        assert groups[0].day == event.timestamp.astimezone().date()

    def test_entry_exit_counts(self, sample_events):
        today = group_by_day(sample_events, timezone.utc)[0]

        assert today.entry_count == 1
        assert today.exit_count == 1


class TestPaging:
    """Tests for page selection and navigation bounds."""

    def test_current_page(self, sample_events):
        groups = group_by_day(sample_events, timezone.utc)

        assert current_page(groups, 0) is groups[0]
        assert current_page(groups, 1) is groups[1]

    @pytest.mark.parametrize("index", [-1, 2, 10])
    def test_current_page_out_of_bounds(self, sample_events, index):
        groups = group_by_day(sample_events, timezone.utc)
        assert current_page(groups, index) is None

    def test_current_page_empty(self):
        assert current_page([], 0) is None

    @pytest.mark.parametrize(
        "index,page_count,expected",
        [
            (0, 3, 1),
            (1, 3, 2),
            (2, 3, 2),
            (0, 1, 0),
            (0, 0, 0),
        ],
    )
    def test_older(self, index, page_count, expected):
        assert older(index, page_count) == expected

    @pytest.mark.parametrize("index,expected", [(2, 1), (1, 0), (0, 0)])
    def test_newer(self, index, expected):
        assert newer(index) == expected

    @pytest.mark.parametrize(
        "index,page_count,expected",
        [(5, 3, 2), (-1, 3, 0), (1, 3, 1), (4, 0, 0)],
    )
    def test_clamp(self, index, page_count, expected):
        assert clamp(index, page_count) == expected
