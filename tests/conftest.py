"""
Pytest fixtures for Speed Bump Tracker tests.

Provides common test fixtures including:
- A controllable clock
- In-memory snapshot storage
- Event stores and tracker state wired to both
"""

import uuid
from datetime import datetime, timedelta, timezone

import pytest

from speedbump.core.event import TrackingEvent
from speedbump.core.storage import MemoryStore
from speedbump.core.store import EventStore
from speedbump.core.tracker import TrackerState


class FakeClock:
    """Callable clock that only moves when told to."""

    def __init__(self, start: datetime):
        self.now = start

    def __call__(self) -> datetime:
        return self.now

    def advance(self, **kwargs) -> None:
        self.now = self.now + timedelta(**kwargs)


@pytest.fixture
def clock():
    """Clock starting at 2024-12-14 09:30 UTC."""
    return FakeClock(datetime(2024, 12, 14, 9, 30, tzinfo=timezone.utc))


@pytest.fixture
def storage():
    return MemoryStore()


@pytest.fixture
def store(storage, clock):
    return EventStore(storage, clock=clock)


@pytest.fixture
def tracker(store):
    """Tracker state grouping days in UTC."""
    return TrackerState(store, tz=timezone.utc)


@pytest.fixture
def sample_events():
    """Two events on 2024-12-14 and one on 2024-12-13 (UTC), newest first."""
    return [
        TrackingEvent(
            id=uuid.UUID("6f1c2d3e-0000-4000-8000-000000000003"),
            timestamp=datetime(2024, 12, 14, 17, 5, tzinfo=timezone.utc),
            vehicle_model="Tesla Model 3",
            is_entry=True,
        ),
        TrackingEvent(
            id=uuid.UUID("6f1c2d3e-0000-4000-8000-000000000002"),
            timestamp=datetime(2024, 12, 14, 8, 0, tzinfo=timezone.utc),
            vehicle_model="Ford F-150",
            is_entry=False,
        ),
        TrackingEvent(
            id=uuid.UUID("6f1c2d3e-0000-4000-8000-000000000001"),
            timestamp=datetime(2024, 12, 13, 22, 45, tzinfo=timezone.utc),
            vehicle_model="",
            is_entry=True,
        ),
    ]
