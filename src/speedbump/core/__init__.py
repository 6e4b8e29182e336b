"""Core components for Speed Bump Tracker."""

from .config import Config
from .event import TrackingEvent
from .grouping import DayGroup, group_by_day
from .storage import KeyValueStore, MemoryStore
from .store import EventStore
from .tracker import TrackerState, TrackerView

__all__ = [
    "Config",
    "TrackingEvent",
    "DayGroup",
    "group_by_day",
    "KeyValueStore",
    "MemoryStore",
    "EventStore",
    "TrackerState",
    "TrackerView",
]
