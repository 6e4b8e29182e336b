"""
Speed Bump Tracker - Vehicle entry/exit logging

Mobile application that records vehicles passing a tracked location,
groups them by day and keeps the history in local device storage.
"""

__version__ = "0.1.0"
__author__ = "Speed Bump Tracker Team"

from .core.event import TrackingEvent
from .core.store import EventStore
from .core.tracker import TrackerState, TrackerView

__all__ = ["TrackingEvent", "EventStore", "TrackerState", "TrackerView", "__version__"]
