"""
Tracking event data structures.
"""

import uuid
from dataclasses import dataclass, field
from datetime import datetime, timezone


def utc_now() -> datetime:
    """Current time as a timezone-aware UTC datetime."""
    return datetime.now(timezone.utc)


@dataclass
class TrackingEvent:
    """
    One vehicle passing the tracked location.

    Attributes:
        id: Unique identifier; two events are the same iff their ids match
        timestamp: When the event was tracked (timezone-aware)
        vehicle_model: Free-text vehicle description, possibly empty
        is_entry: True for an entry, False for an exit
    """

    id: uuid.UUID = field(default_factory=uuid.uuid4)
    timestamp: datetime = field(default_factory=utc_now)
    vehicle_model: str = ""
    is_entry: bool = True

    def __post_init__(self) -> None:
        if self.timestamp.tzinfo is None:
            raise ValueError("TrackingEvent timestamp must be timezone-aware")

    @property
    def kind(self) -> str:
        """Display label for the event direction."""
        return "Entry" if self.is_entry else "Exit"
