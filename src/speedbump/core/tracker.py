"""
Application state for the tracker screen.

The UI never touches the event list directly: it dispatches a command and
re-renders from the TrackerView that comes back.
"""

import logging
from dataclasses import dataclass
from datetime import date, tzinfo

from . import grouping
from .commands import (
    ClearHistory,
    Command,
    CreateEvent,
    DeleteEvent,
    Reload,
    ShowNewer,
    ShowOlder,
    UpdateEvent,
)
from .event import TrackingEvent
from .grouping import DayGroup
from .store import EventStore

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TrackerView:
    """
    Derived state for rendering one page of the tracker.

    Attributes:
        day: Calendar day of the current page, None when there are no events
        events: Events of the current page in store order
        page_index: Position of the current page, 0 being the most recent day
        page_count: Number of distinct days with events
        has_history: True if the store holds any events at all
        entry_count: Entries on the current page
        exit_count: Exits on the current page
    """

    day: date | None
    events: tuple[TrackingEvent, ...]
    page_index: int
    page_count: int
    has_history: bool
    entry_count: int = 0
    exit_count: int = 0

    @property
    def can_show_older(self) -> bool:
        return self.page_index < self.page_count - 1

    @property
    def can_show_newer(self) -> bool:
        return self.page_index > 0

    @property
    def summary(self) -> str:
        """Entry/exit tally for the current day, e.g. "3 entries, 1 exit"."""
        if self.day is None:
            return ""
        entries = "entry" if self.entry_count == 1 else "entries"
        exits = "exit" if self.exit_count == 1 else "exits"
        return f"{self.entry_count} {entries}, {self.exit_count} {exits}"


class TrackerState:
    """
    Owns the event store and the current page index.

    Every mutating command persists through the store before the new view
    is derived.
    """

    def __init__(self, store: EventStore, tz: tzinfo | None = None):
        """
        Initialize tracker state.

        Args:
            store: Event store; not loaded automatically.
            tz: Timezone for calendar days, None for local time.
        """
        self.store = store
        self.tz = tz
        self.page_index = 0

    def groups(self) -> list[DayGroup]:
        """Current day grouping, recomputed from the store."""
        return grouping.group_by_day(self.store, self.tz)

    def view(self) -> TrackerView:
        """Derive the view for the current page."""
        groups = self.groups()
        self.page_index = grouping.clamp(self.page_index, len(groups))
        page = grouping.current_page(groups, self.page_index)
        return TrackerView(
            day=page.day if page else None,
            events=page.events if page else (),
            page_index=self.page_index,
            page_count=len(groups),
            has_history=len(self.store) > 0,
            entry_count=page.entry_count if page else 0,
            exit_count=page.exit_count if page else 0,
        )

    def dispatch(self, command: Command) -> TrackerView:
        """
        Apply a command and return the resulting view.

        Raises:
            TypeError: If command is not a known command type.
        """
        if isinstance(command, CreateEvent):
            self.store.create(command.vehicle_model, command.is_entry)
            self.page_index = 0
        elif isinstance(command, UpdateEvent):
            self.store.update(
                command.event_id,
                vehicle_model=command.vehicle_model,
                is_entry=command.is_entry,
            )
        elif isinstance(command, DeleteEvent):
            self.store.delete(command.event_id)
        elif isinstance(command, ClearHistory):
            self.store.clear_all()
            self.page_index = 0
        elif isinstance(command, ShowOlder):
            self.page_index = grouping.older(self.page_index, len(self.groups()))
        elif isinstance(command, ShowNewer):
            self.page_index = grouping.newer(self.page_index)
        elif isinstance(command, Reload):
            self.store.load()
            self.page_index = 0
        else:
            raise TypeError(f"Unknown command: {command!r}")

        return self.view()
