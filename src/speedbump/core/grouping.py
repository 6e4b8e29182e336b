"""
Calendar-day grouping and paging over tracked events.
"""

from dataclasses import dataclass
from datetime import date, tzinfo
from typing import Iterable

from .event import TrackingEvent


@dataclass(frozen=True)
class DayGroup:
    """Events whose timestamps fall on the same local calendar day."""

    day: date
    events: tuple[TrackingEvent, ...]

    def __len__(self) -> int:
        return len(self.events)

    @property
    def entry_count(self) -> int:
        return sum(1 for event in self.events if event.is_entry)

    @property
    def exit_count(self) -> int:
        return sum(1 for event in self.events if not event.is_entry)


def local_day(event: TrackingEvent, tz: tzinfo | None = None) -> date:
    """Calendar day of an event in tz (the system's local time if None)."""
    return event.timestamp.astimezone(tz).date()


def group_by_day(
    events: Iterable[TrackingEvent], tz: tzinfo | None = None
) -> list[DayGroup]:
    """
    Group events by calendar day, most recent day first.

    Within a day the input order is kept.
    """
    buckets: dict[date, list[TrackingEvent]] = {}
    for event in events:
        buckets.setdefault(local_day(event, tz), []).append(event)

    return [
        DayGroup(day=day, events=tuple(buckets[day]))
        for day in sorted(buckets, reverse=True)
    ]


def current_page(groups: list[DayGroup], index: int) -> DayGroup | None:
    """Group at index, or None if there is none."""
    if 0 <= index < len(groups):
        return groups[index]
    return None


def older(index: int, page_count: int) -> int:
    """Index of the next older day, clamped at the last group."""
    return min(index + 1, max(page_count - 1, 0))


def newer(index: int) -> int:
    """Index of the next newer day, clamped at 0."""
    return max(index - 1, 0)


def clamp(index: int, page_count: int) -> int:
    """Bring index back into 0..page_count-1 (0 when there are no pages)."""
    return min(max(index, 0), max(page_count - 1, 0))
