"""
Event store for Speed Bump Tracker.

Holds the ordered list of tracked events and mirrors it to a single
snapshot in local key-value storage after every mutation.
"""

import logging
import uuid
from datetime import datetime
from typing import Callable, Iterator

from .codec import SnapshotDecodeError, decode_events, encode_events
from .event import TrackingEvent, utc_now
from .storage import KeyValueStore

logger = logging.getLogger(__name__)

DEFAULT_SNAPSHOT_KEY = "trackingEvents"


class EventStore:
    """
    Ordered collection of tracking events, newest-created first.

    Persistence is best-effort: a snapshot that cannot be read leaves the
    store empty, and a snapshot that cannot be written is skipped. Neither
    raises. Updating or deleting an unknown id does nothing.
    """

    def __init__(
        self,
        storage: KeyValueStore,
        key: str = DEFAULT_SNAPSHOT_KEY,
        clock: Callable[[], datetime] = utc_now,
        id_factory: Callable[[], uuid.UUID] = uuid.uuid4,
    ):
        """
        Initialize the event store.

        Args:
            storage: Key-value store holding the snapshot.
            key: Key the snapshot is stored under.
            clock: Returns the timestamp for newly created events.
            id_factory: Returns the id for newly created events.
        """
        self.storage = storage
        self.key = key
        self._clock = clock
        self._id_factory = id_factory
        self._events: list[TrackingEvent] = []

    @property
    def events(self) -> tuple[TrackingEvent, ...]:
        """Current events in store order."""
        return tuple(self._events)

    def __len__(self) -> int:
        return len(self._events)

    def __iter__(self) -> Iterator[TrackingEvent]:
        return iter(tuple(self._events))

    def __contains__(self, event_id: object) -> bool:
        return self._index_of(event_id) is not None

    def _index_of(self, event_id: object) -> int | None:
        for index, event in enumerate(self._events):
            if event.id == event_id:
                return index
        return None

    def get(self, event_id: uuid.UUID) -> TrackingEvent | None:
        """Return the event with the given id, or None."""
        index = self._index_of(event_id)
        return None if index is None else self._events[index]

    def create(self, vehicle_model: str = "", is_entry: bool = True) -> TrackingEvent:
        """
        Track a new event at the current time.

        Args:
            vehicle_model: Optional vehicle description.
            is_entry: True for an entry, False for an exit.

        Returns:
            The newly created event, now first in the store.
        """
        event = TrackingEvent(
            id=self._id_factory(),
            timestamp=self._clock(),
            vehicle_model=vehicle_model,
            is_entry=is_entry,
        )
        self._events.insert(0, event)
        logger.debug(f"Created {event.kind.lower()} event {event.id}")
        self.persist()
        return event

    def update(
        self,
        event_id: uuid.UUID,
        vehicle_model: str | None = None,
        is_entry: bool | None = None,
    ) -> None:
        """
        Change the editable fields of an event.

        Fields passed as None are left untouched. Unknown ids are ignored.
        """
        event = self.get(event_id)
        if event is None:
            logger.debug(f"Ignoring update for unknown event {event_id}")
            return

        if vehicle_model is not None:
            event.vehicle_model = vehicle_model
        if is_entry is not None:
            event.is_entry = is_entry
        self.persist()

    def delete(self, event_id: uuid.UUID) -> None:
        """Remove an event. Unknown ids are ignored."""
        index = self._index_of(event_id)
        if index is None:
            logger.debug(f"Ignoring delete for unknown event {event_id}")
            return

        del self._events[index]
        logger.debug(f"Deleted event {event_id}")
        self.persist()

    def clear_all(self) -> None:
        """Remove every event."""
        self._events.clear()
        logger.info("Cleared event history")
        self.persist()

    def load(self) -> None:
        """Replace the in-memory events with the persisted snapshot."""
        self._events = []

        try:
            blob = self.storage.get(self.key)
        except (OSError, ValueError) as e:
            logger.warning(f"Failed to read snapshot '{self.key}': {e}")
            return

        if blob is None:
            logger.info(f"No snapshot stored under '{self.key}'")
            return

        try:
            self._events = decode_events(blob)
        except SnapshotDecodeError as e:
            logger.warning(f"Discarding unreadable snapshot '{self.key}': {e}")
            return

        logger.info(f"Loaded {len(self._events)} events")

    def persist(self) -> None:
        """Overwrite the snapshot with the current events."""
        try:
            blob = encode_events(self._events)
            self.storage.put(self.key, blob)
        except (OSError, TypeError, ValueError) as e:
            logger.warning(f"Skipping snapshot write for '{self.key}': {e}")
