"""
Snapshot encoding for tracking events.

A snapshot is a JSON array of event objects with stable field names::

    [{"id": "…", "timestamp": "2024-12-14T09:30:00+00:00",
      "vehicleModel": "Tesla Model 3", "isEntry": true}]

Timestamps are written as ISO-8601 instants. When reading, numeric timestamps
are also accepted as seconds since 2001-01-01T00:00:00Z, the default date
encoding of Foundation's JSONEncoder.
"""

import json
import logging
import math
import uuid
from datetime import datetime, timedelta, timezone
from typing import Any, Iterable

from .event import TrackingEvent

logger = logging.getLogger(__name__)

REFERENCE_DATE = datetime(2001, 1, 1, tzinfo=timezone.utc)
EARLIEST = datetime.min.replace(tzinfo=timezone.utc) + timedelta(days=1)
LATEST = datetime.max.replace(tzinfo=timezone.utc) - timedelta(days=1)


class SnapshotDecodeError(ValueError):
    """Raised when a snapshot cannot be turned back into events."""


def event_to_dict(event: TrackingEvent) -> dict[str, Any]:
    """Convert an event to its JSON-serializable snapshot form."""
    return {
        "id": str(event.id),
        "timestamp": event.timestamp.isoformat(),
        "vehicleModel": event.vehicle_model,
        "isEntry": event.is_entry,
    }


def _parse_timestamp(value: Any) -> datetime:
    # bool is an int subclass; a flag in the timestamp slot is corruption
    if isinstance(value, bool):
        raise SnapshotDecodeError(f"Invalid timestamp: {value!r}")
    if isinstance(value, (int, float)):
        if not math.isfinite(value):
            raise SnapshotDecodeError(f"Invalid timestamp: {value!r}")
        try:
            parsed = REFERENCE_DATE + timedelta(seconds=value)
        except (OverflowError, ValueError) as e:
            raise SnapshotDecodeError(f"Timestamp out of range: {value!r}") from e
    elif isinstance(value, str):
        try:
            parsed = datetime.fromisoformat(value.replace("Z", "+00:00"))
        except ValueError as e:
            raise SnapshotDecodeError(f"Invalid timestamp: {value!r}") from e
        if parsed.tzinfo is None:
            parsed = parsed.replace(tzinfo=timezone.utc)
    else:
        raise SnapshotDecodeError(f"Invalid timestamp: {value!r}")

    # UTC offsets are under a day, so this margin keeps astimezone() in range
    try:
        utc = parsed.astimezone(timezone.utc)
    except OverflowError as e:
        raise SnapshotDecodeError(f"Timestamp out of range: {value!r}") from e
    if not EARLIEST <= utc <= LATEST:
        raise SnapshotDecodeError(f"Timestamp out of range: {value!r}")
    return parsed


def event_from_dict(data: Any) -> TrackingEvent:
    """
    Build an event from its snapshot form.

    Raises:
        SnapshotDecodeError: If a field is missing or has the wrong type.
    """
    if not isinstance(data, dict):
        raise SnapshotDecodeError(f"Expected an object, got {type(data).__name__}")

    try:
        raw_id = data["id"]
        raw_timestamp = data["timestamp"]
        vehicle_model = data["vehicleModel"]
        is_entry = data["isEntry"]
    except KeyError as e:
        raise SnapshotDecodeError(f"Missing field: {e.args[0]}") from e

    if not isinstance(vehicle_model, str):
        raise SnapshotDecodeError(f"Invalid vehicleModel: {vehicle_model!r}")
    if not isinstance(is_entry, bool):
        raise SnapshotDecodeError(f"Invalid isEntry: {is_entry!r}")
    try:
        event_id = uuid.UUID(str(raw_id))
    except ValueError as e:
        raise SnapshotDecodeError(f"Invalid id: {raw_id!r}") from e

    return TrackingEvent(
        id=event_id,
        timestamp=_parse_timestamp(raw_timestamp),
        vehicle_model=vehicle_model,
        is_entry=is_entry,
    )


def encode_events(events: Iterable[TrackingEvent]) -> str:
    """Serialize events, in order, to a snapshot string."""
    return json.dumps([event_to_dict(event) for event in events])


def decode_events(blob: str | bytes) -> list[TrackingEvent]:
    """
    Deserialize a snapshot string.

    Records sharing an id keep only their first occurrence.

    Raises:
        SnapshotDecodeError: If the blob is not a valid snapshot.
    """
    try:
        payload = json.loads(blob)
    except (TypeError, ValueError) as e:
        raise SnapshotDecodeError(f"Snapshot is not valid JSON: {e}") from e

    if not isinstance(payload, list):
        raise SnapshotDecodeError(f"Expected an array, got {type(payload).__name__}")

    events: list[TrackingEvent] = []
    seen: set[uuid.UUID] = set()
    for item in payload:
        event = event_from_dict(item)
        if event.id in seen:
            logger.warning(f"Dropping duplicate event in snapshot: {event.id}")
            continue
        seen.add(event.id)
        events.append(event)
    return events
