"""
Commands dispatched by the UI to the tracker state.
"""

import uuid
from dataclasses import dataclass


@dataclass(frozen=True)
class CreateEvent:
    """Track a new event now."""

    vehicle_model: str = ""
    is_entry: bool = True


@dataclass(frozen=True)
class UpdateEvent:
    """Edit an event; None fields are left unchanged."""

    event_id: uuid.UUID
    vehicle_model: str | None = None
    is_entry: bool | None = None


@dataclass(frozen=True)
class DeleteEvent:
    event_id: uuid.UUID


@dataclass(frozen=True)
class ClearHistory:
    pass


@dataclass(frozen=True)
class ShowOlder:
    pass


@dataclass(frozen=True)
class ShowNewer:
    pass


@dataclass(frozen=True)
class Reload:
    """Re-read the persisted snapshot."""


Command = CreateEvent | UpdateEvent | DeleteEvent | ClearHistory | ShowOlder | ShowNewer | Reload
