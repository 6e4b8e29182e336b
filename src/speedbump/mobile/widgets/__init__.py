"""Widget modules for Speed Bump Tracker mobile UI."""

from .day_pager import DayPager
from .edit_event_popup import EditEventPopup
from .event_row import EntryExitToggle, EventRow

__all__ = ["DayPager", "EditEventPopup", "EntryExitToggle", "EventRow"]
