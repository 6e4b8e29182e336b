"""
Main screen for Speed Bump Tracker.

Track button, day pager, the selected day's events and history controls.
"""

import logging

from kivy.uix.boxlayout import BoxLayout
from kivy.uix.button import Button
from kivy.uix.label import Label
from kivy.uix.popup import Popup
from kivy.uix.scrollview import ScrollView

from ...core.commands import (
    ClearHistory,
    Command,
    CreateEvent,
    DeleteEvent,
    ShowNewer,
    ShowOlder,
    UpdateEvent,
)
from ...core.config import Config
from ...core.event import TrackingEvent
from ...core.tracker import TrackerState, TrackerView
from ..widgets.day_pager import DayPager
from ..widgets.edit_event_popup import EditEventPopup
from ..widgets.event_row import DELETE_COLOR, EventRow

logger = logging.getLogger(__name__)

DEFAULT_DATE_FORMAT = "%A, %B %d, %Y"
DEFAULT_TIME_FORMAT = "%b %d, %Y at %I:%M:%S %p"


class MainScreen(BoxLayout):
    """
    Single screen of the tracker.

    Layout:
    ┌─────────────────────────────────────┐
    │         Speed Bump Tracker          │
    │  [        + Track Event        ]    │
    │  <   Saturday, December 14, 2024  > │
    │  ┌───────────────────────────────┐  │
    │  │ 09:30  [model] Entry|Exit  Del │  │
    │  └───────────────────────────────┘  │
    │            [Clear History]          │
    └─────────────────────────────────────┘
    """

    def __init__(self, state: TrackerState, config: Config, **kwargs):
        """
        Initialize the main screen.

        Args:
            state: Tracker state all user actions are dispatched to.
            config: Application configuration.
        """
        kwargs.setdefault("orientation", "vertical")
        kwargs.setdefault("padding", [15, 20, 15, 10])
        kwargs.setdefault("spacing", 15)
        super().__init__(**kwargs)

        self.state = state
        self.config = config
        self.date_format = config.get("display.date_format", DEFAULT_DATE_FORMAT)
        self.time_format = config.get("display.time_format", DEFAULT_TIME_FORMAT)

        self._create_ui()
        self.render(state.view())

    def _create_ui(self):
        """Create all UI components."""
        title = Label(
            text=self.config.get("app.name", "Speed Bump Tracker"),
            font_size="24sp",
            bold=True,
            size_hint_y=None,
            height=50,
        )
        self.add_widget(title)

        track_btn = Button(
            text="+ Track Event",
            font_size="18sp",
            bold=True,
            size_hint_y=None,
            height=56,
        )
        track_btn.bind(on_press=lambda x: self.dispatch_command(CreateEvent()))
        self.add_widget(track_btn)

        self.day_pager = DayPager(
            date_format=self.date_format,
            on_older=lambda: self.dispatch_command(ShowOlder()),
            on_newer=lambda: self.dispatch_command(ShowNewer()),
        )
        self.add_widget(self.day_pager)

        scroll_view = ScrollView(size_hint=(1, 1))
        self.list_layout = BoxLayout(orientation="vertical", size_hint_y=None, spacing=5)
        self.list_layout.bind(minimum_height=self.list_layout.setter("height"))
        scroll_view.add_widget(self.list_layout)
        self.add_widget(scroll_view)

        self.clear_btn = Button(
            text="Clear History",
            font_size="14sp",
            size_hint_y=None,
            height=44,
            color=DELETE_COLOR,
            background_color=(0, 0, 0, 0),
        )
        self.clear_btn.bind(on_press=self._confirm_clear)
        self.add_widget(self.clear_btn)

    def dispatch_command(self, command: Command, render: bool = True) -> TrackerView:
        """
        Apply a command to the tracker state.

        Args:
            command: Command to dispatch.
            render: Rebuild the list afterwards. Inline edits skip this so the
                    widget being edited keeps its focus.
        """
        view = self.state.dispatch(command)
        if render:
            self.render(view)
        else:
            self.day_pager.update(view)
        return view

    def render(self, view: TrackerView) -> None:
        """Rebuild the screen from view."""
        self._set_visible(self.day_pager, view.page_count > 0)
        self.day_pager.update(view)

        self.list_layout.clear_widgets()
        if not view.events:
            placeholder = Label(
                text="No events recorded",
                font_size="14sp",
                color=(0.7, 0.7, 0.7, 1),
                size_hint_y=None,
                height=100,
            )
            self.list_layout.add_widget(placeholder)
        else:
            for event in view.events:
                self.list_layout.add_widget(
                    EventRow(
                        event=event,
                        time_format=self.time_format,
                        tz=self.state.tz,
                        on_model_change=self._on_model_change,
                        on_kind_change=self._on_kind_change,
                        on_edit=self._open_editor,
                        on_delete=self._on_delete,
                    )
                )

        self._set_visible(self.clear_btn, view.has_history)

    def _set_visible(self, widget, visible: bool) -> None:
        widget.opacity = 1 if visible else 0
        widget.disabled = not visible

    def _on_model_change(self, event: TrackingEvent, vehicle_model: str):
        self.dispatch_command(
            UpdateEvent(event.id, vehicle_model=vehicle_model), render=False
        )

    def _on_kind_change(self, event: TrackingEvent, is_entry: bool):
        self.dispatch_command(UpdateEvent(event.id, is_entry=is_entry), render=False)

    def _on_delete(self, event: TrackingEvent):
        logger.info(f"Deleting event {event.id}")
        self.dispatch_command(DeleteEvent(event.id))

    def _open_editor(self, event: TrackingEvent):
        EditEventPopup(
            event=event,
            time_format=self.time_format,
            tz=self.state.tz,
            on_save=self._on_editor_save,
        ).open()

    def _on_editor_save(self, event: TrackingEvent, vehicle_model: str, is_entry: bool):
        self.dispatch_command(
            UpdateEvent(event.id, vehicle_model=vehicle_model, is_entry=is_entry)
        )

    def _confirm_clear(self, instance):
        """Show confirmation dialog before clearing the history."""
        content = BoxLayout(orientation="vertical", padding=[20, 10, 20, 10], spacing=10)

        message = Label(
            text="Are you sure you want to clear all tracked events?\nThis cannot be undone.",
            font_size="14sp",
            halign="center",
            valign="middle",
            size_hint_y=0.6,
        )
        message.bind(size=message.setter("text_size"))
        content.add_widget(message)

        buttons = BoxLayout(orientation="horizontal", size_hint_y=0.4, spacing=10)

        cancel_btn = Button(text="Cancel", font_size="14sp")
        clear_btn = Button(
            text="Clear All",
            font_size="14sp",
            background_color=DELETE_COLOR,
        )

        buttons.add_widget(cancel_btn)
        buttons.add_widget(clear_btn)
        content.add_widget(buttons)

        popup = Popup(
            title="Clear History",
            content=content,
            size_hint=(0.85, 0.35),
            auto_dismiss=False,
        )

        cancel_btn.bind(on_press=popup.dismiss)
        clear_btn.bind(on_press=lambda x: self._clear_history(popup))

        popup.open()

    def _clear_history(self, popup: Popup):
        popup.dismiss()
        self.dispatch_command(ClearHistory())
