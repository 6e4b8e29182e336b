"""
Event row widget for Speed Bump Tracker.

One tracked event in the day list: timestamp, editable vehicle model,
Entry/Exit toggle and per-row actions.
"""

import logging
from datetime import tzinfo
from typing import Callable

from kivy.uix.boxlayout import BoxLayout
from kivy.uix.button import Button
from kivy.uix.label import Label
from kivy.uix.textinput import TextInput
from kivy.uix.togglebutton import ToggleButton

from ...core.event import TrackingEvent

logger = logging.getLogger(__name__)

DELETE_COLOR = (0.8, 0.2, 0.2, 1)


class EntryExitToggle(BoxLayout):
    """Two-segment Entry/Exit selector."""

    def __init__(
        self,
        group: str,
        is_entry: bool = True,
        on_change: Callable[[bool], None] | None = None,
        **kwargs,
    ):
        kwargs.setdefault("orientation", "horizontal")
        super().__init__(**kwargs)

        self.on_change = on_change

        self.entry_btn = ToggleButton(
            text="Entry",
            group=group,
            allow_no_selection=False,
            state="down" if is_entry else "normal",
            font_size="12sp",
        )
        self.exit_btn = ToggleButton(
            text="Exit",
            group=group,
            allow_no_selection=False,
            state="normal" if is_entry else "down",
            font_size="12sp",
        )
        self.entry_btn.bind(state=self._on_state)
        self.add_widget(self.entry_btn)
        self.add_widget(self.exit_btn)

    def _on_state(self, instance, value):
        # Tracking the entry button alone sees every change of the pair
        if self.on_change:
            self.on_change(value == "down")

    @property
    def is_entry(self) -> bool:
        return self.entry_btn.state == "down"


class EventRow(BoxLayout):
    """Single event in the list."""

    def __init__(
        self,
        event: TrackingEvent,
        time_format: str,
        tz: tzinfo | None = None,
        on_model_change: Callable[[TrackingEvent, str], None] | None = None,
        on_kind_change: Callable[[TrackingEvent, bool], None] | None = None,
        on_edit: Callable[[TrackingEvent], None] | None = None,
        on_delete: Callable[[TrackingEvent], None] | None = None,
        **kwargs,
    ):
        kwargs.setdefault("orientation", "vertical")
        kwargs.setdefault("size_hint_y", None)
        kwargs.setdefault("height", 90)
        kwargs.setdefault("padding", [10, 4, 10, 4])
        kwargs.setdefault("spacing", 4)
        super().__init__(**kwargs)

        self.event = event
        self.on_model_change = on_model_change
        self.on_kind_change = on_kind_change
        self.on_edit = on_edit
        self.on_delete = on_delete

        time_label = Label(
            text=event.timestamp.astimezone(tz).strftime(time_format),
            font_size="12sp",
            color=(0.7, 0.7, 0.7, 1),
            halign="left",
            valign="middle",
            size_hint_y=0.4,
        )
        time_label.bind(size=time_label.setter("text_size"))
        self.add_widget(time_label)

        controls = BoxLayout(orientation="horizontal", size_hint_y=0.6, spacing=6)

        self.model_input = TextInput(
            text=event.vehicle_model,
            hint_text="Vehicle Model",
            multiline=False,
            font_size="14sp",
            size_hint=(0.45, 1),
        )
        self.model_input.bind(on_text_validate=self._commit_model, focus=self._on_focus)
        controls.add_widget(self.model_input)

        self.kind_toggle = EntryExitToggle(
            group=f"kind-{event.id}",
            is_entry=event.is_entry,
            on_change=self._on_kind,
            size_hint=(0.3, 1),
        )
        controls.add_widget(self.kind_toggle)

        edit_btn = Button(text="Edit", font_size="12sp", size_hint=(0.12, 1))
        edit_btn.bind(on_press=self._on_edit)
        controls.add_widget(edit_btn)

        delete_btn = Button(
            text="Delete",
            font_size="12sp",
            size_hint=(0.13, 1),
            background_color=DELETE_COLOR,
        )
        delete_btn.bind(on_press=self._on_delete)
        controls.add_widget(delete_btn)

        self.add_widget(controls)

    def _on_focus(self, instance, focused):
        if not focused:
            self._commit_model(instance)

    def _commit_model(self, instance):
        """Report the model text if it differs from the event."""
        text = self.model_input.text
        if text != self.event.vehicle_model and self.on_model_change:
            self.on_model_change(self.event, text)

    def _on_kind(self, is_entry: bool):
        if is_entry != self.event.is_entry and self.on_kind_change:
            self.on_kind_change(self.event, is_entry)

    def _on_edit(self, instance):
        if self.on_edit:
            self.on_edit(self.event)

    def _on_delete(self, instance):
        if self.on_delete:
            self.on_delete(self.event)
