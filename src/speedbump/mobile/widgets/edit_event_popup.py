"""
Edit event popup for Speed Bump Tracker.

Form with vehicle model, event type and the full timestamp. Changes are
only reported when Save is pressed.
"""

from datetime import tzinfo
from typing import Callable

from kivy.uix.boxlayout import BoxLayout
from kivy.uix.button import Button
from kivy.uix.label import Label
from kivy.uix.popup import Popup
from kivy.uix.textinput import TextInput

from ...core.event import TrackingEvent
from .event_row import EntryExitToggle


class EditEventPopup(Popup):
    """Modal editor for a single event."""

    def __init__(
        self,
        event: TrackingEvent,
        time_format: str,
        tz: tzinfo | None = None,
        on_save: Callable[[TrackingEvent, str, bool], None] | None = None,
        **kwargs,
    ):
        kwargs.setdefault("title", "Edit Event")
        kwargs.setdefault("size_hint", (0.9, 0.5))
        kwargs.setdefault("auto_dismiss", False)
        super().__init__(**kwargs)

        self.event = event
        self.on_save = on_save

        content = BoxLayout(orientation="vertical", padding=[20, 10, 20, 10], spacing=10)

        self.model_input = TextInput(
            text=event.vehicle_model,
            hint_text="Vehicle Model",
            multiline=False,
            font_size="16sp",
            size_hint_y=None,
            height=44,
        )
        content.add_widget(self.model_input)

        # Own group name so the popup never joins the row's toggle group
        self.kind_toggle = EntryExitToggle(
            group=f"edit-kind-{event.id}",
            is_entry=event.is_entry,
            size_hint_y=None,
            height=44,
        )
        content.add_widget(self.kind_toggle)

        content.add_widget(
            Label(
                text=f"Time: {event.timestamp.astimezone(tz).strftime(time_format)}",
                font_size="14sp",
                color=(0.7, 0.7, 0.7, 1),
            )
        )

        buttons = BoxLayout(orientation="horizontal", size_hint_y=None, height=48, spacing=10)
        cancel_btn = Button(text="Cancel", font_size="14sp")
        cancel_btn.bind(on_press=self.dismiss)
        save_btn = Button(text="Save", font_size="14sp", bold=True)
        save_btn.bind(on_press=self._on_save)
        buttons.add_widget(cancel_btn)
        buttons.add_widget(save_btn)
        content.add_widget(buttons)

        self.content = content

    def _on_save(self, instance):
        self.dismiss()
        if self.on_save:
            self.on_save(self.event, self.model_input.text, self.kind_toggle.is_entry)
