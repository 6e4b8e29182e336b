"""
Day pager widget for Speed Bump Tracker.

Shows the selected day with chevrons to page to older and newer days.
"""

from typing import Callable

from kivy.uix.boxlayout import BoxLayout
from kivy.uix.button import Button
from kivy.uix.label import Label

from ...core.tracker import TrackerView

DISABLED_OPACITY = 0.3


class DayPager(BoxLayout):
    """
    Older/newer navigation across day groups.

    Layout:
    ┌─────────────────────────────────────┐
    │  <    Saturday, December 14, 2024  > │
    │         2 entries, 1 exit            │
    └─────────────────────────────────────┘
    """

    def __init__(
        self,
        date_format: str,
        on_older: Callable[[], None] | None = None,
        on_newer: Callable[[], None] | None = None,
        **kwargs,
    ):
        kwargs.setdefault("orientation", "horizontal")
        kwargs.setdefault("size_hint_y", None)
        kwargs.setdefault("height", 56)
        kwargs.setdefault("padding", [10, 0, 10, 0])
        super().__init__(**kwargs)

        self.date_format = date_format
        self.on_older = on_older
        self.on_newer = on_newer

        self.older_btn = Button(text="<", size_hint=(None, 1), width=44, font_size="18sp")
        self.older_btn.bind(on_press=self._on_older)
        self.add_widget(self.older_btn)

        center = BoxLayout(orientation="vertical")
        self.date_label = Label(text="", font_size="16sp", bold=True, size_hint_y=0.6)
        center.add_widget(self.date_label)
        self.summary_label = Label(
            text="", font_size="12sp", color=(0.7, 0.7, 0.7, 1), size_hint_y=0.4
        )
        center.add_widget(self.summary_label)
        self.add_widget(center)

        self.newer_btn = Button(text=">", size_hint=(None, 1), width=44, font_size="18sp")
        self.newer_btn.bind(on_press=self._on_newer)
        self.add_widget(self.newer_btn)

    def update(self, view: TrackerView) -> None:
        """Reflect the current page of view."""
        self.date_label.text = view.day.strftime(self.date_format) if view.day else ""
        self.summary_label.text = view.summary

        self.older_btn.disabled = not view.can_show_older
        self.older_btn.opacity = 1 if view.can_show_older else DISABLED_OPACITY
        self.newer_btn.disabled = not view.can_show_newer
        self.newer_btn.opacity = 1 if view.can_show_newer else DISABLED_OPACITY

    def _on_older(self, instance):
        if self.on_older:
            self.on_older()

    def _on_newer(self, instance):
        if self.on_newer:
            self.on_newer()
