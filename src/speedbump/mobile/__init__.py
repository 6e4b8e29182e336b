"""
Speed Bump Tracker Mobile - Cross-platform Kivy UI.

This module provides a Kivy-based user interface that works on:
- Desktop (Windows, macOS, Linux)
- Mobile (Android, iOS)

Features:
- One-tap event tracking
- Day-by-day paging through the history
- Inline editing of vehicle model and entry/exit
- History kept in a JSON store in the app's data directory
"""

# SpeedBumpApp lives in .app; importing it opens a Kivy window.
