"""Screen modules for Speed Bump Tracker mobile UI."""

from .main_screen import MainScreen

__all__ = ["MainScreen"]
