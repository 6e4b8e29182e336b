"""
Speed Bump Tracker Kivy Application.

Main entry point for the Kivy-based mobile/desktop application.
"""

import logging
import os
from pathlib import Path

# Prevent Kivy from consuming command-line arguments
os.environ["KIVY_NO_ARGS"] = "1"

from kivy.app import App
from kivy.core.window import Window
from kivy.logger import Logger
from kivy.utils import platform

from ..core.commands import Reload
from ..core.config import Config
from ..core.store import DEFAULT_SNAPSHOT_KEY, EventStore
from ..core.tracker import TrackerState
from .screens.main_screen import MainScreen
from .storage import KivyJsonStore

logger = logging.getLogger(__name__)


class SpeedBumpApp(App):
    """
    Main Speed Bump Tracker Kivy application.

    Wires the snapshot storage, event store and tracker state to the
    main screen, and loads the saved history when the app starts.
    """

    def __init__(self, app_config: Config | None = None, data_dir: str | None = None, **kwargs):
        """
        Initialize the app.

        Args:
            app_config: Optional Config object. If not provided, loads from default location.
            data_dir: Directory for the snapshot file. Defaults to the platform's
                      user data directory.
        """
        super().__init__(**kwargs)

        # app_config avoids clashing with Kivy's own App.config
        if app_config is None:
            app_config = Config()
        self.app_config = app_config
        self._data_dir = data_dir

        self.state: TrackerState | None = None
        self.main_screen: MainScreen | None = None

        Logger.info(f"SpeedBump: Initialized on {platform}")

    @property
    def data_dir(self) -> Path:
        """Directory holding the snapshot file."""
        configured = self._data_dir or self.app_config.get("storage.directory")
        if configured:
            return Path(configured).expanduser()
        return Path(self.user_data_dir)

    def build(self):
        """Build the application UI."""
        if platform not in ("android", "ios"):
            Window.size = (
                self.app_config.get("window.width", 420),
                self.app_config.get("window.height", 760),
            )
        self.title = self.app_config.get("app.name", "Speed Bump Tracker")

        snapshot_path = self.data_dir / self.app_config.get("storage.filename", "speedbump.json")
        Logger.info(f"SpeedBump: Snapshot file: {snapshot_path}")

        store = EventStore(
            storage=KivyJsonStore(snapshot_path),
            key=self.app_config.get("storage.key", DEFAULT_SNAPSHOT_KEY),
        )
        self.state = TrackerState(store, tz=self.app_config.timezone)

        self.main_screen = MainScreen(state=self.state, config=self.app_config)
        return self.main_screen

    def on_start(self):
        """Load the saved history once the window is up."""
        Logger.info("SpeedBump: Application starting")
        if self.main_screen:
            view = self.main_screen.dispatch_command(Reload())
            Logger.info(f"SpeedBump: {len(self.state.store)} events over {view.page_count} days")

    def on_stop(self):
        Logger.info("SpeedBump: Application stopped")


def run_mobile_app(config: Config | None = None, data_dir: str | None = None):
    """
    Run the Speed Bump Tracker Kivy application.

    Args:
        config: Optional Config object.
        data_dir: Optional directory for the snapshot file.
    """
    app = SpeedBumpApp(app_config=config, data_dir=data_dir)
    app.run()
