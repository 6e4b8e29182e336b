"""
Layered YAML configuration.

Sources, each overriding the one before:
1. config/default.yaml
2. config/{SPEEDBUMP_ENV}.yaml, SPEEDBUMP_ENV defaulting to "development"
3. SPEEDBUMP_<SECTION>_<KEY> environment variables
"""

import logging
import os
from datetime import tzinfo
from pathlib import Path
from typing import Any, Mapping
from zoneinfo import ZoneInfo

import yaml

logger = logging.getLogger(__name__)

ENV_PREFIX = "SPEEDBUMP_"
ENV_SELECTOR = f"{ENV_PREFIX}ENV"
DEFAULT_CONFIG_DIR = Path(__file__).resolve().parents[3] / "config"


def merge(base: Mapping[str, Any], override: Mapping[str, Any]) -> dict[str, Any]:
    """Recursively merge override into a copy of base."""
    merged = dict(base)
    for key, value in override.items():
        current = merged.get(key)
        if isinstance(current, Mapping) and isinstance(value, Mapping):
            merged[key] = merge(current, value)
        else:
            merged[key] = value
    return merged


def read_yaml(path: Path) -> dict[str, Any]:
    """Load a YAML mapping, or {} if the file is missing or empty."""
    if not path.is_file():
        return {}
    with open(path, encoding="utf-8") as f:
        data = yaml.safe_load(f)
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValueError(f"{path} must contain a mapping, not {type(data).__name__}")
    return data


def env_overrides(environ: Mapping[str, str]) -> dict[str, Any]:
    """
    Nested overrides from SPEEDBUMP_* variables.

    SPEEDBUMP_STORAGE_KEY=events becomes {'storage': {'key': 'events'}}.
    Values are typed with YAML scalar rules, so "600" is an int and
    "true" a bool.
    """
    overrides: dict[str, Any] = {}
    for name, raw in environ.items():
        if not name.startswith(ENV_PREFIX) or name == ENV_SELECTOR:
            continue
        *sections, leaf = name[len(ENV_PREFIX) :].lower().split("_")
        node = overrides
        for section in sections:
            if not isinstance(node.get(section), dict):
                node[section] = {}
            node = node[section]
        try:
            node[leaf] = yaml.safe_load(raw)
        except yaml.YAMLError:
            node[leaf] = raw
    return overrides


class Config:
    """
    Application configuration.

    Usage:
        config = Config()
        key = config.get("storage.key", "trackingEvents")
        storage = config["storage"]
    """

    def __init__(self, config_dir: Path | None = None):
        """
        Args:
            config_dir: Directory holding the YAML files. Defaults to the project's config/
        """
        self.config_dir = Path(config_dir) if config_dir is not None else DEFAULT_CONFIG_DIR
        self.env = os.getenv(ENV_SELECTOR, "development")
        self._config = self._load()

    def _load(self) -> dict[str, Any]:
        layers = [
            read_yaml(self.config_dir / "default.yaml"),
            read_yaml(self.config_dir / f"{self.env}.yaml"),
            env_overrides(os.environ),
        ]
        config: dict[str, Any] = {}
        for layer in layers:
            config = merge(config, layer)
        logger.debug(f"Loaded configuration from {self.config_dir} (env={self.env})")
        return config

    def get(self, key: str, default: Any = None) -> Any:
        """Look up a dot-separated key such as 'display.timezone'."""
        node: Any = self._config
        for part in key.split("."):
            if not isinstance(node, dict) or node.get(part) is None:
                return default
            node = node[part]
        return node

    def __getitem__(self, section: str) -> Any:
        return self._config.get(section, {})

    @property
    def as_dict(self) -> dict[str, Any]:
        return self._config.copy()

    @property
    def timezone(self) -> tzinfo | None:
        """Timezone used to derive calendar days, None for the device's local time."""
        name = self.get("display.timezone")
        return ZoneInfo(name) if name else None

    def reload(self) -> None:
        """Re-read files and environment, e.g. after changing os.environ."""
        self.env = os.getenv(ENV_SELECTOR, "development")
        self._config = self._load()
