"""
Configuration management for debuglog.

Loads config from file with sensible defaults, and keeps the small
set of persisted boolean preferences (the user-facing switches).
"""

import json
import os

from pathlib import Path
from typing import Any

from .types import DEFAULT_PREFERENCES_PATH, LoggerConfig

DEFAULT_CONFIG_PATH = "./debuglog_config.json"

# Persisted preference keys
FILE_LOGGING_KEY = "debug_log"
ENABLED_KEY = "debug_enabled"
TRUE_STRINGS = ("true", "yes", "1")


def load_config(config_path: str | None = None) -> LoggerConfig:
    """
    Load configuration from file, with fallback to defaults.

    Priority:
    1. Explicit config_path argument
    2. DEBUGLOG_CONFIG environment variable
    3. Default path (./debuglog_config.json)
    4. Built-in defaults
    """
    path = config_path or os.environ.get("DEBUGLOG_CONFIG", DEFAULT_CONFIG_PATH)

    if Path(path).exists():
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
        return LoggerConfig.from_dict(data)

    return LoggerConfig()


def save_config(config: LoggerConfig, config_path: str | None = None) -> None:
    """
    Save configuration to file.
    """
    path = config_path or DEFAULT_CONFIG_PATH
    Path(path).parent.mkdir(parents=True, exist_ok=True)

    with open(path, "w", encoding="utf-8") as f:
        json.dump(config.to_dict(), f, indent=2)


def create_default_config_file(path: str = DEFAULT_CONFIG_PATH) -> None:
    """Create a default configuration file for users to customize."""
    save_config(LoggerConfig(), path)
    print(f"Created default config at: {path}")


class Preferences:
    """
    Persisted boolean user preferences, stored as a JSON object.

    A missing file, an unreadable file or a missing key all read as
    False, so an app that never showed its settings screen logs
    nothing to disk.
    """

    def __init__(self, path: str = DEFAULT_PREFERENCES_PATH):
        self.path = Path(path)

    def get_bool(self, key: str) -> bool:
        """Read a boolean preference. Hand-edited "true"/"false" strings are parsed."""
        value = self._load().get(key, False)
        if isinstance(value, str):
            return value.strip().lower() in TRUE_STRINGS
        return value is True

    def set(self, key: str, value: bool) -> None:
        """Persist a boolean preference."""
        data = self._load()
        data[key] = bool(value)
        self.path.parent.mkdir(parents=True, exist_ok=True)
        with open(self.path, "w", encoding="utf-8") as f:
            json.dump(data, f, indent=2)

    def _load(self) -> dict[str, Any]:
        try:
            with open(self.path, encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, ValueError):
            # ValueError covers malformed JSON and undecodable bytes
            return {}
        return data if isinstance(data, dict) else {}


def file_logging_enabled(config: LoggerConfig, preferences: Preferences | None = None) -> bool:
    """
    Whether entries should be persisted to disk.

    An explicit config value wins; otherwise the "debug_log"
    preference decides.
    """
    if config.file_logging is not None:
        return config.file_logging
    preferences = preferences or Preferences(config.preferences_path)
    return preferences.get_bool(FILE_LOGGING_KEY)
