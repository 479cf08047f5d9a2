"""
Settings manager for the palette generator
Loads user defaults from a JSON file
"""

import json
import os
from pathlib import Path
from typing import Any, Optional

from .constants import DEFAULT_SOURCE, GPL_DEFAULT_COLUMNS


class SettingsManager:
    """Read-only generator defaults layered over a JSON settings file"""

    def __init__(self, app_name="composite_palette", settings_file=None):
        self.app_name = app_name
        if settings_file is not None:
            self.settings_file = Path(settings_file)
        else:
            self.settings_file = self._get_settings_path()
        self.settings = self._load_settings()

    def _get_settings_path(self) -> Path:
        """Get the appropriate settings directory for the platform"""
        if os.name == "nt":  # Windows
            base = Path(os.environ.get("APPDATA", os.path.expanduser("~")))
            settings_dir = base / self.app_name
        else:  # Linux/Mac
            base = Path(os.path.expanduser("~"))
            settings_dir = base / f".{self.app_name}"

        return settings_dir / "settings.json"

    def _load_settings(self) -> dict[str, Any]:
        """Load settings from file, layered over the defaults"""
        settings = self._get_default_settings()
        if self.settings_file.exists():
            try:
                with open(self.settings_file) as f:
                    loaded = json.load(f)
            except (OSError, json.JSONDecodeError):
                # If file is corrupted, start fresh
                return settings
            if isinstance(loaded, dict):
                settings.update(loaded)
        return settings

    def _get_default_settings(self) -> dict[str, Any]:
        """Get default settings"""
        return {
            "default_source": DEFAULT_SOURCE,
            "output_dir": "",
            "format_revision": "consolidated",
            "log_level": "INFO",
            "gpl_columns": GPL_DEFAULT_COLUMNS,
        }

    def get(self, key: str, default: Any = None) -> Any:
        """Get a setting value"""
        keys = key.split(".")
        value = self.settings
        for k in keys:
            if isinstance(value, dict) and k in value:
                value = value[k]
            else:
                return default
        return value


# Singleton instance
_settings_instance: Optional[SettingsManager] = None


def get_settings() -> SettingsManager:
    """Get the singleton settings instance"""
    global _settings_instance
    if _settings_instance is None:
        _settings_instance = SettingsManager()
    return _settings_instance
