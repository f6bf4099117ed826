import os
import json
from typing import Any, Dict, Optional

HOST: str = "127.0.0.1"
PORT: int = 4000
API_BASE: str = f"http://localhost:{PORT}"

# Types offered by the dashboards; the server accepts any non-empty type
EVENT_TYPES = ("check-in", "alert", "status")
DEFAULT_EVENT_TYPE: str = EVENT_TYPES[0]

TREND_WINDOW: int = 12
REFRESH_INTERVAL_MS: int = 5000
REQUEST_TIMEOUT_SEC: float = 5.0

# Optional dashboard settings file (read-only)
USER_CONFIG_PATH: str = os.path.expanduser("~/.config/tagtracker/settings.json")


class Config:
    """
    Desktop dashboard settings, overlaid from an optional JSON file.

    Values can be reloaded at runtime with reload().
    """
    DEFAULT_API_BASE: str = API_BASE
    DEFAULT_REFRESH_INTERVAL_MS: int = REFRESH_INTERVAL_MS
    DEFAULT_TREND_WINDOW: int = TREND_WINDOW
    DEFAULT_THEME: str = "dark"

    def __init__(self, config_path: Optional[str] = USER_CONFIG_PATH):
        self.config_path = config_path
        self._user_config: Dict[str, Any] = {}

        self.api_base: str = self.DEFAULT_API_BASE
        self.refresh_interval_ms: int = self.DEFAULT_REFRESH_INTERVAL_MS
        self.trend_window: int = self.DEFAULT_TREND_WINDOW
        self.theme: str = self.DEFAULT_THEME

        self.reload()

    def _load_user_config(self) -> Dict[str, Any]:
        """Load user configuration from file."""
        if self.config_path and os.path.exists(self.config_path):
            try:
                with open(self.config_path, 'r') as f:
                    data = json.load(f)
                if isinstance(data, dict):
                    return data
                print(f"Ignoring settings file {self.config_path}: expected a JSON object")
            except (json.JSONDecodeError, IOError) as e:
                print(f"Ignoring settings file {self.config_path}: {e}")
        return {}

    def _get_int(self, key: str, default: int) -> int:
        """Read an integer setting, keeping the default for unusable values."""
        value = self._user_config.get(key, default)
        try:
            return int(value)
        except (TypeError, ValueError):
            print(f"Ignoring setting {key}={value!r}: expected an integer")
            return default

    def reload(self) -> None:
        """Reload configuration from disk, falling back to class defaults."""
        self._user_config = self._load_user_config()

        api_base = self._user_config.get('api_base', self.DEFAULT_API_BASE)
        if not isinstance(api_base, str) or not api_base:
            api_base = self.DEFAULT_API_BASE
        self.api_base = api_base.rstrip('/')
        self.refresh_interval_ms = max(1, self._get_int(
            'refresh_interval_ms', self.DEFAULT_REFRESH_INTERVAL_MS
        ))
        self.trend_window = max(1, self._get_int(
            'trend_window', self.DEFAULT_TREND_WINDOW
        ))
        theme = self._user_config.get('theme', self.DEFAULT_THEME)
        self.theme = theme if theme in ("dark", "light") else self.DEFAULT_THEME
