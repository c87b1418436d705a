"""
Framework configuration defaults.

Every value can be overridden after bootstrapping through the `Settings`
binding, e.g. `container.get("Settings").set("alexya.locale", "es_ES")`.
"""

import os
from typing import Any, Dict

from config.paths import LOGS_DIR, SESSIONS_DIR, UPLOADS_DIR

# Log levels in syslog order, most severe first
LOG_LEVELS = ("emergency", "alert", "critical", "error", "warning", "notice", "info", "debug")


def _env_bool(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


def _levels_from(minimum: str) -> Dict[str, bool]:
    """Enable every level at least as severe as `minimum`."""
    minimum = minimum.lower()
    if minimum not in LOG_LEVELS:
        minimum = "debug"
    cutoff = LOG_LEVELS.index(minimum)
    return {level: index <= cutoff for index, level in enumerate(LOG_LEVELS)}


def get_config() -> Dict[str, Any]:
    """Build the `alexya` configuration section."""
    return {
        # Default locale
        "locale": os.getenv("ALEXYA_LOCALE", "en_US"),

        "logging": {
            "enabled": _env_bool("ALEXYA_LOG_ENABLED", True),
            # Where to log: "file" or "console"
            "type": os.getenv("ALEXYA_LOG_TYPE", "file"),
            "directory": os.getenv("ALEXYA_LOG_DIR", str(LOGS_DIR)),
            "levels": _levels_from(os.getenv("ALEXYA_LOG_LEVEL", "debug")),
        },

        "uploads": {
            "enabled": True,
            # Extension pattern -> directory the file is saved to
            "directories": {
                "*": str(UPLOADS_DIR),
            },
        },

        "cache": {
            "enabled": True,
            "lifetime": 21600,  # seconds
        },

        "session": {
            "enabled": True,
            "name": "Alexya",
            "path": str(SESSIONS_DIR),
            "lifetime": 7200,  # seconds
        },

        "sockswork": {
            "timeout": int(os.getenv("SOCKSWORK_TIMEOUT", "100")),  # milliseconds
            "server": os.getenv("SOCKSWORK_SERVER", "127.0.0.1"),
            "port": int(os.getenv("SOCKSWORK_PORT", "1207")),
        },
    }
