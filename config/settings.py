"""
Centralized configuration management for the Alexya framework.
Loads environment variables and assembles the configuration sections.
"""

import copy
from typing import Any, Dict, Iterable, Optional
from dotenv import load_dotenv

from config import alexya, application, database

# Load environment variables
load_dotenv()

# Logging format shared by every handler
LOG_FORMAT: str = '%(asctime)s [%(levelname)s] %(message)s'
LOG_DATE_FORMAT: str = '%Y-%m-%d %H:%M:%S'

_MISSING = object()


class Settings:
    """
    Nested configuration holder with dotted-key access.

    Keys are paths through the nested dictionaries, so
    `settings.get("alexya.logging.enabled")` reads
    `data["alexya"]["logging"]["enabled"]`.
    """

    def __init__(self, data: Optional[Dict[str, Any]] = None):
        """
        Initialize settings.

        Args:
            data: Configuration sections keyed by name
        """
        self._data: Dict[str, Any] = data if data is not None else {}

    def _lookup(self, key: str) -> Any:
        node: Any = self._data
        for part in key.split("."):
            if not isinstance(node, dict) or part not in node:
                return _MISSING
            node = node[part]
        return node

    def get(self, key: str, default: Any = None) -> Any:
        """
        Get a configuration value.

        Args:
            key: Dotted path to the value
            default: Returned when the path does not exist

        Returns:
            Configuration value or `default`
        """
        value = self._lookup(key)
        return default if value is _MISSING else value

    def set(self, key: str, value: Any) -> None:
        """
        Set a configuration value, creating intermediate sections as needed.

        Args:
            key: Dotted path to the value
            value: New value
        """
        *parents, leaf = key.split(".")
        node = self._data
        for part in parents:
            child = node.get(part)
            if not isinstance(child, dict):
                child = {}
                node[part] = child
            node = child
        node[leaf] = value

    def has(self, key: str) -> bool:
        """Check whether a dotted path exists."""
        return self._lookup(key) is not _MISSING

    def all(self) -> Dict[str, Any]:
        """Return a deep copy of every configuration section."""
        return copy.deepcopy(self._data)

    def validate(self, required: Iterable[str]) -> None:
        """
        Validate that all required settings are present.

        Args:
            required: Dotted paths that must hold a value

        Raises:
            ValueError: If any of them is missing or empty
        """
        missing_settings = [key for key in required if self.get(key) in (None, "")]
        if missing_settings:
            raise ValueError(f"Missing required settings: {', '.join(missing_settings)}")


def load_settings() -> Settings:
    """Assemble the settings from every configuration module."""
    return Settings({
        "alexya": alexya.get_config(),
        "application": application.get_config(),
        "database": database.get_config(),
    })
