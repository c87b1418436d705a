"""
Generic key-value collection.
"""

from typing import Any, Dict, Iterator, Optional


class Collection:
    """Key-value store with attribute access to its items."""

    def __init__(self, items: Optional[Dict[str, Any]] = None):
        object.__setattr__(self, '_items', dict(items or {}))

    def get(self, key: str, default: Any = None) -> Any:
        """
        Get an item.

        Args:
            key: Item key
            default: Returned when the key does not exist

        Returns:
            Item value or `default`
        """
        return self._items.get(key, default)

    def set(self, key: str, value: Any) -> None:
        self._items[key] = value

    def has(self, key: str) -> bool:
        return key in self._items

    def remove(self, key: str) -> None:
        """Remove an item. Missing keys are ignored."""
        self._items.pop(key, None)

    def all(self) -> Dict[str, Any]:
        """Return a shallow copy of every item."""
        return dict(self._items)

    def __getattr__(self, key: str) -> Any:
        if key.startswith('_'):
            raise AttributeError(key)
        return self.get(key)

    def __setattr__(self, key: str, value: Any) -> None:
        self.set(key, value)

    def __delattr__(self, key: str) -> None:
        self.remove(key)

    def __contains__(self, key: object) -> bool:
        return key in self._items

    def __iter__(self) -> Iterator[str]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)
