"""
Model component of the HMVC.

A model holds the data that is going to be rendered in a view. Values can
be read and written as attributes:

    model = UserModel()
    model.name = "test"
    model.name            # "test"
    model.get("missing")  # None
"""

from typing import Any, Dict

from .collection import Collection
from .component import Component


class Model(Component):
    """Data holder backed by a `Collection`."""

    _data: Collection

    def _init(self) -> None:
        object.__setattr__(self, '_data', Collection())
        self.on_instance()

    def on_instance(self) -> None:
        """Executed once the model has been instantiated."""
        pass

    def get(self, key: str, default: Any = None) -> Any:
        """
        Retrieve a value.

        Args:
            key: Value name
            default: Returned when `key` does not exist

        Returns:
            The value of `key` or `default`
        """
        return self._data.get(key, default)

    def set(self, key: str, value: Any) -> None:
        self._data.set(key, value)

    def all(self) -> Dict[str, Any]:
        """Return every stored value."""
        return self._data.all()

    def __getattr__(self, key: str) -> Any:
        if key.startswith('_'):
            raise AttributeError(key)
        return self.get(key)

    def __setattr__(self, key: str, value: Any) -> None:
        if key.startswith('_'):
            object.__setattr__(self, key, value)
        else:
            self.set(key, value)

    def __delattr__(self, key: str) -> None:
        if key.startswith('_'):
            object.__delattr__(self, key)
        else:
            self._data.remove(key)

    def __contains__(self, key: object) -> bool:
        return key in self._data
