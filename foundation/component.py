"""
Base class of the framework's MVC components.
"""


class Component:
    """Component whose construction runs the `_init` hook."""

    def __init__(self):
        self._init()

    def _init(self) -> None:
        """Initialization hook for subclasses."""
        pass
