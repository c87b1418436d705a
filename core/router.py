"""
Route table holder registered as the `Router` binding.
"""

import logging
from typing import Any, Callable, Dict, List, Optional

logger = logging.getLogger(__name__)


class Router:
    """Keeps the named route handlers of the application."""

    def __init__(self, routes: Optional[Dict[str, Callable[..., Any]]] = None):
        """
        Initialize the router.

        Args:
            routes: Route name -> handler mapping
        """
        self._routes: Dict[str, Callable[..., Any]] = dict(routes or {})
        self.initialized = False

    def init(self) -> None:
        """Mark the router ready to dispatch."""
        self.initialized = True
        logger.debug(f"Router initialized with routes: {', '.join(self._routes) or 'none'}")

    def add(self, name: str, handler: Callable[..., Any]) -> None:
        """
        Add or override a route.

        Args:
            name: Route name
            handler: Callable invoked on dispatch
        """
        self._routes[name] = handler
        logger.debug(f"Added route: {name}")

    def has(self, name: str) -> bool:
        return name in self._routes

    def list_routes(self) -> List[str]:
        return list(self._routes.keys())

    def dispatch(self, name: str = "default", *args: Any) -> Any:
        """
        Call a route handler.

        Args:
            name: Route name
            *args: Arguments forwarded to the handler

        Returns:
            Whatever the handler returns

        Raises:
            RuntimeError: If `init` has not been called
            KeyError: If the route does not exist
        """
        if not self.initialized:
            raise RuntimeError("Router has not been initialized")
        if name not in self._routes:
            raise KeyError(f"Route not found: {name}")
        return self._routes[name](*args)
