"""
Default routes.
All of them can be overridden through the `Router` binding.
"""

import logging
from typing import Any, Callable, Dict

logger = logging.getLogger(__name__)


def default_route(*args: Any) -> None:
    """Fallback handler used when no application route matches."""
    logger.info("Default route reached")


DEFAULT_ROUTES: Dict[str, Callable[..., Any]] = {
    "default": default_route,
}
