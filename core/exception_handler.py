"""
Process-wide handler that logs uncaught exceptions.
"""

import logging
import sys
from typing import Optional


class ExceptionHandler:
    """Installs a `sys.excepthook` that reports uncaught exceptions to a logger."""

    _logger: Optional[logging.Logger] = None
    _previous_hook = None

    @classmethod
    def init(cls, logger: Optional[logging.Logger] = None) -> None:
        """
        Install the hook. Calling it again only swaps the logger.

        Args:
            logger: Logger receiving the reports, module logger if None
        """
        cls._logger = logger or logging.getLogger(__name__)
        if cls._previous_hook is None:
            cls._previous_hook = sys.excepthook
            sys.excepthook = cls.handle

    @classmethod
    def restore(cls) -> None:
        """Put back the hook that was active before `init`."""
        if cls._previous_hook is not None:
            sys.excepthook = cls._previous_hook
        cls._previous_hook = None
        cls._logger = None

    @classmethod
    def handle(cls, exc_type, exc_value, exc_traceback) -> None:
        if issubclass(exc_type, KeyboardInterrupt):
            hook = cls._previous_hook or sys.__excepthook__
            hook(exc_type, exc_value, exc_traceback)
            return

        logger = cls._logger or logging.getLogger(__name__)
        logger.critical("Uncaught exception", exc_info=(exc_type, exc_value, exc_traceback))
