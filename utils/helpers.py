"""
Utility functions and helpers for the Alexya framework.
Includes logging setup and log level translation.
"""

import logging
import os
import sys
from datetime import datetime
from typing import Any, Dict, Optional

from config.settings import LOG_DATE_FORMAT, LOG_FORMAT

LOGGER_NAME = "alexya"

# Syslog level names used in the configuration -> logging levels
SYSLOG_LEVELS: Dict[str, int] = {
    "emergency": logging.CRITICAL,
    "alert": logging.CRITICAL,
    "critical": logging.CRITICAL,
    "error": logging.ERROR,
    "warning": logging.WARNING,
    "notice": logging.INFO,
    "info": logging.INFO,
    "debug": logging.DEBUG,
}


def resolve_log_level(levels: Optional[Dict[str, bool]]) -> int:
    """
    Translate the enabled syslog levels into a `logging` level.

    Args:
        levels: Map of syslog level name to whether it should be logged

    Returns:
        The most verbose enabled level, or WARNING if none is configured
    """
    enabled = [SYSLOG_LEVELS[name] for name, on in (levels or {}).items()
               if on and name in SYSLOG_LEVELS]
    return min(enabled) if enabled else logging.WARNING


def setup_logging(config: Optional[Dict[str, Any]] = None) -> logging.Logger:
    """
    Set up the framework logger from the `alexya.logging` configuration.

    Args:
        config: Logging section with `enabled`, `type`, `directory` and `levels`

    Returns:
        The configured framework logger
    """
    config = config or {}
    logger = logging.getLogger(LOGGER_NAME)

    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    if not config.get("enabled", True):
        logger.addHandler(logging.NullHandler())
        logger.propagate = False
        return logger

    formatter = logging.Formatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT)
    handlers = [logging.StreamHandler(sys.stdout)]

    if config.get("type", "file") == "file":
        directory = config.get("directory") or "logs"
        os.makedirs(directory, exist_ok=True)
        filename = os.path.join(directory, f"alexya_{datetime.now().strftime('%Y%m%d')}.log")
        handlers.append(logging.FileHandler(filename, encoding='utf-8'))

    for handler in handlers:
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    logger.setLevel(resolve_log_level(config.get("levels")))
    logger.propagate = False

    logger.info("Logging system initialized")
    return logger
