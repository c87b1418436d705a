"""
Component factories for the framework's default bindings.
"""

import importlib
import importlib.util
import logging
from typing import Any, Dict, Optional

from config.routes import DEFAULT_ROUTES
from config.settings import Settings, load_settings
from core.router import Router
from utils.helpers import setup_logging
from .container import Container

logger = logging.getLogger(__name__)

# Optional collaborators: binding name -> module that must be importable
OPTIONAL_COMPONENTS: Dict[str, str] = {
    'Database': 'neo4j',
    'SocksWork': 'core.sockswork',
}


def is_available(module_path: str) -> bool:
    """
    Check whether an optional module can be imported.

    Args:
        module_path: Dotted module path

    Returns:
        True if the module is installed
    """
    try:
        return importlib.util.find_spec(module_path) is not None
    except (ImportError, ValueError):
        return False


class ComponentFactory:
    """Factory for creating the framework components resolved from the container."""

    def __init__(self, container: Container):
        """
        Initialize component factory.

        Args:
            container: Container the components resolve their dependencies from
        """
        self.container = container

    def _settings(self) -> Settings:
        return self.container.get("Settings")

    def create_settings(self) -> Settings:
        """Create the settings holder."""
        return load_settings()

    def create_logger(self) -> logging.Logger:
        """Create the framework logger from the `alexya.logging` settings."""
        return setup_logging(self._settings().get("alexya.logging"))

    def create_router(self, routes: Optional[Dict[str, Any]] = None) -> Router:
        """Create the router with the default routes."""
        return Router(routes if routes is not None else DEFAULT_ROUTES)

    def create_database(self) -> Any:
        """Create a driver for the configured graph database."""
        from neo4j import GraphDatabase

        config = self._settings().get("database", {})
        driver = GraphDatabase.driver(config.get("uri"), auth=(config.get("user"), config.get("password")))
        logger.info(f"Created database driver for {config.get('uri')}")
        return driver

    def create_sockswork(self, *args: Any) -> Any:
        """Create a new SocksWork connection. Arguments override the configured server and port."""
        module = importlib.import_module(OPTIONAL_COMPONENTS['SocksWork'])
        config = dict(self._settings().get("alexya.sockswork", {}))
        if args:
            config.update(zip(("server", "port", "timeout"), args))
        return module.Connection(**config)


def register_defaults(container: Container) -> ComponentFactory:
    """
    Register the framework's default bindings.

    Database and SocksWork are only registered when their client libraries
    are installed.

    Args:
        container: Container to register into

    Returns:
        The factory backing the registered bindings
    """
    factory = ComponentFactory(container)

    container.register_singleton("Settings", factory.create_settings)
    container.register_singleton("Logger", factory.create_logger)
    container.register_singleton("Router", factory.create_router)

    if is_available(OPTIONAL_COMPONENTS['Database']):
        container.register_singleton("Database", factory.create_database)
    else:
        logger.debug("Database component not available")

    if is_available(OPTIONAL_COMPONENTS['SocksWork']):
        container.register("SocksWork", factory.create_sockswork)
    else:
        logger.debug("SocksWork component not available")

    return factory
