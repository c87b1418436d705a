#!/usr/bin/env python3
"""
Bootstraps an Alexya application.
Registers the container bindings and initializes the framework components.
"""

from typing import Optional

from core.exception_handler import ExceptionHandler
from di import Container, get_container, register_defaults


def bootstrap(container: Optional[Container] = None) -> Container:
    """
    Register the default bindings and initialize the framework.

    Args:
        container: Container to bootstrap, the process-wide one if None

    Returns:
        The bootstrapped container
    """
    container = container if container is not None else get_container()

    register_defaults(container)

    ExceptionHandler.init(container.get("Logger"))
    container.get("Router").init()

    container.get("Logger").debug("Alexya is bootstrapped!")
    return container


def main():
    """Main entry point."""
    container = bootstrap()
    container.Logger().debug(f"Registered bindings: {', '.join(container.names())}")


if __name__ == "__main__":
    main()
