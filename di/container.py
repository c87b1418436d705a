"""
Dependency injection container for managing named bindings.

Bindings are registered under a string name with a factory callable and
resolved later, from anywhere in the process, either as a fresh value on
every call (transient) or as a lazily built single instance (singleton).

    container.register("User", lambda name, password: User(name, password))
    container.register_singleton("Database", lambda: Database(settings))

    user = container.get("User", ["test", "test"])
    database = container.get("Database")

Registered names can also be called directly on the container:

    user = container.User("test", "test")   # same as container.get("User", ["test", "test"])
    router = container.Router()             # same as container.get("Router")
"""

import enum
import functools
import logging
import threading
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Optional, Sequence, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar('T')


class BindingKind(enum.Enum):
    """Resolution strategy of a binding."""

    TRANSIENT = "transient"
    SINGLETON = "singleton"


@dataclass
class Binding:
    """A named factory plus its resolution policy and memoized state."""

    name: str
    kind: BindingKind
    factory: Callable[..., Any]
    resolved: Any = None
    is_resolved: bool = False
    lock: threading.RLock = field(default_factory=threading.RLock, repr=False, compare=False)


class Container:
    """Name-keyed registry of transient and singleton bindings."""

    def __init__(self):
        """Initialize an empty container."""
        self._bindings: Dict[str, Binding] = {}
        self._lock = threading.RLock()

    def is_registered(self, name: str) -> bool:
        """
        Check whether a binding has been registered.

        Args:
            name: Binding name

        Returns:
            True if `name` is a registered binding
        """
        with self._lock:
            return name in self._bindings

    def register(self, name: str, factory: Callable[..., T]) -> None:
        """
        Register a transient binding.

        The factory is called on every `get` with that call's arguments.
        An existing binding with the same name is overwritten.

        Args:
            name: Binding name
            factory: Callable that builds the value
        """
        self._store(Binding(name, BindingKind.TRANSIENT, factory))

    def register_singleton(self, name: str, factory: Callable[..., T]) -> None:
        """
        Register a singleton binding.

        The factory is not called until the first `get`, and then only once.
        An existing binding with the same name is overwritten, along with
        any value it already resolved.

        Args:
            name: Binding name
            factory: Callable that builds the single instance
        """
        self._store(Binding(name, BindingKind.SINGLETON, factory))

    def register_instance(self, name: str, instance: T) -> None:
        """
        Register a pre-created instance as an already resolved singleton.

        Args:
            name: Binding name
            instance: Pre-created instance
        """
        binding = Binding(name, BindingKind.SINGLETON, lambda *args: instance)
        binding.resolved = instance
        binding.is_resolved = True
        self._store(binding)

    def unregister(self, name: str) -> None:
        """
        Remove a binding and any value it resolved. Unknown names are ignored.

        Args:
            name: Binding name
        """
        with self._lock:
            removed = self._bindings.pop(name, None)
        if removed is not None:
            logger.debug(f"Unregistered binding: {name}")

    def get(self, name: str, args: Optional[Sequence[Any]] = None) -> Any:
        """
        Resolve a binding.

        Singletons return the value built by their first successful
        resolution; arguments passed on later calls are ignored. Errors
        raised by the factory propagate unchanged, and a singleton whose
        factory raised stays unresolved.

        Args:
            name: Binding name
            args: Positional arguments forwarded to the factory

        Returns:
            The resolved value, or None if `name` is not registered
        """
        with self._lock:
            binding = self._bindings.get(name)
        if binding is None:
            return None

        args = tuple(args) if args else ()

        if binding.kind is BindingKind.TRANSIENT:
            return binding.factory(*args)

        if binding.is_resolved:
            return binding.resolved

        with binding.lock:
            if not binding.is_resolved:
                binding.resolved = binding.factory(*args)
                binding.is_resolved = True
                logger.debug(f"Resolved singleton binding: {name}")
        return binding.resolved

    def resolve(self, name: str, *args: Any) -> Any:
        """Resolve a binding with variadic arguments; see `get`."""
        return self.get(name, args)

    def is_resolved(self, name: str) -> bool:
        """True if `name` is a singleton whose factory has completed."""
        with self._lock:
            binding = self._bindings.get(name)
        return (binding is not None
                and binding.kind is BindingKind.SINGLETON
                and binding.is_resolved)

    def names(self) -> List[str]:
        """Registered binding names in registration order."""
        with self._lock:
            return list(self._bindings)

    def clear(self) -> None:
        """Clear all registered bindings."""
        with self._lock:
            self._bindings.clear()
        logger.debug("Cleared all bindings")

    def _store(self, binding: Binding) -> None:
        with self._lock:
            overwritten = binding.name in self._bindings
            # Re-insert so that names() reflects the latest registration.
            self._bindings.pop(binding.name, None)
            self._bindings[binding.name] = binding
        action = "Overwrote" if overwritten else "Registered"
        logger.debug(f"{action} {binding.kind.value} binding: {binding.name}")

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self.is_registered(name)

    def __len__(self) -> int:
        with self._lock:
            return len(self._bindings)

    def __getattr__(self, name: str) -> Callable[..., Any]:
        # Only reached for names that are not real attributes.
        if name.startswith('_'):
            raise AttributeError(name)
        return functools.partial(self.resolve, name)


# Process-wide container used by bootstrap and application code
_container = Container()


def get_container() -> Container:
    """Return the process-wide container."""
    return _container


def reset_container() -> Container:
    """Replace the process-wide container with an empty one (for testing)."""
    global _container
    _container = Container()
    return _container
