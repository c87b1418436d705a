"""
Tests for the dependency injection container.
"""

import threading
import time
import types
from concurrent.futures import ThreadPoolExecutor
from unittest.mock import Mock

import pytest

from di.container import BindingKind, Container, get_container, reset_container


class Counter:
    def __init__(self):
        self.n = 0

    def increment(self):
        self.n += 1
        return self.n


class TestRegistration:
    """Test binding registration and removal."""

    @pytest.fixture
    def container(self):
        return Container()

    def test_new_container_is_empty(self, container):
        assert len(container) == 0
        assert container.names() == []
        assert not container.is_registered("Logger")

    def test_register_makes_binding_visible(self, container):
        container.register("User", lambda: object())

        assert container.is_registered("User")
        assert "User" in container
        assert container.names() == ["User"]

    def test_names_are_case_sensitive(self, container):
        container.register("Logger", lambda: "upper")

        assert not container.is_registered("logger")
        assert container.get("logger") is None

    def test_register_singleton_is_lazy(self, container):
        factory = Mock(return_value="db")
        container.register_singleton("Database", factory)

        assert container.is_registered("Database")
        assert not container.is_resolved("Database")
        factory.assert_not_called()

    def test_register_overwrites_existing_binding(self, container):
        container.register("X", lambda: 1)
        container.register("X", lambda: 2)

        assert container.get("X") == 2
        assert len(container) == 1

    def test_transient_can_replace_singleton(self, container):
        container.register_singleton("X", lambda: object())
        container.register("X", lambda: object())

        assert container.get("X") is not container.get("X")

    def test_unregister_then_lookup(self, container):
        factory = Mock(return_value="value")
        container.register("X", factory)
        container.unregister("X")

        assert not container.is_registered("X")
        assert container.get("X") is None
        factory.assert_not_called()

    def test_unregister_absent_name_is_noop(self, container):
        container.register("Y", lambda: 1)
        container.unregister("X")

        assert container.names() == ["Y"]

    def test_unregister_discards_resolved_singleton(self, container):
        container.register_singleton("X", lambda: object())
        first = container.get("X")
        container.unregister("X")
        container.register_singleton("X", lambda: object())

        assert container.get("X") is not first

    def test_register_instance(self, container):
        instance = object()
        container.register_instance("Settings", instance)

        assert container.is_resolved("Settings")
        assert container.get("Settings") is instance
        assert container.get("Settings", ["ignored"]) is instance

    def test_clear(self, container):
        container.register("A", lambda: 1)
        container.register_singleton("B", lambda: 2)
        container.clear()

        assert len(container) == 0
        assert container.get("A") is None


class TestResolution:
    """Test transient and singleton resolution."""

    @pytest.fixture
    def container(self):
        return Container()

    def test_unregistered_name_resolves_to_none(self, container):
        assert container.get("Missing") is None
        assert container.get("Missing", [1, 2]) is None

    def test_adder_transient(self, container):
        container.register("Adder", lambda a, b: a + b)

        assert container.get("Adder", [2, 3]) == 5
        assert container.get("Adder", [10, -1]) == 9

    def test_transient_invoked_once_per_get(self, container):
        factory = Mock(side_effect=lambda *args: object())
        container.register("X", factory)

        results = [container.get("X", [i]) for i in range(5)]

        assert factory.call_count == 5
        assert [call.args for call in factory.call_args_list] == [(i,) for i in range(5)]
        assert len({id(result) for result in results}) == 5

    def test_transient_never_marked_resolved(self, container):
        container.register("X", lambda: 1)
        container.get("X")

        assert not container.is_resolved("X")

    def test_singleton_invoked_at_most_once(self, container):
        factory = Mock(side_effect=lambda: object())
        container.register_singleton("X", factory)

        results = [container.get("X") for _ in range(10)]

        assert factory.call_count == 1
        assert all(result is results[0] for result in results)
        assert container.is_resolved("X")

    def test_singleton_ignores_later_arguments(self, container):
        container.register_singleton("X", lambda *args: list(args))

        first = container.get("X", ["a", 1])
        second = container.get("X", ["b", 2])

        assert first == ["a", 1]
        assert second is first

    def test_counter_singleton_keeps_mutations(self, container):
        container.register_singleton("Counter", Counter)

        counter = container.get("Counter")
        assert counter.n == 0
        counter.increment()
        counter.increment()

        assert container.get("Counter") is counter
        assert container.get("Counter").n == 2

    def test_overwrite_resets_resolution(self, container):
        container.register_singleton("X", lambda: "f1")
        assert container.get("X") == "f1"

        container.register_singleton("X", lambda: "f2")

        assert not container.is_resolved("X")
        assert container.get("X") == "f2"

    def test_singleton_resolving_to_none_is_not_rerun(self, container):
        factory = Mock(return_value=None)
        container.register_singleton("X", factory)

        assert container.get("X") is None
        assert container.get("X") is None
        assert factory.call_count == 1

    def test_factory_may_resolve_other_bindings(self, container):
        container.register_singleton("Settings", lambda: {"level": "debug"})
        container.register_singleton("Logger", lambda: ("logger", container.get("Settings")["level"]))

        assert container.get("Logger") == ("logger", "debug")

    def test_factory_may_resolve_itself_as_transient(self, container):
        container.register("Fib", lambda n: n if n < 2 else container.get("Fib", [n - 1]) + container.get("Fib", [n - 2]))

        assert container.get("Fib", [10]) == 55


class TestFactoryErrors:
    """Test propagation of factory failures."""

    @pytest.fixture
    def container(self):
        return Container()

    def test_transient_error_propagates(self, container):
        error = ValueError("boom")
        container.register("X", Mock(side_effect=error))

        with pytest.raises(ValueError) as exc_info:
            container.get("X")
        assert exc_info.value is error

    def test_signature_mismatch_surfaces_on_get(self, container):
        container.register("Adder", lambda a, b: a + b)

        with pytest.raises(TypeError):
            container.get("Adder", [1])

    def test_failed_singleton_stays_unresolved(self, container):
        factory = Mock(side_effect=[RuntimeError("unavailable"), "connected"])
        container.register_singleton("Database", factory)

        with pytest.raises(RuntimeError):
            container.get("Database")
        assert not container.is_resolved("Database")

        assert container.get("Database") == "connected"
        assert container.get("Database") == "connected"
        assert factory.call_count == 2

    def test_self_resolving_singleton_raises_recursion_error(self, container):
        container.register_singleton("Loop", lambda: container.get("Loop"))

        with pytest.raises(RecursionError):
            container.get("Loop")
        assert not container.is_resolved("Loop")

    def test_singleton_cycle_raises_recursion_error(self, container):
        container.register_singleton("A", lambda: ("a", container.get("B")))
        container.register_singleton("B", lambda: ("b", container.get("A")))

        with pytest.raises(RecursionError):
            container.get("A")
        assert not container.is_resolved("A")
        assert not container.is_resolved("B")

        container.register_singleton("B", lambda: "b")
        assert container.get("A") == ("a", "b")


class TestCallShorthand:
    """Test calling bindings by name on the container."""

    @pytest.fixture
    def container(self):
        return Container()

    def test_shorthand_forwards_arguments(self, container):
        container.register("Adder", lambda a, b: a + b)

        assert container.Adder(2, 3) == 5
        assert container.Adder(2, 3) == container.get("Adder", [2, 3])

    def test_shorthand_resolves_singleton(self, container):
        container.register_singleton("Router", object)

        assert container.Router() is container.get("Router")

    def test_shorthand_for_unregistered_name(self, container):
        assert container.Missing() is None

    def test_resolve_is_variadic_get(self, container):
        container.register("Join", lambda *parts: "-".join(parts))

        assert container.resolve("Join", "a", "b") == "a-b"

    def test_private_names_are_not_bindings(self, container):
        with pytest.raises(AttributeError):
            container._missing

    def test_methods_take_precedence(self, container):
        container.register("get", lambda: "binding")

        assert container.get("get") == "binding"


class TestConcurrency:
    """Test the container under concurrent access."""

    def test_singleton_factory_runs_once_across_threads(self):
        container = Container()
        calls = []
        lock = threading.Lock()

        def factory():
            with lock:
                calls.append(1)
            time.sleep(0.05)
            return object()

        container.register_singleton("Shared", factory)

        with ThreadPoolExecutor(max_workers=16) as executor:
            results = list(executor.map(lambda _: container.get("Shared"), range(64)))

        assert len(calls) == 1
        assert all(result is results[0] for result in results)

    def test_slow_singleton_does_not_block_other_bindings(self):
        container = Container()
        started = threading.Event()
        release = threading.Event()

        def slow():
            started.set()
            release.wait(5)
            return "slow"

        container.register_singleton("Slow", slow)
        container.register_singleton("Fast", lambda: "fast")

        with ThreadPoolExecutor(max_workers=2) as executor:
            slow_future = executor.submit(container.get, "Slow")
            assert started.wait(5)
            assert container.get("Fast") == "fast"
            container.register("Other", lambda: "other")
            assert container.get("Other") == "other"
            release.set()
            assert slow_future.result(5) == "slow"

    def test_transient_calls_run_concurrently(self):
        container = Container()
        barrier = threading.Barrier(4, timeout=5)
        container.register("Worker", lambda i: (barrier.wait(), i)[1])

        with ThreadPoolExecutor(max_workers=4) as executor:
            results = list(executor.map(lambda i: container.get("Worker", [i]), range(4)))

        assert results == [0, 1, 2, 3]

    def test_overwrite_during_resolution_keeps_in_flight_value(self):
        container = Container()
        started = threading.Event()
        release = threading.Event()

        def old_factory():
            started.set()
            release.wait(5)
            return "old"

        container.register_singleton("X", old_factory)

        with ThreadPoolExecutor(max_workers=1) as executor:
            in_flight = executor.submit(container.get, "X")
            assert started.wait(5)
            container.register_singleton("X", lambda: "new")
            release.set()
            assert in_flight.result(5) == "old"

        assert container.get("X") == "new"
        assert container.get("X") == "new"

    def test_unregister_during_resolution(self):
        container = Container()
        started = threading.Event()
        release = threading.Event()
        factory = Mock(side_effect=lambda: (started.set(), release.wait(5), "value")[2])
        container.register_singleton("X", factory)

        with ThreadPoolExecutor(max_workers=1) as executor:
            in_flight = executor.submit(container.get, "X")
            assert started.wait(5)
            container.unregister("X")
            release.set()
            assert in_flight.result(5) == "value"

        assert not container.is_registered("X")
        assert container.get("X") is None
        assert factory.call_count == 1


class TestGlobalContainer:
    """Test the process-wide container."""

    def test_get_container_returns_same_instance(self):
        assert get_container() is get_container()

    def test_reset_container(self):
        original = get_container()
        try:
            original.register("Temp", lambda: 1)
            fresh = reset_container()

            assert fresh is get_container()
            assert fresh is not original
            assert not fresh.is_registered("Temp")
        finally:
            original.unregister("Temp")

    def test_binding_kind_values(self):
        assert BindingKind.TRANSIENT.value == "transient"
        assert BindingKind.SINGLETON.value == "singleton"

    def test_submodule_is_not_shadowed_by_instance(self):
        import di
        import di.container as container_module

        assert isinstance(container_module, types.ModuleType)
        assert di.container is container_module

    def test_package_helpers_follow_reset(self):
        import di
        import di.container as container_module

        fresh = container_module.reset_container()

        assert isinstance(fresh, Container)
        assert di.get_container() is fresh
        assert container_module.get_container() is fresh
