"""Tests for the EventEmitter host mixin."""

import pytest

from evented import EventEmitter
from evented import EventEmitterInterface
from evented import ListenerRegistry
from evented import UnknownEventError
from evented.config import EmitterConfig


class Clock(EventEmitter):
    emitted_events = ("tick", 42)

    def __init__(self, name="clock", **kwargs):
        super().__init__(**kwargs)
        self.name = name
        self.now = 0

    def advance(self):
        self.now += 1
        return self._fire("tick", self.now)

    def enable_alarm(self):
        return self._declare("alarm")

    def ring(self):
        return self._fire("alarm")


class Base:
    def __init__(self, label):
        self.label = label


class Labelled(EventEmitter, Base):
    emitted_events = ("renamed",)


def test_emitted_events_declared_on_construction():
    clock = Clock()
    assert clock.get_event_list() == {"tick", 42}
    assert clock.emits("tick")
    assert clock.emits(42)
    assert not clock.emits("alarm")


def test_instances_have_separate_registries():
    first, second = Clock(), Clock()
    first.on("tick", lambda now: None)
    assert first.get_listener_count("tick") == 1
    assert second.get_listener_count("tick") == 0


def test_public_methods_chain_to_host():
    clock = Clock()

    def listener(now):
        pass

    assert clock.on("tick", listener) is clock
    assert clock.once(42, listener) is clock
    assert clock.add_listener("tick", listener, once=True) is clock
    assert clock.off("tick", listener) is clock
    assert clock.remove_listener(42, listener) is clock
    assert clock.remove_all_listeners() is clock


def test_host_fires_to_listeners_in_order():
    clock = Clock()
    seen = []
    clock.on("tick", lambda now: seen.append(("a", now)))
    clock.on("tick", lambda now: seen.append(("b", now)))

    assert clock.advance() is True
    assert seen == [("a", 1), ("b", 1)]
    assert clock.get_listener_count("tick") == 2


def test_fire_without_listeners_returns_false():
    assert Clock().advance() is False


def test_host_declares_events_later():
    clock = Clock()
    with pytest.raises(UnknownEventError):
        clock.on("alarm", print)

    assert clock.enable_alarm() is clock
    rang = []
    clock.once("alarm", lambda: rang.append(True))
    clock.ring()
    clock.ring()
    assert rang == [True]


def test_firing_undeclared_event_is_an_error():
    clock = Clock()
    with pytest.raises(UnknownEventError):
        clock.ring()


def test_tick_scenario_with_once_listener():
    clock = Clock()
    counter = {"n": 0}

    def count(_now):
        counter["n"] += 1

    clock.once("tick", count)
    clock.advance()
    assert clock.get_listener_count("tick") == 0
    clock.advance()
    clock.advance()
    assert counter["n"] == 1


def test_get_listeners_is_a_copy():
    clock = Clock()
    clock.on("tick", print)
    listeners = clock.get_listeners("tick")
    clock.remove_all_listeners("tick")
    assert listeners == [print]


def test_satisfies_interface():
    assert isinstance(Clock(), EventEmitterInterface)
    assert isinstance(ListenerRegistry(), EventEmitterInterface)
    assert not isinstance(object(), EventEmitterInterface)


def test_cooperative_init():
    item = Labelled("x")
    assert item.label == "x"
    assert item.emits("renamed")


def test_event_config_is_passed_to_registry():
    clock = Clock(event_config=EmitterConfig(isolate_listener_errors=True))
    seen = []

    def bad(_now):
        msg = "boom"
        raise RuntimeError(msg)

    clock.on("tick", bad).on("tick", seen.append)
    assert clock.advance() is True
    assert seen == [1]


def test_listener_errors_propagate_by_default():
    clock = Clock()
    seen = []

    def bad(_now):
        msg = "boom"
        raise RuntimeError(msg)

    clock.on("tick", bad).on("tick", seen.append)
    with pytest.raises(RuntimeError, match="boom"):
        clock.advance()
    assert seen == []
