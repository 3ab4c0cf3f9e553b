"""Mixin that gives a host object named events.

Example::

    class Clock(EventEmitter):
        emitted_events = ("tick",)

        def advance(self) -> None:
            self._fire("tick", self.now)

    clock = Clock()
    clock.on("tick", print)

Callers use the public listener methods; only the host declares events and
fires them, through :meth:`EventEmitter._declare` and :meth:`EventEmitter._fire`.
"""

from __future__ import annotations

from typing import TYPE_CHECKING
from typing import Any
from typing import ClassVar

from evented.registry import ListenerRegistry

if TYPE_CHECKING:
    from typing_extensions import Self

    from evented.config import EmitterConfig
    from evented.interfaces import EventId
    from evented.interfaces import Listener


class EventEmitter:
    """Implements :class:`evented.interfaces.EventEmitterInterface` for a host.

    Listener state lives in a :class:`ListenerRegistry` owned by each
    instance. Chaining methods return the host rather than the registry.
    """

    # Declared for every instance on construction
    emitted_events: ClassVar[tuple[EventId, ...]] = ()

    def __init__(self, *args: Any, event_config: EmitterConfig | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self._event_registry = ListenerRegistry(event_config)
        for event in self.emitted_events:
            self._event_registry.declare(event)

    def _declare(self, event: EventId) -> Self:
        self._event_registry.declare(event)
        return self

    def _fire(self, event: EventId, *args: Any, **kwargs: Any) -> bool:
        return self._event_registry.fire(event, *args, **kwargs)

    def add_listener(self, event: EventId, listener: Listener, once: bool = False) -> Self:
        self._event_registry.add_listener(event, listener, once)
        return self

    def on(self, event: EventId, listener: Listener) -> Self:
        return self.add_listener(event, listener, False)

    def once(self, event: EventId, listener: Listener) -> Self:
        return self.add_listener(event, listener, True)

    def remove_listener(self, event: EventId, listener: Listener) -> Self:
        self._event_registry.remove_listener(event, listener)
        return self

    def off(self, event: EventId, listener: Listener) -> Self:
        return self.remove_listener(event, listener)

    def remove_all_listeners(self, event: EventId | None = None) -> Self:
        self._event_registry.remove_all_listeners(event)
        return self

    def get_listeners(self, event: EventId) -> list[Listener]:
        return self._event_registry.get_listeners(event)

    def get_listener_count(self, event: EventId) -> int:
        return self._event_registry.get_listener_count(event)

    def emits(self, event: object) -> bool:
        return self._event_registry.emits(event)

    def get_event_list(self) -> set[EventId]:
        return self._event_registry.get_event_list()
