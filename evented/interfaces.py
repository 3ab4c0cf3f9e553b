"""Public contract of an event emitting object."""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING
from typing import Any
from typing import Protocol
from typing import Union
from typing import runtime_checkable

if TYPE_CHECKING:
    from typing_extensions import Self

EventId = Union[str, int]
Listener = Callable[..., Any]


@runtime_checkable
class EventEmitterInterface(Protocol):
    """Operations any caller may use on an object that emits events.

    Declaring events and firing them are left to the object itself and are
    not part of this contract.
    """

    def add_listener(self, event: EventId, listener: Listener, once: bool = False) -> Self:
        """Add ``listener`` to ``event``, optionally for the next emission only.

        Raises:
            UnknownEventError: If the event was never declared.
        """
        ...

    def on(self, event: EventId, listener: Listener) -> Self:
        """Alias of ``add_listener(event, listener)``."""
        ...

    def once(self, event: EventId, listener: Listener) -> Self:
        """Alias of ``add_listener(event, listener, once=True)``."""
        ...

    def remove_listener(self, event: EventId, listener: Listener) -> Self:
        """Remove ``listener`` from ``event``; a listener not present is ignored."""
        ...

    def off(self, event: EventId, listener: Listener) -> Self:
        """Alias of ``remove_listener``."""
        ...

    def remove_all_listeners(self, event: EventId | None = None) -> Self:
        """Remove the listeners of ``event``, or of every event when omitted."""
        ...

    def get_listeners(self, event: EventId) -> list[Listener]: ...

    def get_listener_count(self, event: EventId) -> int: ...

    def emits(self, event: object) -> bool:
        """Whether ``event`` is a declared event identifier. Never raises."""
        ...

    def get_event_list(self) -> set[EventId]: ...
