"""Listener registry and synchronous dispatch.

:class:`ListenerRegistry` maps declared event identifiers to an ordered set of
listeners. Dispatch is synchronous and runs on the caller's stack; listeners
are called in the order they were added.

By default an exception raised by a listener propagates out of :meth:`fire`
and the listeners after it are not called. Set
``EmitterConfig.isolate_listener_errors`` to log the failure and carry on
instead.
"""

from __future__ import annotations

import functools
import logging
from typing import TYPE_CHECKING
from typing import Any

from evented.config import get_config
from evented.errors import ListenerError
from evented.errors import UnknownEventError
from evented.keys import listener_key

if TYPE_CHECKING:
    from typing_extensions import Self

    from evented.config import EmitterConfig
    from evented.interfaces import EventId
    from evented.interfaces import Listener
    from evented.keys import ListenerKey

logger = logging.getLogger(__name__)


class ListenerRegistry:
    """Ordered listener sets keyed by event identifier.

    Events must be declared with :meth:`declare` before listeners can be
    attached or the event fired. Once declared, an event stays known for the
    lifetime of the registry.

    Args:
        config: Dispatch settings. When omitted the process-wide configuration
            from :func:`evented.config.get_config` is read on every dispatch.
    """

    def __init__(self, config: EmitterConfig | None = None) -> None:
        self._events: dict[EventId, dict[ListenerKey, Listener]] = {}
        self._config = config

    def __repr__(self) -> str:
        counts = {event: len(listeners) for event, listeners in self._events.items()}
        return f"{self.__class__.__name__}({counts!r})"

    def __contains__(self, event: object) -> bool:
        return self.emits(event)

    def __len__(self) -> int:
        return len(self._events)

    @property
    def config(self) -> EmitterConfig:
        return self._config if self._config is not None else get_config()

    def _listeners_for(self, event: EventId) -> dict[ListenerKey, Listener]:
        try:
            return self._events[event]
        except KeyError:
            raise UnknownEventError(event) from None

    def declare(self, event: EventId) -> Self:
        """Make ``event`` known. Declaring an existing event does nothing."""
        if not isinstance(event, (str, int)):
            msg = f"event identifier must be str or int, not {type(event).__name__}"
            raise TypeError(msg)
        if event not in self._events:
            self._events[event] = {}
            logger.debug("Declared event %r", event)
        return self

    def add_listener(self, event: EventId, listener: Listener, once: bool = False) -> Self:
        """Add ``listener`` to the end of the listeners for ``event``.

        Adding a listener that is already registered for the event leaves its
        position and wrapping untouched. With ``once`` the listener is removed
        just before its first invocation.

        Raises:
            UnknownEventError: If ``event`` was never declared.
            TypeError: If ``listener`` is not callable.
        """
        listeners = self._listeners_for(event)
        key = listener_key(listener)
        if key in listeners:
            logger.debug("Listener %s already registered for %r", key, event)
            return self

        listeners[key] = self._wrap_once(event, key, listener) if once else listener
        logger.debug("Added %slistener %s to %r", "one-shot " if once else "", key, event)
        return self

    def on(self, event: EventId, listener: Listener) -> Self:
        return self.add_listener(event, listener, False)

    def once(self, event: EventId, listener: Listener) -> Self:
        return self.add_listener(event, listener, True)

    def _wrap_once(self, event: EventId, key: ListenerKey, listener: Listener) -> Listener:
        fired = False

        @functools.wraps(listener)
        def once_listener(*args: Any, **kwargs: Any) -> Any:
            nonlocal fired
            # A re-entrant fire can deliver this wrapper from two snapshots
            if fired:
                return None
            fired = True
            listeners = self._events[event]
            if listeners.get(key) is once_listener:
                del listeners[key]
                logger.debug("Removed one-shot listener %s from %r", key, event)
            return listener(*args, **kwargs)

        return once_listener

    def remove_listener(self, event: EventId, listener: Listener) -> Self:
        """Remove ``listener`` from ``event``. Unregistered listeners are ignored.

        Raises:
            UnknownEventError: If ``event`` was never declared.
        """
        listeners = self._listeners_for(event)
        key = listener_key(listener)
        if listeners.pop(key, None) is not None:
            logger.debug("Removed listener %s from %r", key, event)
        return self

    def off(self, event: EventId, listener: Listener) -> Self:
        return self.remove_listener(event, listener)

    def remove_all_listeners(self, event: EventId | None = None) -> Self:
        """Clear the listeners of ``event``, or of every event when ``None``.

        Events stay declared either way.

        Raises:
            UnknownEventError: If ``event`` is given and was never declared.
        """
        if event is None:
            for listeners in self._events.values():
                listeners.clear()
            logger.debug("Removed all listeners from %d event(s)", len(self._events))
            return self

        self._listeners_for(event).clear()
        logger.debug("Removed all listeners from %r", event)
        return self

    def get_listeners(self, event: EventId) -> list[Listener]:
        """Return a copy of the listeners for ``event`` in dispatch order.

        One-shot listeners appear as their wrapper; the original callable is
        available as ``__wrapped__``.
        """
        return list(self._listeners_for(event).values())

    def get_listener_count(self, event: EventId) -> int:
        return len(self._listeners_for(event))

    def emits(self, event: object) -> bool:
        return isinstance(event, (str, int)) and event in self._events

    def get_event_list(self) -> set[EventId]:
        return set(self._events)

    def fire(self, event: EventId, *args: Any, **kwargs: Any) -> bool:
        """Call every listener of ``event`` with the given arguments.

        Iterates over the listeners registered when the call starts; listeners
        added or removed while dispatching take effect from the next call.

        Returns:
            ``False`` if the event has no listeners, ``True`` otherwise.

        Raises:
            UnknownEventError: If ``event`` was never declared.
        """
        listeners = self._listeners_for(event)
        if not listeners:
            logger.debug("Fired %r with no listeners", event)
            return False

        snapshot = list(listeners.items())
        config = self.config
        logger.debug("Firing %r to %d listener(s)", event, len(snapshot))

        for key, listener in snapshot:
            if config.trace_dispatch:
                logger.debug("Calling listener %s for %r", key, event)
            if not config.isolate_listener_errors:
                listener(*args, **kwargs)
                continue
            try:
                listener(*args, **kwargs)
            except Exception as e:
                error = ListenerError(
                    f"Listener {key} failed while handling {event!r}",
                    event=event,
                    listener_key=key,
                    cause=e,
                )
                logger.log(config.log_level_number, str(error), exc_info=e)

        return True
