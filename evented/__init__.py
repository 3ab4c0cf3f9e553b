"""Named-event publish/subscribe for Python objects."""

from evented.config import EmitterConfig
from evented.emitter import EventEmitter
from evented.errors import ConfigurationError
from evented.errors import EventedError
from evented.errors import ListenerError
from evented.errors import UnknownEventError
from evented.interfaces import EventEmitterInterface
from evented.interfaces import EventId
from evented.interfaces import Listener
from evented.keys import ListenerKey
from evented.keys import listener_key
from evented.registry import ListenerRegistry

__version__ = "0.1.0"

__all__ = [
    "ConfigurationError",
    "EmitterConfig",
    "EventEmitter",
    "EventEmitterInterface",
    "EventId",
    "EventedError",
    "Listener",
    "ListenerError",
    "ListenerKey",
    "ListenerRegistry",
    "UnknownEventError",
    "listener_key",
]
