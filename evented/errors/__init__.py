"""Error types raised by evented."""

from evented.errors.evented_errors import ConfigurationError
from evented.errors.evented_errors import EventedError
from evented.errors.evented_errors import ListenerError
from evented.errors.evented_errors import UnknownEventError

__all__ = [
    "ConfigurationError",
    "EventedError",
    "ListenerError",
    "UnknownEventError",
]
