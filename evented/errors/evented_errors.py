"""Exception hierarchy for evented.

Every error raised by the listener registry derives from :class:`EventedError`
so callers can catch library failures in one place while still matching on the
specific subtype when they need to.
"""

from __future__ import annotations

from typing import TYPE_CHECKING
from typing import Any

if TYPE_CHECKING:
    from evented.keys import ListenerKey


class EventedError(Exception):
    """Base class of every exception raised by the listener registry."""

    def __init__(
        self,
        message: str,
        *,
        error_code: str | None = None,
        details: dict[str, Any] | None = None,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}
        self.cause = cause

    def to_dict(self) -> dict[str, Any]:
        """Return the error code, message and details, e.g. for logging as structured data."""
        return {
            "error": self.error_code,
            "message": self.message,
            "details": self.details,
        }

    def __str__(self) -> str:
        if self.cause:
            return f"{self.message} (caused by: {self.cause!s})"
        return self.message


class UnknownEventError(EventedError, LookupError):
    """Raised when an event identifier is used before it was declared."""

    def __init__(
        self,
        event: object,
        message: str | None = None,
        **kwargs: Any,
    ) -> None:
        details = kwargs.pop("details", {})
        details["event"] = event
        super().__init__(
            message or f"Unknown event {event!r}",
            error_code="UnknownEventError",
            details=details,
            **kwargs,
        )
        self.event = event


class ListenerError(EventedError):
    """Wraps an exception raised by a listener during an isolated dispatch."""

    def __init__(
        self,
        message: str,
        *,
        event: object = None,
        listener_key: ListenerKey | None = None,
        **kwargs: Any,
    ) -> None:
        details = kwargs.pop("details", {})
        if event is not None:
            details["event"] = event
        if listener_key is not None:
            details["listener_key"] = listener_key
        super().__init__(message, error_code="ListenerError", details=details, **kwargs)
        self.event = event
        self.listener_key = listener_key


class ConfigurationError(EventedError):
    """Raised when an ``EmitterConfig`` value fails validation."""

    def __init__(
        self,
        message: str,
        config_key: str | None = None,
        **kwargs: Any,
    ) -> None:
        details = kwargs.pop("details", {})
        if config_key:
            details["config_key"] = config_key
        super().__init__(message, error_code="ConfigurationError", details=details, **kwargs)
        self.config_key = config_key
