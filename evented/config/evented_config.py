"""Dispatch configuration for evented listener registries.

The defaults keep dispatch strict: a listener exception propagates to whoever
fired the event and the remaining listeners are skipped. Hosts that prefer to
keep dispatching can switch on ``isolate_listener_errors``.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Literal

from evented.errors import ConfigurationError

LogLevelName = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]

NAME_TO_LEVEL: dict[str, int] = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}


@dataclass(frozen=True)
class EmitterConfig:
    """Settings read by :class:`evented.registry.ListenerRegistry` at dispatch time."""

    # Catch, log and continue instead of propagating listener exceptions
    isolate_listener_errors: bool = False
    listener_error_log_level: LogLevelName = "ERROR"

    # Log every listener invocation at DEBUG
    trace_dispatch: bool = False

    @property
    def log_level_number(self) -> int:
        return NAME_TO_LEVEL[self.listener_error_log_level]

    def validate(self) -> None:
        """Validate configuration and raise errors for invalid setups."""
        for key in ("isolate_listener_errors", "trace_dispatch"):
            value = getattr(self, key)
            if not isinstance(value, bool):
                raise ConfigurationError(
                    f"{key} must be a bool",
                    config_key=key,
                    details={"value": value},
                )

        if self.listener_error_log_level not in NAME_TO_LEVEL:
            raise ConfigurationError(
                f"Unknown log level {self.listener_error_log_level!r}",
                config_key="listener_error_log_level",
                details={"allowed": sorted(NAME_TO_LEVEL)},
            )


# Default configuration instance
DEFAULT_CONFIG = EmitterConfig()
