"""Process-wide configuration for evented.

Registries created without an explicit :class:`EmitterConfig` read the
configuration held here each time they dispatch, so changes apply to every
such registry immediately.
"""

from __future__ import annotations

import dataclasses
import logging
import threading
from typing import TYPE_CHECKING
from typing import Any

if TYPE_CHECKING:
    import types

from evented.config.evented_config import DEFAULT_CONFIG
from evented.config.evented_config import EmitterConfig

logger = logging.getLogger(__name__)

_FIELD_NAMES = frozenset(f.name for f in dataclasses.fields(EmitterConfig))


class ConfigManager:
    """Thread-safe manager for process-wide configuration state."""

    def __init__(self, default_config: EmitterConfig) -> None:
        self._lock = threading.RLock()
        self._default_config = default_config
        self._current_config = default_config

    def get_config(self) -> EmitterConfig:
        """Get the current configuration in a thread-safe manner."""
        with self._lock:
            return self._current_config

    def set_config(self, config: EmitterConfig) -> None:
        """Validate and install a new configuration."""
        with self._lock:
            config.validate()
            self._current_config = config

    def update_config(self, **kwargs: Any) -> EmitterConfig:
        """Replace selected fields of the current configuration."""
        with self._lock:
            unknown_keys = sorted(set(kwargs) - _FIELD_NAMES)
            if unknown_keys:
                logger.warning("Ignoring unknown config key(s): %s", ", ".join(unknown_keys))

            changes = {k: v for k, v in kwargs.items() if k in _FIELD_NAMES}
            new_config = dataclasses.replace(self._current_config, **changes)
            new_config.validate()
            self._current_config = new_config
            return new_config

    def reset_config(self) -> None:
        """Reset configuration to defaults."""
        with self._lock:
            self._current_config = self._default_config

    def apply_context_changes(self, changes: dict[str, Any]) -> tuple[EmitterConfig, EmitterConfig]:
        """Apply temporary configuration changes atomically.

        Returns:
            Tuple of (original_config, new_config).
        """
        with self._lock:
            original = self._current_config
            new_config = self.update_config(**changes)
            return original, new_config

    def restore_config(self, config: EmitterConfig) -> None:
        """Restore a previously captured configuration."""
        with self._lock:
            self._current_config = config


_config_manager = ConfigManager(DEFAULT_CONFIG)


def get_config() -> EmitterConfig:
    """Return the current process-wide configuration."""
    return _config_manager.get_config()


def set_config(config: EmitterConfig) -> None:
    """Set the process-wide configuration.

    Args:
        config: The new configuration to set

    Raises:
        ConfigurationError: If ``config`` does not validate.
    """
    _config_manager.set_config(config)


def update_config(**kwargs: Any) -> EmitterConfig:
    """Update the process-wide configuration with new values.

    Args:
        **kwargs: ``EmitterConfig`` field values to change. Unknown keys are
            logged and ignored.
    """
    return _config_manager.update_config(**kwargs)


def reset_config() -> None:
    """Reset configuration to defaults."""
    _config_manager.reset_config()


class ConfigContext:
    """Context manager for temporary configuration changes.

    The previous configuration is restored when the block exits, whether or
    not it raised.
    """

    def __init__(self, **kwargs: Any):
        self._manager = _config_manager
        self._changes = kwargs
        self._original_config: EmitterConfig | None = None

    def __enter__(self) -> EmitterConfig:
        self._original_config, new_config = self._manager.apply_context_changes(self._changes)
        return new_config

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: types.TracebackType | None,
    ) -> None:
        if self._original_config is not None:
            self._manager.restore_config(self._original_config)


def config_context(**kwargs: Any) -> ConfigContext:
    """Create a context manager for temporary configuration changes."""
    return ConfigContext(**kwargs)
