"""Configuration management for evented."""

from evented.config.config_manager import ConfigContext
from evented.config.config_manager import config_context
from evented.config.config_manager import get_config
from evented.config.config_manager import reset_config
from evented.config.config_manager import set_config
from evented.config.config_manager import update_config
from evented.config.evented_config import DEFAULT_CONFIG
from evented.config.evented_config import EmitterConfig

__all__ = [
    "DEFAULT_CONFIG",
    "ConfigContext",
    "EmitterConfig",
    "config_context",
    "get_config",
    "reset_config",
    "set_config",
    "update_config",
]
