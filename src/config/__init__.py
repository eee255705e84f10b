"""Configuration loading and validation module."""

from src.config.bootstrap import load_config_or_exit
from src.config.cell import ConfigCell, get_config, reset_config
from src.config.effective import Config
from src.config.errors import ConfigError, ErrorKind
from src.config.loader import ConfigLoader
from src.config.schemas import (
    AuthServiceConfig,
    EventsManagerConfig,
    ServerConfig,
    SocketAddress,
)
from src.config.state_machine import ConfigState, ConfigStateError


__all__ = [
    "AuthServiceConfig",
    "Config",
    "ConfigCell",
    "ConfigError",
    "ConfigLoader",
    "ConfigState",
    "ConfigStateError",
    "ErrorKind",
    "EventsManagerConfig",
    "ServerConfig",
    "SocketAddress",
    "get_config",
    "load_config_or_exit",
    "reset_config",
]
