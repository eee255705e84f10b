"""Configuration schema definitions."""

from src.config.schemas.base import EndpointConfig, SocketAddress, StrictBaseModel
from src.config.schemas.endpoints import AuthServiceConfig, EventsManagerConfig
from src.config.schemas.server import ServerConfig


__all__ = [
    "AuthServiceConfig",
    "EndpointConfig",
    "EventsManagerConfig",
    "ServerConfig",
    "SocketAddress",
    "StrictBaseModel",
]
