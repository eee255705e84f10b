"""Downstream service endpoint configurations."""

from typing import ClassVar

from src.config.constants import (
    ENV_AUTH_SERVICE_HOST,
    ENV_AUTH_SERVICE_PORT,
    ENV_EVENTS_MANAGER_HOST,
    ENV_EVENTS_MANAGER_PORT,
)
from src.config.schemas.base import EndpointConfig


class EventsManagerConfig(EndpointConfig):
    """Events-manager client endpoint."""

    host_var: ClassVar[str] = ENV_EVENTS_MANAGER_HOST
    port_var: ClassVar[str] = ENV_EVENTS_MANAGER_PORT


class AuthServiceConfig(EndpointConfig):
    """Auth-service client endpoint."""

    host_var: ClassVar[str] = ENV_AUTH_SERVICE_HOST
    port_var: ClassVar[str] = ENV_AUTH_SERVICE_PORT
