"""Constants for the configuration module."""

from ipaddress import IPv4Address
from typing import Final


# Environment variables consumed from the deployment environment
ENV_EVENTS_MANAGER_HOST: Final = "EVENTS_MANAGER_HOST"
ENV_EVENTS_MANAGER_PORT: Final = "EVENTS_MANAGER_PORT"
ENV_AUTH_SERVICE_HOST: Final = "AUTH_SERVICE_HOST"
ENV_AUTH_SERVICE_PORT: Final = "AUTH_SERVICE_PORT"

# Fixed inbound server binding
SERVER_HOST: Final = IPv4Address("0.0.0.0")  # noqa: S104
SERVER_PORT: Final = 80

PORT_MIN: Final = 0
PORT_MAX: Final = 65535

# Scheme used for downstream connection strings
CONN_STR_SCHEME: Final = "http"

# Log component names
COMPONENT_CONFIG = "config"
COMPONENT_CLI = "cli"

# Section identifiers, in load order
SECTION_SERVER = "server"
SECTION_EVENTS_MANAGER = "events_manager"
SECTION_AUTH_SERVICE = "auth_service"
