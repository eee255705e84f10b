"""Inbound server binding configuration."""

from collections.abc import Mapping
from ipaddress import IPv4Address
from typing import Self

from src.config.constants import SERVER_HOST, SERVER_PORT
from src.config.schemas.base import Port, SocketAddress, StrictBaseModel


class ServerConfig(StrictBaseModel):
    """Address the service listens on.

    The binding is fixed to all interfaces on port 80; no environment
    variables are consulted.

    Attributes:
        host: IPv4 address to bind.
        port: TCP port to bind.
    """

    host: IPv4Address = SERVER_HOST
    port: Port = SERVER_PORT

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> Self:  # noqa: ARG003
        """Build the server binding. Never fails."""
        return cls()

    def get_socket_address(self) -> SocketAddress:
        """Combine host and port into a bindable address."""
        return SocketAddress(str(self.host), self.port)
