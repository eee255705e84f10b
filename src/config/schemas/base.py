"""Base schema types for configuration."""

from collections.abc import Mapping
from typing import Annotated, ClassVar, NamedTuple, Self

from pydantic import BaseModel, ConfigDict, Field

from src.config.constants import CONN_STR_SCHEME, PORT_MAX, PORT_MIN
from src.config.env import read_env_var, read_port


Port = Annotated[int, Field(ge=PORT_MIN, le=PORT_MAX)]


class StrictBaseModel(BaseModel):
    """Base model with strict, immutable defaults."""

    model_config = ConfigDict(frozen=True, extra="forbid")


class SocketAddress(NamedTuple):
    """Resolved network address, usable directly with ``socket.bind``."""

    host: str
    port: int

    def __str__(self) -> str:
        return f"{self.host}:{self.port}"


class EndpointConfig(StrictBaseModel):
    """Downstream service endpoint resolved from a host/port variable pair.

    Subclasses name the two environment variables they read.

    Attributes:
        host: Host name or address of the service. Not checked for emptiness.
        port: TCP port of the service.
    """

    host_var: ClassVar[str]
    port_var: ClassVar[str]

    host: str
    port: Port

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> Self:
        """Build the endpoint from the environment.

        The host variable is read first, then the port variable, then the
        port is parsed. The first failure propagates and no instance is built.

        Args:
            environ: Mapping to read from (default: ``os.environ``).

        Returns:
            Fully populated endpoint configuration.

        Raises:
            ConfigError: If a variable is missing or the port is malformed.
        """
        host = read_env_var(cls.host_var, environ)
        port = read_port(cls.port_var, environ)
        return cls(host=host, port=port)

    def get_conn_str(self) -> str:
        """Get the connection string downstream clients should use."""
        return f"{CONN_STR_SCHEME}://{self.host}:{self.port}"
