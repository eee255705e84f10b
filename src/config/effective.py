"""Aggregate configuration combining all sub-configurations."""

from collections.abc import Iterator, Mapping
from typing import ClassVar, Self

from src.config.constants import (
    SECTION_AUTH_SERVICE,
    SECTION_EVENTS_MANAGER,
    SECTION_SERVER,
)
from src.config.schemas import (
    AuthServiceConfig,
    EndpointConfig,
    EventsManagerConfig,
    ServerConfig,
    StrictBaseModel,
)


SectionType = type[ServerConfig] | type[EndpointConfig]
Section = ServerConfig | EndpointConfig


class Config(StrictBaseModel):
    """Immutable configuration for the whole service.

    If an instance exists, all three sub-configurations are valid. Once
    created it cannot be modified.

    Attributes:
        server: Inbound server binding.
        events_manager: Events-manager client endpoint.
        auth_service: Auth-service client endpoint.
    """

    # Build order; field name and the type that resolves it
    SECTIONS: ClassVar[tuple[tuple[str, SectionType], ...]] = (
        (SECTION_SERVER, ServerConfig),
        (SECTION_EVENTS_MANAGER, EventsManagerConfig),
        (SECTION_AUTH_SERVICE, AuthServiceConfig),
    )

    server: ServerConfig
    events_manager: EventsManagerConfig
    auth_service: AuthServiceConfig

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> Self:
        """Build the configuration from the environment.

        Sections are built in a fixed order (server, events manager, auth
        service). The first failure propagates unchanged and no further
        variables are read.

        Args:
            environ: Mapping to read from (default: ``os.environ``).

        Returns:
            Fully validated configuration.

        Raises:
            ConfigError: If any section fails to resolve.
        """
        return cls.model_validate(dict(cls.resolve_sections(environ)))

    @classmethod
    def resolve_sections(
        cls, environ: Mapping[str, str] | None = None
    ) -> Iterator[tuple[str, Section]]:
        """Resolve sections lazily, one at a time, in build order.

        A section is only read from the environment when the iterator is
        advanced to it, so a failure stops every later lookup.

        Args:
            environ: Mapping to read from (default: ``os.environ``).

        Yields:
            Tuples of (field name, resolved section).

        Raises:
            ConfigError: If a section fails to resolve.
        """
        for name, section_type in cls.SECTIONS:
            yield name, section_type.from_env(environ)

    def get_server_config(self) -> ServerConfig:
        """Get the inbound server binding."""
        return self.server

    def get_events_manager_config(self) -> EventsManagerConfig:
        """Get the events-manager endpoint."""
        return self.events_manager

    def get_auth_service_config(self) -> AuthServiceConfig:
        """Get the auth-service endpoint."""
        return self.auth_service

    def summary(self) -> dict[str, object]:
        """Get a summary of the resolved configuration.

        Returns:
            Dictionary with the bind address and connection strings.
        """
        return {
            "server_address": str(self.server.get_socket_address()),
            "events_manager_url": self.events_manager.get_conn_str(),
            "auth_service_url": self.auth_service.get_conn_str(),
        }
