"""Observability module for structured logging."""

from src.observability.logging import (
    bind_service_context,
    clear_service_context,
    configure_logging,
    get_logger,
)


__all__ = [
    "bind_service_context",
    "clear_service_context",
    "configure_logging",
    "get_logger",
]
