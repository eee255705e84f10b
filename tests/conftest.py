"""Shared fixtures for configuration tests."""

from collections.abc import Iterator

import pytest
import structlog

from src.config.cell import reset_config
from src.config.constants import (
    ENV_AUTH_SERVICE_HOST,
    ENV_AUTH_SERVICE_PORT,
    ENV_EVENTS_MANAGER_HOST,
    ENV_EVENTS_MANAGER_PORT,
)
from src.config.metrics import ConfigMetrics


SERVICE_VARIABLES = (
    ENV_EVENTS_MANAGER_HOST,
    ENV_EVENTS_MANAGER_PORT,
    ENV_AUTH_SERVICE_HOST,
    ENV_AUTH_SERVICE_PORT,
)


@pytest.fixture(autouse=True)
def _isolate_process_state() -> Iterator[None]:
    """Give each test a fresh configuration cell and metrics."""
    reset_config()
    ConfigMetrics.reset_instance()
    yield
    reset_config()
    ConfigMetrics.reset_instance()
    structlog.reset_defaults()


@pytest.fixture
def valid_environ() -> dict[str, str]:
    """A complete, valid environment mapping."""
    return {
        ENV_EVENTS_MANAGER_HOST: "events.internal",
        ENV_EVENTS_MANAGER_PORT: "4000",
        ENV_AUTH_SERVICE_HOST: "auth.internal",
        ENV_AUTH_SERVICE_PORT: "5000",
    }


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch) -> pytest.MonkeyPatch:
    """Remove all service variables from the process environment."""
    for name in SERVICE_VARIABLES:
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


@pytest.fixture
def service_env(
    clean_env: pytest.MonkeyPatch, valid_environ: dict[str, str]
) -> pytest.MonkeyPatch:
    """Populate the process environment with valid service variables."""
    for name, value in valid_environ.items():
        clean_env.setenv(name, value)
    return clean_env
