"""Configuration loader with validation and state machine."""

import time
from collections.abc import Mapping

import structlog

from src.config.constants import COMPONENT_CONFIG
from src.config.effective import Config
from src.config.errors import ConfigError
from src.config.metrics import ConfigMetrics
from src.config.state_machine import ConfigState, ConfigStateMachine
from src.observability.logging import get_logger


class ConfigLoader:
    """Loads and validates the service configuration from the environment.

    Implements a state machine for configuration loading:
    UNINITIALIZED -> LOADING -> READY | FAILED

    A loader performs a single attempt; both outcomes are terminal.
    """

    def __init__(self, environ: Mapping[str, str] | None = None) -> None:
        """Initialize the loader.

        Args:
            environ: Mapping to read from (default: ``os.environ``).
        """
        self._environ = environ
        self._state_machine = ConfigStateMachine()
        self._error: ConfigError | None = None
        self._loaded_sections: list[str] = []
        self._load_duration_ms: float = 0

    @property
    def state(self) -> ConfigState:
        """Get the current loader state."""
        return self._state_machine.state

    @property
    def error(self) -> ConfigError | None:
        """Get the error that failed the load, if any."""
        return self._error

    @property
    def loaded_sections(self) -> list[str]:
        """Get the names of sections resolved so far."""
        return self._loaded_sections.copy()

    @property
    def load_duration_ms(self) -> float:
        """Get load duration in milliseconds."""
        return self._load_duration_ms

    def load(self) -> Config:
        """Resolve every configuration section.

        Sections are resolved in ``Config.SECTIONS`` order and the first
        failure stops the attempt.

        Returns:
            Validated configuration.

        Raises:
            ConfigError: If a section fails to resolve.
            ConfigStateError: If called more than once.
        """
        self._state_machine.transition(ConfigState.LOADING)
        metrics = ConfigMetrics.get_instance()
        metrics.record_attempt()
        start_time = time.perf_counter()

        log = get_logger(__name__).bind(component=COMPONENT_CONFIG, phase="LOADING")
        log.debug(
            "loading_config_sections",
            sections=[name for name, _ in Config.SECTIONS],
        )

        sections: dict[str, object] = {}
        try:
            for name, section in Config.resolve_sections(self._environ):
                sections[name] = section
                self._loaded_sections.append(name)
                log.debug("config_section_loaded", section=name)
        except ConfigError as e:
            self._record_duration(start_time, metrics)
            self._handle_config_error(e, log, metrics)
            raise

        config = Config.model_validate(sections)
        self._record_duration(start_time, metrics)
        self._state_machine.transition(ConfigState.READY)

        log.info(
            "config_ready",
            phase="READY",
            config_load_duration_ms=self._load_duration_ms,
            **config.summary(),
        )
        return config

    def _record_duration(self, start_time: float, metrics: ConfigMetrics) -> None:
        self._load_duration_ms = (time.perf_counter() - start_time) * 1000
        metrics.record_duration(self._load_duration_ms)

    def _handle_config_error(
        self,
        error: ConfigError,
        log: structlog.stdlib.BoundLogger,
        metrics: ConfigMetrics,
    ) -> None:
        """Handle a section failure."""
        self._state_machine.transition(ConfigState.FAILED)
        self._error = error
        metrics.record_failure(error.kind)

        log.error(
            "config_load_failed",
            phase="FAILED",
            error_kind=error.kind.value,
            variable=error.variable,
            error=error.message,
            loaded_sections=self._loaded_sections,
        )

    def get_load_summary(self) -> dict[str, object]:
        """Get a summary of the load attempt.

        Returns:
            Dictionary with load summary.
        """
        return {
            "state": self._state_machine.state.name,
            "loaded_sections": self._loaded_sections,
            "error": self._error.to_dict() if self._error else None,
            "load_duration_ms": self._load_duration_ms,
        }
