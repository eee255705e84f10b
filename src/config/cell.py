"""Process-wide, write-once holder of the service configuration.

The cell builds the configuration on first access and hands the same
immutable instance to every caller afterwards. Components should receive
the ``Config`` as an argument; the cell only serves the process entry point.
"""

from collections.abc import Callable
from threading import Lock

from src.config.constants import COMPONENT_CONFIG
from src.config.effective import Config
from src.config.errors import ConfigError
from src.config.loader import ConfigLoader
from src.config.state_machine import ConfigState, ConfigStateMachine
from src.observability.logging import get_logger


def _load_from_environment() -> Config:
    return ConfigLoader().load()


class ConfigCell:
    """Lazily initialized configuration cell.

    The factory runs at most once, even under concurrent first access.
    Contending threads block until it completes and then observe the same
    outcome: the same ``Config`` instance, or the same exception (normally
    a ``ConfigError``). A failed cell never retries.
    """

    def __init__(self, factory: Callable[[], Config] = _load_from_environment) -> None:
        """Initialize an empty cell.

        Args:
            factory: Builds the configuration; may raise ``ConfigError``.
        """
        self._factory = factory
        self._lock = Lock()
        self._state_machine = ConfigStateMachine()
        self._value: Config | None = None
        self._error: Exception | None = None

    @property
    def state(self) -> ConfigState:
        """Get the cell state."""
        return self._state_machine.state

    @property
    def error(self) -> Exception | None:
        """Get the stored failure, if initialization failed."""
        return self._error

    def get(self) -> Config:
        """Get the configuration, building it on first access.

        Returns:
            The shared configuration instance.

        Raises:
            ConfigError: If initialization failed (now or on an earlier call).
            Exception: Whatever else the factory raised, re-raised to every caller.
        """
        # Lock-free after initialization; the held value is immutable
        if self._state_machine.is_ready() and self._value is not None:
            return self._value

        with self._lock:
            if not self._state_machine.is_terminal():
                self._initialize()

        if self._state_machine.is_failed() and self._error is not None:
            raise self._error
        if self._value is None:
            msg = f"Configuration cell in unexpected state: {self.state.name}"
            raise RuntimeError(msg)
        return self._value

    def _initialize(self) -> None:
        """Run the factory once. Caller must hold the lock."""
        self._state_machine.transition(ConfigState.LOADING)
        try:
            value = self._factory()
        except Exception as e:
            self._error = e
            self._state_machine.transition(ConfigState.FAILED)
            get_logger(__name__).debug(
                "config_cell_failed",
                component=COMPONENT_CONFIG,
                error_type=type(e).__name__,
                error_kind=e.kind.value if isinstance(e, ConfigError) else None,
            )
            return

        self._value = value
        self._state_machine.transition(ConfigState.READY)


_default_cell = ConfigCell()
_default_cell_lock = Lock()


def get_config_cell() -> ConfigCell:
    """Get the process-wide configuration cell."""
    return _default_cell


def get_config() -> Config:
    """Get the process-wide configuration.

    Raises:
        ConfigError: If the configuration could not be loaded.
    """
    return get_config_cell().get()


def reset_config(factory: Callable[[], Config] | None = None) -> None:
    """Replace the process-wide cell with an empty one (for testing).

    Args:
        factory: Optional factory for the new cell.
    """
    global _default_cell  # noqa: PLW0603
    with _default_cell_lock:
        _default_cell = ConfigCell(factory) if factory else ConfigCell()
