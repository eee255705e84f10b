"""Metrics collection for configuration loading."""

from collections import Counter
from threading import Lock

from src.config.errors import ErrorKind


class ConfigMetrics:
    """Collects metrics for configuration loading.

    Provides thread-safe counters for:
    - config_load_attempts_total
    - config_load_failures_total{kind}
    - config_load_duration_ms (last attempt)
    """

    _instance: "ConfigMetrics | None" = None
    _lock = Lock()

    def __init__(self) -> None:
        """Initialize the metrics collector."""
        self._attempts = 0
        self._failures: Counter[ErrorKind] = Counter()
        self._duration_ms = 0.0
        self._lock = Lock()

    @classmethod
    def get_instance(cls) -> "ConfigMetrics":
        """Get the singleton metrics instance.

        Returns:
            The shared ConfigMetrics instance.
        """
        if cls._instance is None:
            with cls._lock:
                if cls._instance is None:
                    cls._instance = cls()
        return cls._instance

    @classmethod
    def reset_instance(cls) -> None:
        """Reset the singleton instance (for testing)."""
        with cls._lock:
            cls._instance = None

    def record_attempt(self) -> None:
        """Record a load attempt."""
        with self._lock:
            self._attempts += 1

    def record_failure(self, kind: ErrorKind) -> None:
        """Record a failed load.

        Args:
            kind: Classification of the failure.
        """
        with self._lock:
            self._failures[kind] += 1

    def record_duration(self, duration_ms: float) -> None:
        """Record load duration.

        Args:
            duration_ms: Duration in milliseconds.
        """
        with self._lock:
            self._duration_ms = duration_ms

    @property
    def attempts(self) -> int:
        """Total number of load attempts."""
        with self._lock:
            return self._attempts

    def failures(self, kind: ErrorKind | None = None) -> int:
        """Get failure count, optionally for a single kind."""
        with self._lock:
            if kind is None:
                return sum(self._failures.values())
            return self._failures[kind]

    def to_dict(self) -> dict[str, float | int | dict[str, int]]:
        """Convert metrics to dictionary.

        Returns:
            Dictionary of metric name to value.
        """
        with self._lock:
            return {
                "config_load_attempts_total": self._attempts,
                "config_load_failures_total": {
                    kind.value: count for kind, count in sorted(self._failures.items())
                },
                "config_load_duration_ms": self._duration_ms,
            }
