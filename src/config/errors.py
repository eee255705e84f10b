"""Error types for configuration acquisition."""

from enum import Enum


class ErrorKind(str, Enum):
    """Classification of configuration errors.

    - ENVIRONMENT_VARIABLE_MISSING: the variable is not set
    - PARSE_FAILURE: the variable is set but cannot be coerced
    """

    ENVIRONMENT_VARIABLE_MISSING = "ENVIRONMENT_VARIABLE_MISSING"
    PARSE_FAILURE = "PARSE_FAILURE"


class ConfigError(Exception):
    """Raised when a configuration value cannot be resolved.

    The single failure channel for every fallible step of configuration
    loading. Instances are never mutated after construction.
    """

    def __init__(
        self,
        kind: ErrorKind,
        message: str,
        variable: str | None = None,
    ) -> None:
        """Initialize the configuration error.

        Args:
            kind: Classification of the error.
            message: Human-readable error message.
            variable: Name of the environment variable that failed.
        """
        super().__init__(message)
        self.kind = kind
        self.message = message
        self.variable = variable

    def __repr__(self) -> str:
        return (
            f"ConfigError(kind={self.kind.value}, "
            f"variable={self.variable!r}, message={self.message!r})"
        )

    def to_dict(self) -> dict[str, str | None]:
        """Convert error to dictionary for logging/serialization.

        Returns:
            Dictionary representation of the error.
        """
        return {
            "kind": self.kind.value,
            "message": self.message,
            "variable": self.variable,
        }
