"""Error hints for configuration errors.

Provides user-friendly hints with actionable remediation steps
for configuration failures.
"""

from typing import Final

from src.config.constants import (
    ENV_AUTH_SERVICE_HOST,
    ENV_AUTH_SERVICE_PORT,
    ENV_EVENTS_MANAGER_HOST,
    ENV_EVENTS_MANAGER_PORT,
)
from src.config.errors import ConfigError, ErrorKind


# Mapping of error kinds to user-friendly hints
ERROR_HINTS: Final[dict[ErrorKind, str]] = {
    ErrorKind.ENVIRONMENT_VARIABLE_MISSING: (
        "This variable is required. Set it in the service's deployment environment."
    ),
    ErrorKind.PARSE_FAILURE: "The value has the wrong format. Check the expected type.",
}

_PORT_HINT = "Must be a whole number between 0 and 65535 (e.g., '8080')."

# Variable-specific hints for more context
VARIABLE_HINTS: Final[dict[str, str]] = {
    ENV_EVENTS_MANAGER_HOST: "Host name or IP of the events manager (e.g., 'events.internal').",
    ENV_EVENTS_MANAGER_PORT: _PORT_HINT,
    ENV_AUTH_SERVICE_HOST: "Host name or IP of the auth service (e.g., 'auth.internal').",
    ENV_AUTH_SERVICE_PORT: _PORT_HINT,
}

DEFAULT_HINT: Final = "Check the service deployment documentation for valid values."


def get_error_hint(kind: ErrorKind, variable: str | None = None) -> str:
    """Get a user-friendly hint for a configuration error.

    Args:
        kind: The error kind.
        variable: Optional variable name for variable-specific hints.

    Returns:
        A user-friendly hint string.
    """
    # Check for variable-specific hint first
    if variable is not None and variable in VARIABLE_HINTS:
        return VARIABLE_HINTS[variable]
    return ERROR_HINTS.get(kind, DEFAULT_HINT)


def format_config_error(error: ConfigError, *, include_hint: bool = True) -> str:
    """Format a configuration error with optional hint.

    Args:
        error: The error to format.
        include_hint: Whether to include a hint.

    Returns:
        Formatted error string.
    """
    base = f"[{error.kind.value}] {error.message}"
    if include_hint:
        hint = get_error_hint(error.kind, error.variable)
        return f"{base}\n    Hint: {hint}"
    return base
