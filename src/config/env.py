"""Environment variable lookup and coercion.

Each helper either returns a resolved value or raises ``ConfigError``
naming the variable and the underlying cause. Nothing here terminates
the process.
"""

import os
import re
from collections.abc import Mapping

from src.config.constants import PORT_MAX
from src.config.errors import ConfigError, ErrorKind


# Unsigned integer literal: optional leading '+' followed by ASCII digits
_DIGITS_PATTERN = re.compile(r"\+?[0-9]*")

MSG_NOT_FOUND = "environment variable not found"
MSG_NOT_UNICODE = "environment variable was not valid unicode"
MSG_EMPTY = "cannot parse integer from empty string"
MSG_INVALID_DIGIT = "invalid digit found in string"
MSG_TOO_LARGE = "number too large to fit in target type"


def resolve_environ(environ: Mapping[str, str] | None) -> Mapping[str, str]:
    """Return the mapping to read from, defaulting to the process environment."""
    return os.environ if environ is None else environ


def read_env_var(name: str, environ: Mapping[str, str] | None = None) -> str:
    """Read a required environment variable.

    Args:
        name: Variable name.
        environ: Mapping to read from (default: ``os.environ``).

    Returns:
        The raw variable value. An empty string is a valid value.

    Raises:
        ConfigError: ENVIRONMENT_VARIABLE_MISSING if the variable is not set
            or its value is not valid UTF-8.
    """
    value = resolve_environ(environ).get(name)
    if value is None:
        raise ConfigError(
            ErrorKind.ENVIRONMENT_VARIABLE_MISSING,
            f"{name}: {MSG_NOT_FOUND}",
            variable=name,
        )

    # Undecodable bytes surface from os.environ as lone surrogates
    try:
        value.encode("utf-8")
    except UnicodeEncodeError:
        raise ConfigError(
            ErrorKind.ENVIRONMENT_VARIABLE_MISSING,
            f"{name}: {MSG_NOT_UNICODE}: {value!r}",
            variable=name,
        ) from None
    return value


def parse_port(name: str, raw: str) -> int:
    """Parse a port number as an unsigned 16-bit integer.

    Only an optional leading ``+`` and ASCII digits are accepted; surrounding
    whitespace, underscores and a minus sign are all rejected.

    Args:
        name: Variable name the value came from, used in error messages.
        raw: Raw string value.

    Returns:
        Port number in the range 0-65535.

    Raises:
        ConfigError: PARSE_FAILURE if the value is not a valid port.
    """
    digits = raw[1:] if raw.startswith("+") else raw

    if not digits:
        cause = MSG_EMPTY if not raw else MSG_INVALID_DIGIT
        raise ConfigError(ErrorKind.PARSE_FAILURE, f"{name}: {cause}", variable=name)

    if _DIGITS_PATTERN.fullmatch(raw) is None:
        raise ConfigError(
            ErrorKind.PARSE_FAILURE, f"{name}: {MSG_INVALID_DIGIT}", variable=name
        )

    port = int(digits)
    if port > PORT_MAX:
        raise ConfigError(
            ErrorKind.PARSE_FAILURE, f"{name}: {MSG_TOO_LARGE}", variable=name
        )
    return port


def read_port(name: str, environ: Mapping[str, str] | None = None) -> int:
    """Read and parse a required port variable."""
    return parse_port(name, read_env_var(name, environ))
