"""Process entry boundary for configuration loading.

This is the one place where a configuration failure becomes process
termination. Everything below it raises ``ConfigError`` instead.
"""

import sys

import click

from src.config.cell import ConfigCell, get_config_cell
from src.config.constants import COMPONENT_CONFIG
from src.config.effective import Config
from src.config.error_hints import format_config_error
from src.config.errors import ConfigError
from src.observability.logging import get_logger

EXIT_CONFIG_ERROR = 1


def report_config_error(error: ConfigError) -> None:
    """Write an operator-facing diagnostic for a configuration error."""
    click.echo("Failed to load microservice configuration:", err=True)
    click.echo(f"  - {format_config_error(error, include_hint=True)}", err=True)


def load_config_or_exit(cell: ConfigCell | None = None) -> Config:
    """Get the configuration, terminating the process if it is invalid.

    Args:
        cell: Cell to read from (default: the process-wide cell).

    Returns:
        The shared configuration instance.
    """
    cell = cell or get_config_cell()
    try:
        return cell.get()
    except ConfigError as e:
        get_logger(__name__).critical(
            "config_load_fatal",
            component=COMPONENT_CONFIG,
            phase="FAILED",
            **e.to_dict(),
        )
        report_config_error(e)
        sys.exit(EXIT_CONFIG_ERROR)
