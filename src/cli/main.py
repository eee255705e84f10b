"""CLI commands for the back-events service configuration."""

import json
import logging
import uuid

import click

from src.config.bootstrap import load_config_or_exit
from src.config.constants import COMPONENT_CLI
from src.config.metrics import ConfigMetrics
from src.observability.logging import (
    bind_service_context,
    clear_service_context,
    configure_logging,
    get_logger,
)
from src.settings import get_settings


SERVICE_NAME = "back-events"


def _setup_logging(json_logs: bool | None, verbose: bool) -> None:
    """Configure logging from settings, letting CLI flags override them."""
    settings = get_settings()
    level = settings.log_level_number()
    if verbose:
        level = min(level, logging.DEBUG)
    configure_logging(
        level=level,
        json_format=settings.log_json if json_logs is None else json_logs,
    )
    bind_service_context(SERVICE_NAME, str(uuid.uuid4()))


@click.group()
@click.version_option(version="0.1.0")
def cli() -> None:
    """back-events service CLI."""


@cli.command()
@click.option(
    "--log-format",
    type=click.Choice(["json", "console"]),
    default=None,
    help="Log format (default: LOG_JSON setting).",
)
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging.")
@click.option(
    "--json",
    "json_output",
    is_flag=True,
    help="Print the resolved configuration as JSON.",
)
def validate(log_format: str | None, verbose: bool, json_output: bool) -> None:
    """Load configuration from the environment and report the result."""
    json_logs = None if log_format is None else log_format == "json"
    _setup_logging(json_logs, verbose)
    try:
        _report_configuration(json_output)
    finally:
        clear_service_context()


def _report_configuration(json_output: bool) -> None:
    """Load the configuration, exiting on failure, and print it."""
    log = get_logger(__name__).bind(component=COMPONENT_CLI, command="validate")

    config = load_config_or_exit()
    summary = config.summary()
    log.info("config_validated", **ConfigMetrics.get_instance().to_dict())

    if json_output:
        click.echo(json.dumps(summary, sort_keys=True, indent=2))
        return

    click.echo("Configuration is valid!")
    click.echo(f"  Server address: {summary['server_address']}")
    click.echo(f"  Events manager: {summary['events_manager_url']}")
    click.echo(f"  Auth service: {summary['auth_service_url']}")
