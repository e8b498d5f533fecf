"""Config command group for managing app configuration.

This module contains commands for viewing and changing the defaults the
move command uses.
"""

import click

from safemove.cli.utils import load_cli_defaults
from safemove.config import (
    VALID_LOG_LEVELS,
    get_app_config_path,
    set_log_level,
    set_replace_existing,
)


@click.group()
def config() -> None:
    """Manage safemove defaults."""
    pass


@config.command(name="show")
def config_show() -> None:
    """Show the effective configuration."""
    log_level, replace_existing = load_cli_defaults()

    click.echo()
    click.secho("Configuration:", bold=True)
    click.echo(f"  File: {get_app_config_path()}")
    click.echo(f"  log_level: {log_level}")
    click.echo(f"  replace_existing: {str(replace_existing).lower()}")
    click.echo()


@config.command(name="set-log-level")
@click.argument("level", type=click.Choice(VALID_LOG_LEVELS, case_sensitive=False))
def config_set_log_level(level: str) -> None:
    """Set the default log level for the move command.

    Examples:
        safemove config set-log-level INFO
    """
    try:
        set_log_level(level)
    except OSError as e:
        click.secho(f"Error: Failed to save configuration: {e}", fg="red", err=True)
        raise click.Abort()

    click.secho(f"✓ Set log level: {level.upper()}", fg="green")


@config.command(name="set-replace-existing")
@click.argument("enabled", type=click.BOOL)
def config_set_replace_existing(enabled: bool) -> None:
    """Set whether move replaces existing files by default.

    Examples:
        safemove config set-replace-existing false
    """
    try:
        set_replace_existing(enabled)
    except OSError as e:
        click.secho(f"Error: Failed to save configuration: {e}", fg="red", err=True)
        raise click.Abort()

    click.secho(f"✓ Set replace existing: {str(enabled).lower()}", fg="green")
