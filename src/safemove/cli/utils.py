"""
Shared CLI utility functions for safemove.

This module contains helpers used across CLI commands for reading the
app-level defaults.
"""

import click
import yaml

from safemove.config import (
    DEFAULT_LOG_LEVEL,
    get_log_level,
    get_replace_existing,
)


def load_cli_defaults() -> tuple[str, bool]:
    """Load the CLI defaults from the app config.

    Falls back to built-in defaults with a warning when the config file
    cannot be read or parsed.

    Returns:
        Tuple of (log_level, replace_existing).
    """
    try:
        return get_log_level(), get_replace_existing()
    except (OSError, yaml.YAMLError) as e:
        click.secho(
            f"Warning: Failed to load app config, using defaults: {e}", fg="yellow", err=True
        )
        return DEFAULT_LOG_LEVEL, False
