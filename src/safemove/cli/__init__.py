"""
safemove - A CLI tool for moving files without overwriting.

This package contains the CLI commands for safemove, organized into separate
modules for better maintainability.
"""

import click

# Import command modules (not the commands themselves) to preserve module access
from safemove.cli import (
    config as config_module,
    move as move_module,
)


@click.group()
@click.version_option(version="0.1.0", prog_name="safemove")
def main() -> None:
    """safemove - Move files without silently overwriting existing ones."""
    pass


# Register individual commands
main.add_command(move_module.move)

# Register command groups
main.add_command(config_module.config)

__all__ = ["main"]
