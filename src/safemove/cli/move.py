"""Move command for safemove CLI.

This module contains the move command, which relocates a single file to a
destination file or directory without overwriting existing files.
"""

import os

import click

from safemove.cli.utils import load_cli_defaults
from safemove.config import VALID_LOG_LEVELS
from safemove.errors import FileOperationError
from safemove.file_operations import move_directory_file, move_file
from safemove.logging_setup import configure_logging, get_logger


@click.command()
@click.argument("source", type=str)
@click.argument("destination", nargs=-1, required=True, type=str)
@click.option(
    "--replace/--no-replace",
    default=None,
    help="Overwrite an existing destination file instead of adding a numeric suffix",
)
@click.option(
    "--source-dir",
    type=str,
    default=None,
    help="Directory containing SOURCE (SOURCE is then a bare file name)",
)
@click.option("-v", "--verbose", is_flag=True, help="Log each step of the move")
@click.option(
    "--log-level",
    type=click.Choice(VALID_LOG_LEVELS, case_sensitive=False),
    default=None,
    help="Log level (default: from app config, WARNING if unset)",
)
def move(
    source: str,
    destination: tuple[str, ...],
    replace: bool | None,
    source_dir: str | None,
    verbose: bool,
    log_level: str | None,
) -> None:
    """Move a file to a destination file or directory.

    DESTINATION may be given as several segments which are joined, e.g.
    "archive 2024 06". If the joined path does not exist and its last
    segment has no "." (or ends with a separator) it is treated as a
    directory and created. Existing files are never overwritten unless
    --replace is given: order.csv becomes order_1.csv, order_2.csv, ...

    Arguments:
        SOURCE: File to move
        DESTINATION: One or more destination path segments

    Examples:
        safemove move report.pdf archive/2024
        safemove move report.pdf archive 2024 06 report-june.pdf
        safemove move --source-dir inbox report.pdf archive/
    """
    default_level, default_replace = load_cli_defaults()

    level = "INFO" if verbose else (log_level or default_level).upper()
    configure_logging(level)
    logger = get_logger()

    allow_replace = default_replace if replace is None else replace

    try:
        if source_dir is not None:
            result = move_directory_file(
                source_dir,
                source,
                *destination,
                allow_replace_existing=allow_replace,
                logger=logger,
            )
            moved_from = os.path.join(source_dir, source)
        else:
            result = move_file(
                source,
                *destination,
                allow_replace_existing=allow_replace,
                logger=logger,
            )
            moved_from = source
    except FileOperationError as e:
        click.secho(f"Error: {e}", fg="red", err=True)
        raise click.Abort()

    click.secho(f"Moved {moved_from} -> {result}", fg="green")
