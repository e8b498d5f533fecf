"""
Destination resolution for safemove.

This module decides whether a destination names a directory or a file and
computes the final, non-colliding target path for a move. Nothing here moves
or creates anything; the only filesystem access is existence checks.
"""

import logging
import os
import re
from pathlib import Path

from safemove.errors import DuplicateLimitError

MAX_DUPLICATES = 100

# Last "." splits stem from extension. The stem needs a non-whitespace
# character and may not end in a dot; the extension may not contain whitespace.
_EXTENSION_PATTERN = re.compile(
    r"^(?P<stem>(?=.*\S).*[^.])\.(?P<extension>[^.\s]+)$",
    re.DOTALL,
)


def split_filename(name: str) -> tuple[str, str | None]:
    """
    Split a file name into stem and extension.

    Args:
        name: Bare file name (no directory part)

    Returns:
        Tuple of (stem, extension). Extension is None when no extension
        could be detected, in which case stem is the whole name.

    Examples:
        order.csv -> ("order", "csv")
        archive.tar.gz -> ("archive.tar", "gz")
        .gitignore -> (".gitignore", None)
        README -> ("README", None)
    """
    match = _EXTENSION_PATTERN.match(name)
    if match is None:
        return name, None
    return match.group("stem"), match.group("extension")


def has_trailing_separator(raw: str) -> bool:
    """Check whether a raw path string ends with a path separator."""
    if raw.endswith(os.sep):
        return True
    return bool(os.altsep) and raw.endswith(os.altsep)


def looks_like_directory(path: Path, trailing_separator: bool = False) -> bool:
    """
    Decide whether a destination should be treated as a directory.

    Existing entries are classified by what they are: an existing directory
    is a directory and an existing file is a file. A path that does not
    exist yet is a directory when its last segment has no "." in it, or when
    the raw string it came from ended with a separator.

    Args:
        path: Destination path
        trailing_separator: Whether the unsplit destination string ended
            with a separator (Path objects drop it)

    Returns:
        True if the destination is a directory
    """
    if path.is_dir():
        return True
    if path.exists():
        return False

    if "." not in path.name:
        return True
    return trailing_separator


def _candidate_name(stem: str, extension: str | None, counter: int | None = None) -> str:
    name = stem if counter is None else f"{stem}_{counter}"
    if extension is not None:
        name = f"{name}.{extension}"
    return name


def resolve_target(
    source: Path,
    destination: Path,
    destination_is_directory: bool = False,
    allow_replace_existing: bool = False,
    max_duplicates: int = MAX_DUPLICATES,
    logger: logging.Logger | None = None,
) -> Path:
    """
    Compute the final path a file will be moved to.

    If the destination is a directory, the source's own name is used inside
    it; otherwise the destination's name is used. When a file of that name
    already exists, a numeric suffix is added before the extension
    (order.csv -> order_1.csv -> order_2.csv ...).

    Args:
        source: File being moved
        destination: Destination file or directory
        destination_is_directory: Treat destination as a directory even if it
            does not exist yet
        allow_replace_existing: Return the plain candidate without checking
            for collisions
        max_duplicates: Highest numeric suffix that may be tried
        logger: Optional logger for collision warnings

    Returns:
        The target path

    Raises:
        DuplicateLimitError: If every suffix up to max_duplicates is taken
    """
    is_dir = destination_is_directory or destination.is_dir()

    file_name = source.name if is_dir else destination.name
    directory = destination if is_dir else destination.parent

    candidate = directory / file_name

    if allow_replace_existing or candidate.resolve() == source.resolve():
        return candidate

    if not candidate.exists():
        return candidate

    if logger is not None:
        logger.warning("file %s already exists", candidate)

    first_collision = candidate
    stem, extension = split_filename(file_name)
    counter = 1
    while candidate.exists():
        if counter > max_duplicates:
            raise DuplicateLimitError(first_collision, max_duplicates)
        candidate = directory / _candidate_name(stem, extension, counter)
        counter += 1

    return candidate
