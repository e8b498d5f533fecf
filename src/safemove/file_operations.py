"""File operations for safemove - moving a single file without clobbering."""

import errno
import logging
import os
import shutil
from pathlib import Path

from safemove.errors import (
    FileOperationError,
    InvalidInputError,
    InvalidPathError,
    MoveFailedError,
    NotADirectoryConflictError,
    SourceIsDirectoryError,
    SourceNotFoundError,
)
from safemove.path_resolution import (
    has_trailing_separator,
    looks_like_directory,
    resolve_target,
)


def _to_path(value: str | os.PathLike, role: str) -> Path:
    raw = os.fspath(value)
    if "\0" in raw:
        raise InvalidPathError(role, raw)
    return Path(raw)


def _first_non_directory(path: Path) -> Path | None:
    """Find the nearest entry on the way up from path that exists but is not a directory."""
    for candidate in (path, *path.parents):
        if candidate.exists():
            return None if candidate.is_dir() else candidate
    return None


def _ensure_directory(
    directory: Path,
    source: Path,
    destination: Path,
    logger: logging.Logger | None,
) -> None:
    blocker = _first_non_directory(directory)
    if blocker is not None:
        raise NotADirectoryConflictError(blocker)

    if directory.exists():
        return

    if logger is not None:
        logger.info("creating directory %s", directory)

    try:
        directory.mkdir(parents=True, exist_ok=True)
    except (FileExistsError, NotADirectoryError) as e:
        raise NotADirectoryConflictError(directory) from e
    except OSError as e:
        raise MoveFailedError(
            source, destination, f"failed to create directories for {directory}"
        ) from e


def _rename(source: Path, target: Path, allow_replace_existing: bool) -> None:
    if allow_replace_existing:
        os.replace(source, target)
        return
    if target.exists():
        raise FileExistsError(errno.EEXIST, "Target file already exists", str(target))
    os.rename(source, target)


def _fallback_move(source: Path, target: Path, allow_replace_existing: bool) -> Path:
    if not allow_replace_existing and target.exists():
        raise FileExistsError(errno.EEXIST, "Target file already exists", str(target))
    # shutil.move copies and deletes when a rename is not possible
    return Path(shutil.move(str(source), str(target)))


def move(
    source: str | os.PathLike | None,
    destination: str | os.PathLike | None,
    destination_is_directory: bool = False,
    allow_replace_existing: bool = False,
    logger: logging.Logger | None = None,
) -> Path:
    """
    Move a file to a destination file or directory.

    All missing directories are created first. If a file of the same name
    already exists at the destination, a numeric suffix is added before the
    extension (order.csv -> order_1.csv) unless allow_replace_existing is set.
    The move is a rename where the filesystem allows it and falls back to
    copy-and-delete when source and target are on different devices.

    Args:
        source: File to move (must exist and not be a directory)
        destination: Destination file or directory
        destination_is_directory: Treat destination as a directory
        allow_replace_existing: Overwrite an existing target instead of
            choosing a new name
        logger: Optional logger receiving diagnostic records

    Returns:
        The path the file now resides at

    Raises:
        InvalidInputError: If source or destination is missing
        InvalidPathError: If source or destination is not a valid path
        SourceIsDirectoryError: If source is a directory
        SourceNotFoundError: If source doesn't exist
        NotADirectoryConflictError: If a needed directory is occupied by a file
        DuplicateLimitError: If no free numbered name could be found
        MoveFailedError: For any other filesystem error
    """
    if logger is not None:
        logger.info(
            "move(%s, %s, destination_is_directory=%s, allow_replace_existing=%s)",
            source,
            destination,
            destination_is_directory,
            allow_replace_existing,
        )

    if source is None or not os.fspath(source).strip():
        raise InvalidInputError("no source path specified")
    if destination is None or not os.fspath(destination).strip():
        raise InvalidInputError("no destination path specified")

    source = _to_path(source, "source")
    destination = _to_path(destination, "destination")

    if source.is_dir():
        raise SourceIsDirectoryError(source)
    if not source.exists():
        raise SourceNotFoundError(source)

    dir_to_check = destination if destination_is_directory else destination.parent
    _ensure_directory(dir_to_check, source, destination, logger)

    target = resolve_target(
        source,
        destination,
        destination_is_directory=destination_is_directory,
        allow_replace_existing=allow_replace_existing,
        logger=logger,
    )

    if target.resolve() == source.resolve():
        if logger is not None:
            logger.info("file %s is already at %s", source, target)
        return target

    try:
        try:
            _rename(source, target, allow_replace_existing)
            result = target
        except OSError as e:
            if e.errno != errno.EXDEV:
                raise
            if logger is not None:
                logger.warning("atomic move not supported, retrying with copy and delete")
            result = _fallback_move(source, target, allow_replace_existing)
    except OSError as e:
        raise MoveFailedError(source, destination, str(e)) from e

    if logger is not None:
        logger.info("file %s moved to %s", source, result)
    return result


def move_file(
    source_file_path: str | os.PathLike | None,
    *destination_segments: str | os.PathLike,
    allow_replace_existing: bool = False,
    logger: logging.Logger | None = None,
) -> str:
    """
    Move a file to a destination built from one or more path segments.

    Segments are joined in order, e.g. move_file("report.pdf", "archive",
    "2024", "06"). If the joined path does not exist and its last segment
    has no "." in it, or the last segment ends with a separator, the
    destination is treated as a directory and the file keeps its name.

    Args:
        source_file_path: Absolute or relative path of the file to move
        *destination_segments: Destination directory and/or file name parts
        allow_replace_existing: Overwrite an existing target
        logger: Optional logger receiving diagnostic records

    Returns:
        The path of the moved file as a string

    Raises:
        InvalidInputError: If the source is empty or a segment is missing
        FileOperationError: See move()
    """
    if logger is not None:
        logger.info("move_file(%s, %s)", source_file_path, list(destination_segments))

    if source_file_path is None or not os.fspath(source_file_path).strip():
        raise InvalidInputError("no source path specified")

    if not destination_segments:
        raise InvalidInputError("no destination path specified")

    segments: list[str] = []
    for segment in destination_segments:
        if segment is None:
            raise InvalidInputError("destination path contains a None segment")
        segment = os.fspath(segment)
        if not segment:
            raise InvalidInputError("destination path contains an empty segment")
        segments.append(segment)

    source = _to_path(source_file_path, "source")
    # Every segment is kept, even an absolute one after the first
    destination_raw = os.sep.join(segments)
    destination = _to_path(destination_raw, "destination")

    is_dir = looks_like_directory(destination, has_trailing_separator(segments[-1]))
    result = move(
        source,
        destination,
        destination_is_directory=is_dir,
        allow_replace_existing=allow_replace_existing,
        logger=logger,
    )
    return str(result)


def move_directory_file(
    source_dir: str | os.PathLike | None,
    source_file: str | None,
    *destination_segments: str | os.PathLike,
    allow_replace_existing: bool = False,
    logger: logging.Logger | None = None,
) -> str:
    """Move source_dir/source_file to a destination. See move_file()."""
    if logger is not None:
        logger.info(
            "move_directory_file(%s, %s, %s)",
            source_dir,
            source_file,
            list(destination_segments),
        )

    if source_dir is None or source_file is None:
        raise InvalidInputError("no source path specified")
    if not os.fspath(source_dir) or not source_file:
        raise InvalidInputError("no source path specified")

    return move_file(
        f"{os.fspath(source_dir)}{os.sep}{source_file}",
        *destination_segments,
        allow_replace_existing=allow_replace_existing,
        logger=logger,
    )


__all__ = [
    "FileOperationError",
    "move",
    "move_directory_file",
    "move_file",
]
