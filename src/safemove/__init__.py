"""safemove - Move a single file without silently overwriting anything."""

from safemove.errors import (
    DuplicateLimitError,
    FileOperationError,
    InvalidInputError,
    InvalidPathError,
    MoveFailedError,
    NotADirectoryConflictError,
    SourceIsDirectoryError,
    SourceNotFoundError,
)
from safemove.file_operations import move, move_directory_file, move_file

__version__ = "0.1.0"

__all__ = [
    "DuplicateLimitError",
    "FileOperationError",
    "InvalidInputError",
    "InvalidPathError",
    "MoveFailedError",
    "NotADirectoryConflictError",
    "SourceIsDirectoryError",
    "SourceNotFoundError",
    "move",
    "move_directory_file",
    "move_file",
]
