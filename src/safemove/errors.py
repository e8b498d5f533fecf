"""Exceptions raised by safemove file operations."""

from pathlib import Path


class FileOperationError(Exception):
    """Base exception for file operation errors."""

    pass


class InvalidInputError(FileOperationError, ValueError):
    """Raised when required arguments are missing or empty."""

    pass


class InvalidPathError(FileOperationError):
    """Raised when a string cannot be interpreted as a filesystem path."""

    def __init__(self, role: str, path: str) -> None:
        """Initialize invalid path error."""
        self.role = role
        self.path = path
        super().__init__(f"Invalid {role} path {path!r}")


class SourceNotFoundError(FileOperationError):
    """Raised when source file doesn't exist."""

    def __init__(self, source: Path) -> None:
        """Initialize not found error."""
        self.source = source
        super().__init__(f"Source file '{source}' does not exist")


class SourceIsDirectoryError(FileOperationError):
    """Raised when the source is a directory rather than a file."""

    def __init__(self, source: Path) -> None:
        self.source = source
        super().__init__(f"Source '{source}' is a directory")


class NotADirectoryConflictError(FileOperationError):
    """Raised when a directory to be created is occupied by a file."""

    def __init__(self, path: Path) -> None:
        self.path = path
        super().__init__(f"{path} already exists and is not a directory")


class DuplicateLimitError(FileOperationError):
    """Raised when no free numbered file name could be found."""

    def __init__(self, path: Path, limit: int) -> None:
        self.path = path
        self.limit = limit
        super().__init__(f"Limit of duplicate file names reached for {path} ({limit})")


class MoveFailedError(FileOperationError):
    """Raised when the filesystem rejects a directory creation or move."""

    def __init__(self, source: Path, destination: Path, reason: str = "") -> None:
        self.source = source
        self.destination = destination
        message = f"Cannot move file {source} to {destination}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)
