"""Error kinds raised by directory listing.

Path validation failures are raised eagerly, before any entry is probed.
Metadata failures abort the whole listing; nothing is retried.
"""

from __future__ import annotations

from pathlib import Path


class ListingError(Exception):
    """Base error for a listing that cannot be produced."""

    def __init__(self, path: Path, message: str) -> None:
        super().__init__(message)
        self.path = path
        self.message = message

    def __str__(self) -> str:
        return self.message


class PathNotFoundError(ListingError):
    """Target path does not exist."""

    def __init__(self, path: Path) -> None:
        super().__init__(path, f"Path '{path}' does not exist")


class NotDirectoryError(ListingError):
    """Target path exists but is not a directory."""

    def __init__(self, path: Path) -> None:
        super().__init__(path, f"'{path}' is not a directory")


class MetadataError(ListingError):
    """Enumerating a directory or reading one child's metadata failed."""

    def __init__(self, path: Path, error: OSError) -> None:
        reason = error.strerror or str(error)
        super().__init__(path, f"Cannot read metadata for '{path}': {reason}")
        self.error = error


__all__ = [
    "ListingError",
    "PathNotFoundError",
    "NotDirectoryError",
    "MetadataError",
]
