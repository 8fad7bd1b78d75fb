"""Abstract interfaces for the storage service collaborator.

Any fsspec ``AbstractFileSystem`` satisfies ``StorageClient``; tests and
alternative backends only need this capability set.
"""

from __future__ import annotations

from typing import IO, Any, Protocol, runtime_checkable


@runtime_checkable
class StorageClient(Protocol):
    """Contract for the hierarchical storage service client."""

    def open(self, path: str, mode: str = "rb", **kwargs: Any) -> IO[bytes]:
        """Open a readable, seekable stream."""

    def ls(self, path: str, detail: bool = True, **kwargs: Any) -> list[Any]:
        """List immediate children of a directory (or the file itself)."""

    def glob(self, path: str, **kwargs: Any) -> list[str]:
        """Expand a ``*``/``?``/``[...]`` pattern against the namespace."""

    def isdir(self, path: str) -> bool:
        """Whether *path* is a directory."""

    def exists(self, path: str, **kwargs: Any) -> bool:
        """Whether *path* exists."""

    def rm(self, path: str, recursive: bool = False, **kwargs: Any) -> None:
        """Delete a file, or a directory tree when *recursive*."""

    def rmdir(self, path: str) -> None:
        """Delete an empty directory."""
