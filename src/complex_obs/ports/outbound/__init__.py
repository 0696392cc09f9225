"""Outbound port for complex data storage.

This protocol defines the interface for persisting named text payloads
to external storage. The handler decides the file names; the storage
only reads and writes them.
"""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, Protocol, runtime_checkable


@runtime_checkable
class ComplexDataStoragePort(Protocol):
    """Protocol for complex data storage operations.

    This is the contract that outbound adapters implement
    for persistent storage of complex obs payloads.
    """

    @property
    def location(self) -> Path:
        """Directory holding the stored payloads."""
        ...

    def path_for(self, filename: str) -> Path:
        """Absolute path a payload with this name is (or would be) stored at.

        Args:
            filename: Stored file name

        Returns:
            Absolute path
        """
        ...

    def exists(self, filename: str) -> bool:
        """Check whether a payload is stored under this name.

        Args:
            filename: Stored file name

        Returns:
            True if present
        """
        ...

    def read_text(self, filename: str) -> str:
        """Read a stored payload.

        Args:
            filename: Stored file name

        Returns:
            Payload text

        Raises:
            OSError: If the payload is missing or unreadable
            UnicodeDecodeError: If the payload is not valid text
        """
        ...

    def write_chunks(self, filename: str, chunks: Iterable[str]) -> int:
        """Write a payload from a sequence of text chunks.

        A failed write leaves no file behind.

        Args:
            filename: Stored file name
            chunks: Text to write, in order

        Returns:
            Number of characters written

        Raises:
            OSError: If the write fails
        """
        ...

    def delete(self, filename: str) -> bool:
        """Delete a stored payload.

        Args:
            filename: Stored file name

        Returns:
            True if deleted, False if not found
        """
        ...

    def list_files(self) -> list[str]:
        """List stored payload names.

        Returns:
            List of file names
        """
        ...


__all__ = ["ComplexDataStoragePort"]
