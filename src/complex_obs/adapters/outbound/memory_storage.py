"""In-memory complex data storage adapter.

A simple in-memory implementation of ComplexDataStoragePort for testing
and development purposes. Data is not persisted across restarts.

Usage:
    storage = InMemoryComplexDataStorage()
    storage.write_chunks("notes.txt", ["hello"])
    text = storage.read_text("notes.txt")
"""

from __future__ import annotations

from pathlib import Path
from typing import Iterable


class InMemoryComplexDataStorage:
    """In-memory implementation of ComplexDataStoragePort.

    Stores payloads in a dictionary keyed by file name. Paths are
    reported relative to a virtual location that is never touched.
    """

    def __init__(self, location: str | Path = "/memory/complex_obs") -> None:
        """Initialize empty storage."""
        self._location = Path(location)
        self._files: dict[str, str] = {}

    @property
    def location(self) -> Path:
        return self._location

    def path_for(self, filename: str) -> Path:
        return self._location / filename

    def exists(self, filename: str) -> bool:
        return filename in self._files

    def read_text(self, filename: str) -> str:
        """Read a payload.

        Raises:
            FileNotFoundError: If nothing is stored under this name
        """
        try:
            return self._files[filename]
        except KeyError:
            raise FileNotFoundError(str(self.path_for(filename))) from None

    def write_chunks(self, filename: str, chunks: Iterable[str]) -> int:
        """Store a payload.

        Raises:
            FileExistsError: If the name is already taken
        """
        if filename in self._files:
            raise FileExistsError(str(self.path_for(filename)))
        text = "".join(chunks)
        self._files[filename] = text
        return len(text)

    def delete(self, filename: str) -> bool:
        if filename in self._files:
            del self._files[filename]
            return True
        return False

    def list_files(self) -> list[str]:
        return sorted(self._files)

    def clear(self) -> None:
        """Delete all stored payloads."""
        self._files.clear()

    def __len__(self) -> int:
        return len(self._files)
