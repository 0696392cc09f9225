"""File-based complex data storage adapter.

Implements ComplexDataStoragePort using the local filesystem.
Each payload is one plain text file in the complex obs directory.

Usage:
    storage = FileComplexDataStorage("/var/lib/complex_obs/complex_obs")
    storage.write_chunks("notes_1b2c.txt", ["BP stable overnight"])
    text = storage.read_text("notes_1b2c.txt")

Directory structure:
    complex_obs_dir/
        notes_1b2c.txt
        9f0e.dat
"""

from __future__ import annotations

from pathlib import Path
from typing import Iterable

from complex_obs.infrastructure.logging import get_logger


class FileComplexDataStorage:
    """File-based implementation of ComplexDataStoragePort.

    Text is written and read back without newline translation, so the
    stored characters are exactly the ones supplied.

    Attributes:
        location: Directory holding the payload files
    """

    def __init__(self, directory: str | Path, encoding: str = "utf-8") -> None:
        """Initialize file storage.

        Args:
            directory: Complex obs directory (created if missing)
            encoding: Text encoding for payload files
        """
        self._directory = Path(directory).absolute()
        self._encoding = encoding
        self._logger = get_logger("file_storage")

        self._directory.mkdir(parents=True, exist_ok=True)

    @property
    def location(self) -> Path:
        """Directory holding the stored payloads."""
        return self._directory

    @property
    def encoding(self) -> str:
        """Text encoding of payload files."""
        return self._encoding

    def path_for(self, filename: str) -> Path:
        """Get file path for a payload."""
        # Sanitize name so it cannot leave the directory
        safe_name = filename.replace("/", "_").replace("\\", "_")
        return self._directory / safe_name

    def exists(self, filename: str) -> bool:
        """Check whether a payload file exists."""
        return self.path_for(filename).is_file()

    def read_text(self, filename: str) -> str:
        """Read a payload file.

        Args:
            filename: Stored file name

        Returns:
            Payload text

        Raises:
            OSError: If the file is missing or unreadable
            UnicodeDecodeError: If the file is not valid text
        """
        path = self.path_for(filename)
        with open(path, "r", encoding=self._encoding, newline="") as fin:
            return fin.read()

    def write_chunks(self, filename: str, chunks: Iterable[str]) -> int:
        """Write a payload file from text chunks.

        The file is created exclusively; an existing file is never
        overwritten. If writing fails the partial file is removed.

        Args:
            filename: Stored file name
            chunks: Text to write, in order

        Returns:
            Number of characters written

        Raises:
            FileExistsError: If the file already exists
            OSError: If the write fails
        """
        path = self.path_for(filename)
        written = 0
        with open(path, "x", encoding=self._encoding, newline="") as fout:
            try:
                for chunk in chunks:
                    fout.write(chunk)
                    written += len(chunk)
            except BaseException:
                fout.close()
                path.unlink(missing_ok=True)
                self._logger.warning("partial_complex_obs_file_removed", path=str(path))
                raise
        return written

    def delete(self, filename: str) -> bool:
        """Delete a payload file.

        Returns:
            True if deleted, False if not found

        Raises:
            OSError: If the file exists but cannot be removed
        """
        path = self.path_for(filename)
        if path.exists():
            path.unlink()
            return True
        return False

    def list_files(self) -> list[str]:
        """List stored payload names."""
        return sorted(p.name for p in self._directory.iterdir() if p.is_file())

    def __len__(self) -> int:
        """Number of stored payloads."""
        return len(self.list_files())
