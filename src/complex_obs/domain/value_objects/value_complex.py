"""The value_complex field codec.

An observation that carries a complex payload stores a reference to it in
its ``value_complex`` field as ``"<title>|<filename>"``. The title is what
users see; the filename is the file inside the complex obs directory.

Example:
    >>> vc = ValueComplex.parse("notes.txt file |notes.txt")
    >>> vc.filename
    'notes.txt'
    >>> vc.download_title()
    'notes.txt'
"""

from __future__ import annotations

import re
from dataclasses import dataclass

SEPARATOR = "|"

_TRAILING_FILE = re.compile(r"file$")


@dataclass(frozen=True, slots=True)
class ValueComplex:
    """Parsed form of an observation's value_complex field.

    Attributes:
        title: Display title (first segment).
        filename: Stored file name (last segment).
    """

    title: str
    filename: str

    def __post_init__(self) -> None:
        """Validate the stored file name."""
        if not self.filename.strip():
            raise ValueError("value_complex has no filename")

    @classmethod
    def parse(cls, raw: str) -> ValueComplex:
        """Parse a raw value_complex string.

        A single segment is both title and filename. With several segments
        the title is the first and the filename the last.

        Raises:
            ValueError: If the string is blank or names no file.
        """
        if raw is None or not raw.strip():
            raise ValueError("value_complex is empty")
        names = raw.split(SEPARATOR)
        return cls(title=names[0], filename=names[-1])

    @classmethod
    def for_stored_file(cls, filename: str) -> ValueComplex:
        """Build the reference recorded after a payload is written."""
        return cls(title=f"{filename} file ", filename=filename)

    def download_title(self) -> str:
        """Title safe for downloads: no commas, no spaces, no trailing 'file'."""
        cleaned = self.title.replace(",", "").replace(" ", "")
        return _TRAILING_FILE.sub("", cleaned)

    def __str__(self) -> str:
        return f"{self.title}{SEPARATOR}{self.filename}"
