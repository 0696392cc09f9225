"""Complex data entity: the payload attached to an observation."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TextIO, Union

ComplexPayload = Union[str, TextIO]


@dataclass
class ComplexData:
    """A titled payload of character data.

    ``data`` is either the characters themselves or a readable text stream
    that will be drained when the payload is saved.
    """

    title: str
    data: ComplexPayload | None
    mime_type: str | None = None
    length: int | None = None

    def is_stream(self) -> bool:
        """Check whether the payload is a readable stream.

        Returns:
            True if data exposes a read() method.
        """
        return not isinstance(self.data, str) and callable(getattr(self.data, "read", None))
