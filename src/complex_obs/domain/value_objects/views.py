"""View names a caller may request when loading complex data."""

from __future__ import annotations

from enum import Enum


class ObsView(str, Enum):
    """Views supported by complex obs handlers."""

    RAW = "RAW"
    TEXT = "TEXT"
    URI = "URI"
    DOWNLOAD = "download"

    @classmethod
    def from_name(cls, name: str | None) -> ObsView | None:
        """Look up a view by its exact value. Unknown names give None."""
        for view in cls:
            if view.value == name:
                return view
        return None


TEXT_MIME_TYPE = "text/plain"
