"""Inbound ports - API contracts for complex obs handlers.

Inbound ports define the interfaces that the host record system
uses to persist and retrieve complex observation payloads.
"""

from __future__ import annotations

from abc import abstractmethod
from typing import Any, Optional, Protocol

from complex_obs.domain.entities.obs import Obs


# =============================================================================
# Complex Obs Handler Port
# =============================================================================


class ComplexObsHandlerPort(Protocol):
    """Protocol for complex obs handlers.

    A handler moves the payload of an observation between the obs record
    and external storage. The record keeps only a reference to the stored
    file in ``value_complex``.

    Thread Safety:
        No coordination is performed; callers serialize access to a given obs.

    Example:
        obs.complex_data = ComplexData("notes.txt", "BP stable overnight")
        handler.save_obs(obs)          # writes the file, clears complex_data
        handler.get_obs(obs, "TEXT")   # reads it back into complex_data
    """

    @abstractmethod
    def get_obs(self, obs: Obs, view: Optional[str] = None) -> Obs:
        """Load the stored payload into ``obs.complex_data``.

        Args:
            obs: Observation with value_complex set.
            view: Requested view name.

        Returns:
            The same obs. complex_data is None if the payload could not be read.
        """
        ...

    @abstractmethod
    def save_obs(self, obs: Obs) -> Obs:
        """Persist ``obs.complex_data`` and record its filename.

        Args:
            obs: Observation carrying complex_data.

        Returns:
            The same obs with value_complex set and complex_data cleared.

        Raises:
            ComplexObsError: If the payload cannot be written.
        """
        ...

    @abstractmethod
    def purge_complex_data(self, obs: Obs) -> bool:
        """Delete the stored payload.

        Args:
            obs: Observation referencing stored data.

        Returns:
            True if the payload is gone.
        """
        ...

    @abstractmethod
    def get_handler_type(self) -> str:
        """Name of this handler type."""
        ...

    @abstractmethod
    def get_supported_views(self) -> list[str]:
        """View names this handler understands."""
        ...

    @abstractmethod
    def supports_view(self, view: str) -> bool:
        """Check if a view name is supported."""
        ...

    @abstractmethod
    def validate(self, handler_config: Optional[str], obs: Obs) -> bool:
        """Check an obs against handler configuration."""
        ...

    @abstractmethod
    def get_value(self, obs: Obs) -> Any:
        """Persisted value projection of the obs, if the handler has one."""
        ...


# =============================================================================
# Errors
# =============================================================================


class ComplexObsError(Exception):
    """Raised when a complex obs operation fails."""

    pass


class ComplexDataStreamError(ComplexObsError):
    """Raised when a supplied payload stream cannot be read."""

    pass


class UnsupportedComplexDataError(ComplexObsError):
    """Raised when the payload is neither text nor a text stream."""

    pass


# =============================================================================
# Exports
# =============================================================================

__all__ = [
    "ComplexObsHandlerPort",
    "ComplexObsError",
    "ComplexDataStreamError",
    "UnsupportedComplexDataError",
]
