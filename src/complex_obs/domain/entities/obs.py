"""Observation entity."""

from __future__ import annotations

from uuid import uuid4
from dataclasses import dataclass, field
from datetime import datetime
from typing import TYPE_CHECKING, Optional

from complex_obs.domain.value_objects.value_complex import ValueComplex

if TYPE_CHECKING:
    from complex_obs.domain.entities.complex_data import ComplexData


@dataclass
class Obs:
    """A clinical observation that may carry a complex payload."""

    uuid: str = field(default_factory=lambda: str(uuid4()))
    obs_id: Optional[int] = None
    concept: Optional[str] = None
    person_id: Optional[int] = None
    obs_datetime: datetime = field(default_factory=datetime.utcnow)
    value_complex: Optional[str] = None
    complex_data: "Optional[ComplexData]" = None

    def is_complex(self) -> bool:
        """Check if the obs references stored complex data.

        Returns:
            True if value_complex is set.
        """
        return bool(self.value_complex and self.value_complex.strip())

    def parsed_value_complex(self) -> ValueComplex:
        """Parse value_complex.

        Raises:
            ValueError: If value_complex is missing or names no file.
        """
        return ValueComplex.parse(self.value_complex)
