"""Domain entities."""

from complex_obs.domain.entities.complex_data import ComplexData, ComplexPayload
from complex_obs.domain.entities.obs import Obs

__all__ = [
    "ComplexData",
    "ComplexPayload",
    "Obs",
]
