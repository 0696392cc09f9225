"""Domain value objects."""

from complex_obs.domain.value_objects.value_complex import SEPARATOR, ValueComplex
from complex_obs.domain.value_objects.views import TEXT_MIME_TYPE, ObsView

__all__ = [
    "SEPARATOR",
    "ValueComplex",
    "ObsView",
    "TEXT_MIME_TYPE",
]
