"""Ports layer - interfaces between the domain and the outside world.

Inbound ports are implemented by the domain handlers and used by the
host record system. Outbound ports are implemented by storage adapters
and used by the handlers.
"""

from complex_obs.ports.inbound import (
    ComplexDataStreamError,
    ComplexObsError,
    ComplexObsHandlerPort,
    UnsupportedComplexDataError,
)
from complex_obs.ports.outbound import ComplexDataStoragePort

__all__ = [
    # Inbound
    "ComplexObsHandlerPort",
    "ComplexObsError",
    "ComplexDataStreamError",
    "UnsupportedComplexDataError",
    # Outbound
    "ComplexDataStoragePort",
]
