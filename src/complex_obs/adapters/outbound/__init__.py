"""Outbound adapters - implementations for external dependencies.

Outbound adapters implement the storage interface for persisting
complex obs payloads.
"""

from complex_obs.adapters.outbound.file_storage import FileComplexDataStorage
from complex_obs.adapters.outbound.memory_storage import InMemoryComplexDataStorage

__all__ = ["FileComplexDataStorage", "InMemoryComplexDataStorage"]
