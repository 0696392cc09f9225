"""Domain services."""

from complex_obs.domain.services.abstract_handler import AbstractHandler
from complex_obs.domain.services.text_handler import HANDLER_TYPE, TextHandler

__all__ = [
    "AbstractHandler",
    "TextHandler",
    "HANDLER_TYPE",
]
