"""Inbound adapters for Complex Obs.

Provides the REST API adapter over the text handler.
"""

from complex_obs.adapters.inbound.rest_api import create_app

__all__ = ["create_app"]
