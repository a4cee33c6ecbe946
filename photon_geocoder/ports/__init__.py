"""Ports layer - Abstract interfaces (Protocols) for the application.

Ports define the contracts between the geocoding core and external
adapters. They enable dependency injection and make the system testable.
"""

from .geocoding import GeocoderPort
from .http import HttpClientPort

__all__ = [
    "GeocoderPort",
    "HttpClientPort",
]
