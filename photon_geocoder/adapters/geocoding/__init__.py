"""Geocoding adapters - Implementations of GeocoderPort.

Available implementations:
- PhotonAdapter: Photon (OpenStreetMap) geocoding
"""

from .photon_adapter import PhotonAdapter

__all__ = ["PhotonAdapter"]
