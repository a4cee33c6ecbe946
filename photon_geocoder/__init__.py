"""Photon geocoding provider.

Forward and reverse geocoding against a Photon server, mapped into
immutable address records:

    from photon_geocoder import GeopyHttpClient, PhotonAdapter

    photon = PhotonAdapter.with_komoot_server(GeopyHttpClient())
    for address in photon.geocode("Berlin", limit=3):
        print(address.name, address.latitude, address.longitude)
"""

from .adapters.geocoding import PhotonAdapter
from .adapters.http import GeopyHttpClient
from .domain import (
    Address,
    AddressCollection,
    Bounds,
    Coordinates,
    GeocodeQuery,
    GeocoderError,
    InvalidServerResponse,
    PhotonAddress,
    ReverseQuery,
    UnsupportedOperation,
)

__all__ = [
    "PhotonAdapter",
    "GeopyHttpClient",
    "Address",
    "PhotonAddress",
    "AddressCollection",
    "Bounds",
    "Coordinates",
    "GeocodeQuery",
    "ReverseQuery",
    "GeocoderError",
    "InvalidServerResponse",
    "UnsupportedOperation",
]
