"""Domain layer - Address models, queries and errors.

This module contains immutable value objects and typed errors
shared by every provider. No external dependencies.
"""

from .builder import AddressBuilder
from .errors import (
    CollectionIsEmpty,
    GeocoderError,
    InvalidArgument,
    InvalidServerResponse,
    OutOfBounds,
    UnsupportedOperation,
)
from .models import (
    Address,
    AddressCollection,
    Bounds,
    Coordinates,
    OsmTag,
    PhotonAddress,
)
from .queries import GeocodeQuery, ReverseQuery

__all__ = [
    # Models
    "Coordinates",
    "Bounds",
    "OsmTag",
    "Address",
    "PhotonAddress",
    "AddressCollection",
    "AddressBuilder",
    # Queries
    "GeocodeQuery",
    "ReverseQuery",
    # Errors
    "GeocoderError",
    "UnsupportedOperation",
    "InvalidServerResponse",
    "InvalidArgument",
    "CollectionIsEmpty",
    "OutOfBounds",
]
