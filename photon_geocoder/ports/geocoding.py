"""Geocoding port - Abstraction for forward and reverse geocoding.

This protocol defines the contract for geocoding providers, allowing
different implementations (Photon, Nominatim, etc.) to be used.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from ..domain.models import AddressCollection
    from ..domain.queries import GeocodeQuery, ReverseQuery


class GeocoderPort(Protocol):
    """Port for geocoding providers.

    Implementation: adapters/geocoding/photon_adapter.py
    """

    @property
    def name(self) -> str:
        """Provider name stamped on every returned address."""
        ...

    def geocode_query(self, query: GeocodeQuery) -> AddressCollection:
        """Geocode free text to addresses.

        Args:
            query: The forward query.

        Returns:
            Matching addresses in provider order, possibly empty.

        Raises:
            UnsupportedOperation: If the provider cannot handle the query.
            InvalidServerResponse: If the provider answer cannot be parsed.
        """
        ...

    def reverse_query(self, query: ReverseQuery) -> AddressCollection:
        """Reverse geocode coordinates to addresses.

        Args:
            query: The reverse query.

        Returns:
            Matching addresses in provider order, possibly empty.

        Raises:
            InvalidServerResponse: If the provider answer cannot be parsed.
        """
        ...
