"""Mutable helper used by providers to assemble an Address."""

from __future__ import annotations

import logging
from typing import Optional, TypeVar

from .errors import InvalidArgument
from .models import Address, Bounds, Coordinates

A = TypeVar("A", bound=Address)

logger = logging.getLogger(__name__)


class AddressBuilder:
    """Collects base address fields, then builds an immutable Address.

    Example:
        builder = AddressBuilder("photon")
        builder.set_coordinates(52.52, 13.40)
        builder.set_locality("Berlin")
        address = builder.build(PhotonAddress)
    """

    def __init__(self, provided_by: str) -> None:
        self.provided_by = provided_by
        self.coordinates: Optional[Coordinates] = None
        self.bounds: Optional[Bounds] = None
        self.street_number: Optional[str] = None
        self.street_name: Optional[str] = None
        self.postal_code: Optional[str] = None
        self.locality: Optional[str] = None
        self.sub_locality: Optional[str] = None
        self.country: Optional[str] = None
        self.country_code: Optional[str] = None
        self.timezone: Optional[str] = None

    def set_coordinates(self, latitude: float, longitude: float) -> AddressBuilder:
        """Set the location; out-of-range values leave it unset."""
        try:
            self.coordinates = Coordinates(latitude, longitude)
        except InvalidArgument as e:
            logger.debug("Ignoring invalid coordinates", extra={"error": str(e)})
            self.coordinates = None
        return self

    def set_bounds(
        self, south: float, west: float, north: float, east: float
    ) -> AddressBuilder:
        try:
            self.bounds = Bounds(south=south, west=west, north=north, east=east)
        except InvalidArgument as e:
            logger.debug("Ignoring invalid bounds", extra={"error": str(e)})
            self.bounds = None
        return self

    def set_street_number(self, street_number: Optional[str]) -> AddressBuilder:
        self.street_number = street_number
        return self

    def set_street_name(self, street_name: Optional[str]) -> AddressBuilder:
        self.street_name = street_name
        return self

    def set_postal_code(self, postal_code: Optional[str]) -> AddressBuilder:
        self.postal_code = postal_code
        return self

    def set_locality(self, locality: Optional[str]) -> AddressBuilder:
        self.locality = locality
        return self

    def set_sub_locality(self, sub_locality: Optional[str]) -> AddressBuilder:
        self.sub_locality = sub_locality
        return self

    def set_country(self, country: Optional[str]) -> AddressBuilder:
        self.country = country
        return self

    def set_country_code(self, country_code: Optional[str]) -> AddressBuilder:
        self.country_code = country_code
        return self

    def set_timezone(self, timezone: Optional[str]) -> AddressBuilder:
        self.timezone = timezone
        return self

    def build(self, cls: type[A] = Address) -> A:  # type: ignore[assignment]
        """Instantiate ``cls`` with the collected fields."""
        return cls(
            provided_by=self.provided_by,
            coordinates=self.coordinates,
            bounds=self.bounds,
            street_number=self.street_number,
            street_name=self.street_name,
            postal_code=self.postal_code,
            locality=self.locality,
            sub_locality=self.sub_locality,
            country=self.country,
            country_code=self.country_code,
            timezone=self.timezone,
        )
