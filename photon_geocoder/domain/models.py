"""Immutable address models.

All models are frozen dataclasses with slots. Updates go through
dataclasses.replace and always return a new instance.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass, field, replace
from typing import Any, Iterator, Optional, Union, overload

from .errors import CollectionIsEmpty, InvalidArgument, OutOfBounds


def _check_latitude(value: float, argument: str = "latitude") -> None:
    if not -90 <= value <= 90:
        raise InvalidArgument(
            f"Latitude must be between -90 and 90, got {value}",
            argument=argument,
        )


def _check_longitude(value: float, argument: str = "longitude") -> None:
    if not -180 <= value <= 180:
        raise InvalidArgument(
            f"Longitude must be between -180 and 180, got {value}",
            argument=argument,
        )


@dataclass(frozen=True, slots=True)
class Coordinates:
    """GPS coordinates representing a geographic location."""

    latitude: float
    longitude: float

    def __post_init__(self) -> None:
        _check_latitude(self.latitude)
        _check_longitude(self.longitude)


@dataclass(frozen=True, slots=True)
class Bounds:
    """A rectangular extent given by its four edges.

    Attributes:
        south: Southern latitude
        west: Western longitude
        north: Northern latitude
        east: Eastern longitude
    """

    south: float
    west: float
    north: float
    east: float

    def __post_init__(self) -> None:
        _check_latitude(self.south, "south")
        _check_latitude(self.north, "north")
        _check_longitude(self.west, "west")
        _check_longitude(self.east, "east")


@dataclass(frozen=True, slots=True)
class OsmTag:
    """An OpenStreetMap key/value pair, e.g. amenity=restaurant."""

    key: str
    value: str

    def __str__(self) -> str:
        return f"{self.key}={self.value}"


@dataclass(frozen=True, slots=True)
class Address:
    """A normalized geocoding result.

    Attributes:
        provided_by: Name of the provider that produced the address
        coordinates: Location of the result
        bounds: Extent of the result, when the provider knows it
        street_number: House number
        street_name: Street name
        postal_code: Postal code
        locality: City, town or village
        sub_locality: Neighbourhood or borough
        country: Country name
        country_code: ISO country code
        timezone: Timezone identifier
    """

    provided_by: str
    coordinates: Optional[Coordinates] = None
    bounds: Optional[Bounds] = None
    street_number: Optional[str] = None
    street_name: Optional[str] = None
    postal_code: Optional[str] = None
    locality: Optional[str] = None
    sub_locality: Optional[str] = None
    country: Optional[str] = None
    country_code: Optional[str] = None
    timezone: Optional[str] = None

    @property
    def latitude(self) -> Optional[float]:
        return self.coordinates.latitude if self.coordinates else None

    @property
    def longitude(self) -> Optional[float]:
        return self.coordinates.longitude if self.coordinates else None

    def to_dict(self) -> dict[str, Any]:
        """Flatten the address into plain Python values."""
        data = asdict(self)
        data.pop("coordinates")
        data["latitude"] = self.latitude
        data["longitude"] = self.longitude
        return data


@dataclass(frozen=True, slots=True)
class PhotonAddress(Address):
    """Address enriched with the OpenStreetMap details returned by Photon.

    Attributes:
        osm_id: OpenStreetMap object id
        osm_type: OpenStreetMap object type (N, W or R)
        osm_tag: Main key/value tag of the object
        name: Display name of the place
        state: State or region
        county: County
        district: District
        type: Photon place type (house, street, city, ...)
    """

    osm_id: Optional[int] = None
    osm_type: Optional[str] = None
    osm_tag: Optional[OsmTag] = None
    name: Optional[str] = None
    state: Optional[str] = None
    county: Optional[str] = None
    district: Optional[str] = None
    type: Optional[str] = None

    def with_osm_id(self, osm_id: Optional[int]) -> PhotonAddress:
        return replace(self, osm_id=osm_id)

    def with_osm_type(self, osm_type: Optional[str]) -> PhotonAddress:
        return replace(self, osm_type=osm_type)

    def with_osm_tag(self, key: Optional[str], value: Optional[str]) -> PhotonAddress:
        """Set the tag; it stays unset unless both key and value are given."""
        tag = OsmTag(key, value) if key is not None and value is not None else None
        return replace(self, osm_tag=tag)

    def with_name(self, name: Optional[str]) -> PhotonAddress:
        return replace(self, name=name)

    def with_state(self, state: Optional[str]) -> PhotonAddress:
        return replace(self, state=state)

    def with_county(self, county: Optional[str]) -> PhotonAddress:
        return replace(self, county=county)

    def with_district(self, district: Optional[str]) -> PhotonAddress:
        return replace(self, district=district)

    def with_type(self, type: Optional[str]) -> PhotonAddress:
        return replace(self, type=type)


@dataclass(frozen=True, slots=True)
class AddressCollection:
    """Ordered, immutable list of addresses returned by a query."""

    addresses: tuple[Address, ...] = field(default_factory=tuple)

    def __len__(self) -> int:
        return len(self.addresses)

    def __iter__(self) -> Iterator[Address]:
        return iter(self.addresses)

    @overload
    def __getitem__(self, index: int) -> Address: ...

    @overload
    def __getitem__(self, index: slice) -> tuple[Address, ...]: ...

    def __getitem__(
        self, index: Union[int, slice]
    ) -> Union[Address, tuple[Address, ...]]:
        return self.addresses[index]

    @property
    def is_empty(self) -> bool:
        """Check if the query returned no address."""
        return len(self.addresses) == 0

    def first(self) -> Address:
        if self.is_empty:
            raise CollectionIsEmpty("The address collection is empty")
        return self.addresses[0]

    def get(self, index: int) -> Address:
        if not 0 <= index < len(self.addresses):
            raise OutOfBounds(
                f"Index {index} is out of bounds",
                index=index,
                size=len(self.addresses),
            )
        return self.addresses[index]

    def slice(self, offset: int, length: Optional[int] = None) -> AddressCollection:
        end = None if length is None else offset + length
        return AddressCollection(self.addresses[offset:end])
