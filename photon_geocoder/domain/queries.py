"""Immutable geocoding queries.

Queries carry the common parameters (limit, locale) plus a free-form
data bag for provider-specific options such as Photon's layer or
osm_tag filters. Every ``with_*`` method returns a new query.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from types import MappingProxyType
from typing import Any, Mapping, Optional

from .errors import InvalidArgument
from .models import Bounds, Coordinates

DEFAULT_RESULT_LIMIT = 5


def _frozen(data: Mapping[str, Any]) -> Mapping[str, Any]:
    return MappingProxyType(dict(data))


@dataclass(frozen=True, slots=True)
class GeocodeQuery:
    """Forward geocoding query: free text to addresses.

    Attributes:
        text: The address or place to look up
        limit: Maximum number of results
        locale: Preferred language of the results (e.g. "fr")
        bounds: Restrict results to this extent
        data: Provider-specific options
    """

    text: str
    limit: int = DEFAULT_RESULT_LIMIT
    locale: Optional[str] = None
    bounds: Optional[Bounds] = None
    data: Mapping[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if not self.text or not self.text.strip():
            raise InvalidArgument("Geocode query cannot be empty", argument="text")
        object.__setattr__(self, "data", _frozen(self.data))

    @classmethod
    def create(cls, text: str) -> GeocodeQuery:
        return cls(text=text)

    def with_text(self, text: str) -> GeocodeQuery:
        return replace(self, text=text)

    def with_limit(self, limit: int) -> GeocodeQuery:
        return replace(self, limit=limit)

    def with_locale(self, locale: Optional[str]) -> GeocodeQuery:
        return replace(self, locale=locale)

    def with_bounds(self, bounds: Optional[Bounds]) -> GeocodeQuery:
        return replace(self, bounds=bounds)

    def with_data(self, key: str, value: Any) -> GeocodeQuery:
        return replace(self, data={**self.data, key: value})

    def get_data(self, key: str, default: Any = None) -> Any:
        return self.data.get(key, default)


@dataclass(frozen=True, slots=True)
class ReverseQuery:
    """Reverse geocoding query: coordinates to addresses.

    Attributes:
        coordinates: The location to look up
        limit: Maximum number of results
        locale: Preferred language of the results
        data: Provider-specific options
    """

    coordinates: Coordinates
    limit: int = DEFAULT_RESULT_LIMIT
    locale: Optional[str] = None
    data: Mapping[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "data", _frozen(self.data))

    @classmethod
    def from_coordinates(cls, latitude: float, longitude: float) -> ReverseQuery:
        return cls(coordinates=Coordinates(latitude, longitude))

    def with_coordinates(self, coordinates: Coordinates) -> ReverseQuery:
        return replace(self, coordinates=coordinates)

    def with_limit(self, limit: int) -> ReverseQuery:
        return replace(self, limit=limit)

    def with_locale(self, locale: Optional[str]) -> ReverseQuery:
        return replace(self, locale=locale)

    def with_data(self, key: str, value: Any) -> ReverseQuery:
        return replace(self, data={**self.data, key: value})

    def get_data(self, key: str, default: Any = None) -> Any:
        return self.data.get(key, default)
