"""Photon geocoder adapter.

Queries a Photon server (https://github.com/komoot/photon) for forward
and reverse geocoding and maps its GeoJSON feature collection into
PhotonAddress records. The HTTP transport is injected; errors it raises
are not caught here.
"""

from __future__ import annotations

import ipaddress
import logging
from dataclasses import dataclass, field
from typing import Iterable, Optional, Union
from urllib.parse import quote_plus, urlencode

from pydantic import ValidationError

from ...config import KOMOOT_ROOT_URL, get_config
from ...domain.builder import AddressBuilder
from ...domain.errors import InvalidServerResponse, UnsupportedOperation
from ...domain.models import AddressCollection, Bounds, PhotonAddress
from ...domain.queries import GeocodeQuery, ReverseQuery
from ...ports.http import HttpClientPort
from .photon_schema import PhotonFeature, PhotonFeatureCollection

Filter = Union[str, Iterable[str], None]


def _is_ip_address(text: str) -> bool:
    try:
        address = ipaddress.ip_address(text)
    except ValueError:
        return False
    # IPv6 zone ids (fe80::1%eth0) are not plain IP literals.
    return getattr(address, "scope_id", None) is None


def _query_value(value: object) -> object:
    # Absent parameters are still sent, with an empty value.
    return "" if value is None else value


def _build_repeated_filter(name: str, values: Filter) -> str:
    if values is None:
        return ""
    if isinstance(values, str):
        values = [values]
    return "".join(f"&{name}={quote_plus(value)}" for value in values)


def build_layer_filter(layers: Filter) -> str:
    """Build ``&layer=`` fragments from one layer name or a list of them."""
    return _build_repeated_filter("layer", layers)


def build_osm_tag_filter(tags: Filter) -> str:
    """Build ``&osm_tag=`` fragments from one ``key[:value]`` filter or a list."""
    return _build_repeated_filter("osm_tag", tags)


def build_bbox_filter(bounds: Optional[Bounds]) -> str:
    """Build the ``&bbox=west,south,east,north`` fragment, if bounds are set."""
    if bounds is None:
        return ""
    return "&bbox=%f,%f,%f,%f" % (bounds.west, bounds.south, bounds.east, bounds.north)


@dataclass
class PhotonAdapter:
    """Photon geocoder implementing GeocoderPort.

    Attributes:
        http_client: Transport used to fetch Photon responses
        root_url: Root URL of the Photon server, without trailing slash
    """

    http_client: HttpClientPort
    root_url: str = field(default_factory=lambda: get_config().photon.root_url)

    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self.root_url = self.root_url.rstrip("/")
        self._logger = logging.getLogger(__name__)

    @classmethod
    def with_komoot_server(cls, http_client: HttpClientPort) -> PhotonAdapter:
        """Adapter pointing at the public instance hosted by Komoot."""
        return cls(http_client=http_client, root_url=KOMOOT_ROOT_URL)

    @property
    def name(self) -> str:
        return "photon"

    def geocode_query(self, query: GeocodeQuery) -> AddressCollection:
        """Geocode free text.

        Raises:
            UnsupportedOperation: If the text is an IP address.
            InvalidServerResponse: If the body cannot be parsed.
        """
        if _is_ip_address(query.text):
            raise UnsupportedOperation(
                "The Photon provider does not support IP addresses."
            )

        url = f"{self.root_url}/api?" + urlencode(
            {
                "q": query.text,
                "limit": _query_value(query.limit),
                "lang": _query_value(query.locale),
                "lat": _query_value(query.get_data("lat")),
                "lon": _query_value(query.get_data("lon")),
            }
        )
        url += build_layer_filter(query.get_data("layer"))
        url += build_osm_tag_filter(query.get_data("osm_tag"))
        url += build_bbox_filter(query.bounds)

        return self._fetch_addresses(url)

    def reverse_query(self, query: ReverseQuery) -> AddressCollection:
        """Reverse geocode coordinates.

        Raises:
            InvalidServerResponse: If the body cannot be parsed.
        """
        coordinates = query.coordinates

        url = f"{self.root_url}/reverse?" + urlencode(
            {
                "lat": coordinates.latitude,
                "lon": coordinates.longitude,
                "radius": _query_value(query.get_data("radius")),
                "limit": _query_value(query.limit),
                "lang": _query_value(query.locale),
            }
        )
        url += build_layer_filter(query.get_data("layer"))
        url += build_osm_tag_filter(query.get_data("osm_tag"))

        return self._fetch_addresses(url)

    def geocode(
        self, text: str, limit: Optional[int] = None, locale: Optional[str] = None
    ) -> AddressCollection:
        """Shortcut for geocode_query(GeocodeQuery(text))."""
        query = GeocodeQuery(text).with_locale(locale)
        if limit is not None:
            query = query.with_limit(limit)
        return self.geocode_query(query)

    def reverse(
        self,
        latitude: float,
        longitude: float,
        limit: Optional[int] = None,
        locale: Optional[str] = None,
    ) -> AddressCollection:
        """Shortcut for reverse_query(ReverseQuery.from_coordinates(...))."""
        query = ReverseQuery.from_coordinates(latitude, longitude).with_locale(locale)
        if limit is not None:
            query = query.with_limit(limit)
        return self.reverse_query(query)

    def _fetch_addresses(self, url: str) -> AddressCollection:
        collection = self._execute_query(url)

        if not collection.features:
            self._logger.debug("Photon returned no feature", extra={"url": url})
            return AddressCollection()

        addresses = tuple(self._feature_to_address(f) for f in collection.features)
        self._logger.debug(
            "Photon query success", extra={"url": url, "results": len(addresses)}
        )
        return AddressCollection(addresses)

    def _execute_query(self, url: str) -> PhotonFeatureCollection:
        self._logger.debug("Photon query", extra={"url": url})
        content = self.http_client.get_text(url)

        try:
            return PhotonFeatureCollection.model_validate_json(content)
        except ValidationError as e:
            self._logger.warning(
                "Photon returned an invalid response",
                extra={"url": url, "error": str(e)},
            )
            raise InvalidServerResponse.create(url, cause=e) from e

    def _feature_to_address(self, feature: PhotonFeature) -> PhotonAddress:
        builder = AddressBuilder(self.name)

        coordinates = feature.geometry.coordinates
        properties = feature.properties

        builder.set_coordinates(coordinates[1], coordinates[0])

        builder.set_street_name(properties.street)
        builder.set_street_number(properties.housenumber)
        builder.set_postal_code(properties.postcode)
        builder.set_locality(properties.city)
        builder.set_country(properties.country)
        builder.set_country_code(properties.countrycode)

        extent = properties.extent
        if extent is not None and len(extent) == 4:
            builder.set_bounds(
                south=extent[1], west=extent[0], north=extent[3], east=extent[2]
            )

        address = builder.build(PhotonAddress)

        return (
            address.with_osm_id(properties.osm_id)
            .with_osm_type(properties.osm_type)
            .with_osm_tag(properties.osm_key, properties.osm_value)
            .with_name(properties.name)
            .with_state(properties.state)
            .with_county(properties.county)
            .with_district(properties.district)
            .with_type(properties.type)
        )
