"""Tests for address models, queries and the address builder."""

from dataclasses import FrozenInstanceError

import pytest

from photon_geocoder.domain import (
    Address,
    AddressBuilder,
    AddressCollection,
    Bounds,
    CollectionIsEmpty,
    Coordinates,
    GeocodeQuery,
    InvalidArgument,
    OsmTag,
    OutOfBounds,
    PhotonAddress,
    ReverseQuery,
)


def make_address(name: str) -> PhotonAddress:
    return AddressBuilder("photon").set_coordinates(1.0, 2.0).build(PhotonAddress).with_name(name)


class TestValueObjects:
    @pytest.mark.parametrize("lat,lon", [(91, 0), (-90.5, 0), (0, 180.1), (0, -181)])
    def test_coordinates_out_of_range(self, lat, lon):
        with pytest.raises(InvalidArgument):
            Coordinates(lat, lon)

    def test_bounds_out_of_range(self):
        with pytest.raises(InvalidArgument) as exc_info:
            Bounds(south=-95, west=0, north=10, east=10)
        assert exc_info.value.argument == "south"

    def test_osm_tag_str(self):
        assert str(OsmTag("amenity", "restaurant")) == "amenity=restaurant"


class TestPhotonAddress:
    def test_with_methods_return_new_instances(self):
        address = make_address("Berlin")

        updated = address.with_state("Berlin").with_osm_id(42).with_type("city")

        assert updated is not address
        assert address.state is None
        assert address.osm_id is None
        assert (updated.state, updated.osm_id, updated.type) == ("Berlin", 42, "city")
        assert updated.name == "Berlin"

    def test_with_osm_tag(self):
        address = make_address("x")

        assert address.with_osm_tag("place", "city").osm_tag == OsmTag("place", "city")
        assert address.with_osm_tag("place", None).osm_tag is None
        assert address.with_osm_tag(None, "city").osm_tag is None

    def test_is_frozen(self):
        address = make_address("x")
        with pytest.raises(FrozenInstanceError):
            address.name = "y"

    def test_to_dict(self):
        address = (
            AddressBuilder("photon")
            .set_coordinates(48.85, 2.35)
            .set_bounds(48.8, 2.2, 48.9, 2.4)
            .set_locality("Paris")
            .build(PhotonAddress)
            .with_osm_tag("place", "city")
        )

        data = address.to_dict()

        assert data["latitude"] == 48.85
        assert data["longitude"] == 2.35
        assert data["locality"] == "Paris"
        assert data["bounds"] == {"south": 48.8, "west": 2.2, "north": 48.9, "east": 2.4}
        assert data["osm_tag"] == {"key": "place", "value": "city"}
        assert "coordinates" not in data


class TestAddressBuilder:
    def test_build_base_address(self):
        address = (
            AddressBuilder("photon")
            .set_coordinates(52.52, 13.40)
            .set_street_name("Unter den Linden")
            .set_street_number("1")
            .set_postal_code("10117")
            .set_locality("Berlin")
            .set_sub_locality("Mitte")
            .set_country("Germany")
            .set_country_code("DE")
            .set_timezone("Europe/Berlin")
            .build()
        )

        assert type(address) is Address
        assert address.provided_by == "photon"
        assert address.coordinates == Coordinates(52.52, 13.40)
        assert address.sub_locality == "Mitte"
        assert address.timezone == "Europe/Berlin"

    def test_invalid_coordinates_and_bounds_are_left_unset(self):
        address = (
            AddressBuilder("photon")
            .set_coordinates(35.6, 200.0)
            .set_bounds(95.0, 139.5, 35.5, 139.9)
            .set_locality("Tokyo")
            .build(PhotonAddress)
        )

        assert address.coordinates is None
        assert address.bounds is None
        assert address.locality == "Tokyo"

    def test_empty_builder(self):
        address = AddressBuilder("photon").build(PhotonAddress)

        assert address.latitude is None
        assert address.longitude is None
        assert address.bounds is None


class TestAddressCollection:
    def test_sequence_behaviour(self):
        collection = AddressCollection((make_address("a"), make_address("b")))

        assert len(collection) == 2
        assert [a.name for a in collection] == ["a", "b"]
        assert collection[1].name == "b"
        assert collection.first().name == "a"
        assert collection.get(1).name == "b"
        assert not collection.is_empty

    def test_empty(self):
        collection = AddressCollection()

        assert collection.is_empty
        with pytest.raises(CollectionIsEmpty):
            collection.first()

    def test_get_out_of_bounds(self):
        collection = AddressCollection((make_address("a"),))

        with pytest.raises(OutOfBounds) as exc_info:
            collection.get(3)
        assert (exc_info.value.index, exc_info.value.size) == (3, 1)

    def test_slice(self):
        collection = AddressCollection(tuple(make_address(n) for n in "abcd"))

        assert [a.name for a in collection.slice(1, 2)] == ["b", "c"]
        assert [a.name for a in collection.slice(2)] == ["c", "d"]


class TestQueries:
    @pytest.mark.parametrize("text", ["", "   "])
    def test_blank_geocode_query(self, text):
        with pytest.raises(InvalidArgument):
            GeocodeQuery(text)

    def test_geocode_query_defaults(self):
        query = GeocodeQuery.create("Berlin")

        assert query.limit == 5
        assert query.locale is None
        assert query.bounds is None
        assert query.get_data("layer") is None
        assert query.get_data("layer", "city") == "city"

    def test_geocode_query_is_immutable(self):
        query = GeocodeQuery("Berlin")

        updated = query.with_limit(1).with_locale("de").with_data("layer", "city")

        assert query.limit == 5
        assert query.get_data("layer") is None
        assert updated.limit == 1
        assert updated.locale == "de"
        assert updated.get_data("layer") == "city"
        assert updated.with_text("Bern").text == "Bern"
        with pytest.raises(TypeError):
            updated.data["layer"] = "street"

    def test_reverse_query(self):
        query = ReverseQuery.from_coordinates(48.85, 2.35).with_data("radius", 5)

        assert query.coordinates == Coordinates(48.85, 2.35)
        assert query.get_data("radius") == 5
        assert query.with_coordinates(Coordinates(0, 0)).coordinates.latitude == 0
