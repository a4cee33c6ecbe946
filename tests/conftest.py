"""Shared fixtures for the Photon geocoder tests."""

from __future__ import annotations

import json
from typing import Any, Optional
from unittest.mock import MagicMock

import pytest

from photon_geocoder.adapters.geocoding import PhotonAdapter
from photon_geocoder.config import reset_config
from photon_geocoder.container import reset_container

ROOT_URL = "http://photon.test"


def make_feature(
    lon: float, lat: float, properties: Optional[dict[str, Any]] = None
) -> dict[str, Any]:
    """Build a Photon GeoJSON feature."""
    return {
        "type": "Feature",
        "geometry": {"type": "Point", "coordinates": [lon, lat]},
        "properties": properties or {},
    }


def make_body(*features: dict[str, Any]) -> str:
    return json.dumps({"type": "FeatureCollection", "features": list(features)})


@pytest.fixture(autouse=True)
def fresh_config():
    """Make sure no cached configuration leaks between tests."""
    reset_config()
    reset_container()
    yield
    reset_config()
    reset_container()


@pytest.fixture
def http_client():
    """HTTP client double returning an empty feature collection."""
    client = MagicMock()
    client.get_text.return_value = make_body()
    return client


@pytest.fixture
def photon(http_client):
    return PhotonAdapter(http_client=http_client, root_url=ROOT_URL)
