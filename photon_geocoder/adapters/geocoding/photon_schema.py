"""Pydantic models of the Photon GeoJSON response.

Only the fields mapped into PhotonAddress are declared; anything else
Photon sends is ignored. Every property is optional.
"""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class PhotonProperties(BaseModel):
    """The ``properties`` object of a Photon feature."""

    model_config = ConfigDict(extra="ignore", coerce_numbers_to_str=True)

    street: Optional[str] = None
    housenumber: Optional[str] = None
    postcode: Optional[str] = None
    city: Optional[str] = None
    country: Optional[str] = None
    countrycode: Optional[str] = None
    # [xmin, ymax, xmax, ymin]
    extent: Optional[list[float]] = None
    osm_id: Optional[int] = None
    osm_type: Optional[str] = None
    osm_key: Optional[str] = None
    osm_value: Optional[str] = None
    name: Optional[str] = None
    state: Optional[str] = None
    county: Optional[str] = None
    district: Optional[str] = None
    type: Optional[str] = None


class PhotonGeometry(BaseModel):
    model_config = ConfigDict(extra="ignore")

    # GeoJSON order: [longitude, latitude]
    coordinates: list[float] = Field(min_length=2)


class PhotonFeature(BaseModel):
    model_config = ConfigDict(extra="ignore")

    geometry: PhotonGeometry
    properties: PhotonProperties = Field(default_factory=PhotonProperties)


class PhotonFeatureCollection(BaseModel):
    model_config = ConfigDict(extra="ignore")

    features: Optional[list[PhotonFeature]] = None
