"""Typed errors raised by the Photon geocoder.

All errors inherit from GeocoderError and can optionally wrap a root
cause exception for debugging. Transport failures raised by the HTTP
client are not wrapped: they reach the caller unchanged.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional


@dataclass
class GeocoderError(Exception):
    """Base error for the geocoder.

    Attributes:
        message: Human-readable error description
        cause: Optional underlying exception that caused this error
    """

    message: str
    cause: Optional[Exception] = field(default=None, repr=False)

    def __str__(self) -> str:
        if self.cause:
            return f"{self.message}: {self.cause}"
        return self.message

    def __post_init__(self) -> None:
        super().__init__(self.message)


@dataclass
class UnsupportedOperation(GeocoderError):
    """The provider cannot answer this kind of query.

    Raised before any network call, e.g. for IP address lookups.
    """


@dataclass
class InvalidServerResponse(GeocoderError):
    """The server answered with a body that could not be understood.

    Attributes:
        url: The URL that produced the response
    """

    url: str = ""

    @classmethod
    def create(
        cls, url: str, cause: Optional[Exception] = None
    ) -> InvalidServerResponse:
        return cls(
            message=f'The geocoder server returned an invalid response for query "{url}". '
            "We could not parse it.",
            cause=cause,
            url=url,
        )


@dataclass
class InvalidArgument(GeocoderError):
    """A query or value object was built from invalid input.

    Attributes:
        argument: Name of the offending argument
    """

    argument: str = ""


@dataclass
class CollectionIsEmpty(GeocoderError):
    """Asked for the first address of an empty collection."""


@dataclass
class OutOfBounds(GeocoderError):
    """Index outside of an address collection.

    Attributes:
        index: The requested index
        size: Number of addresses in the collection
    """

    index: int = 0
    size: int = 0
