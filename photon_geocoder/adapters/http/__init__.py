"""HTTP adapters - Implementations of HttpClientPort.

Available implementations:
- GeopyHttpClient: requests session managed by geopy
"""

from .geopy_client import GeopyHttpClient

__all__ = ["GeopyHttpClient"]
