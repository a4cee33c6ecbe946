"""HTTP port - The transport used by providers.

Providers only need to fetch a URL and read the body as text. Any
failure (connection refused, timeout, non-2xx status) is raised by
the implementation and must reach the caller unchanged.
"""

from __future__ import annotations

from typing import Protocol


class HttpClientPort(Protocol):
    """Port for a blocking HTTP GET.

    Implementation: adapters/http/geopy_client.py
    """

    def get_text(self, url: str) -> str:
        """Fetch ``url`` and return the response body.

        Args:
            url: Fully built URL, query string included.

        Returns:
            The decoded response body.
        """
        ...
