"""HTTP client built on geopy's requests adapter.

geopy already maps transport problems to its own exception family
(GeocoderTimedOut, GeocoderUnavailable, GeocoderServiceError, ...),
so this client only adds configuration and logging. Nothing is
retried here.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Optional

from geopy.adapters import RequestsAdapter

from ...config import HttpConfig, get_config


@dataclass
class GeopyHttpClient:
    """Blocking HTTP client implementing HttpClientPort.

    Attributes:
        config: HTTP configuration (timeout, User-Agent)
    """

    config: HttpConfig = field(default_factory=lambda: get_config().http)

    _adapter: Optional[RequestsAdapter] = field(default=None, repr=False)
    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def _get_adapter(self) -> RequestsAdapter:
        """Get or initialize the underlying requests session."""
        if self._adapter is not None:
            return self._adapter

        self._logger.debug(
            "Initializing HTTP adapter",
            extra={
                "user_agent": self.config.user_agent,
                "timeout": self.config.timeout_seconds,
            },
        )
        self._adapter = RequestsAdapter(proxies=None, ssl_context=None, max_retries=0)
        return self._adapter

    def get_text(self, url: str) -> str:
        """Fetch ``url`` and return the body.

        Raises:
            geopy.exc.GeocoderServiceError: Or one of its subclasses, on
                any transport failure or non-2xx status.
        """
        self._logger.debug("HTTP GET", extra={"url": url})
        return self._get_adapter().get_text(
            url,
            timeout=self.config.timeout_seconds,
            headers={"User-Agent": self.config.user_agent},
        )
