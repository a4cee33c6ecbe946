"""Logging setup driven by ObservabilityConfig."""

from __future__ import annotations

import logging
from typing import Optional

from .config import ObservabilityConfig, get_config


def configure_logging(config: Optional[ObservabilityConfig] = None) -> None:
    """Apply the configured level and format to the root logger.

    Library modules only create loggers; the application decides
    whether to call this.
    """
    config = config or get_config().observability
    logging.basicConfig(level=config.level.upper(), format=config.format, force=True)
    logging.getLogger(__name__).debug(
        "Logging configured", extra={"level": config.level}
    )
