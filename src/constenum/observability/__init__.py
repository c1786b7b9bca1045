"""
Observability — Logging for constenum components.
"""

from constenum.observability.logging import (
    ROOT_LOGGER,
    configure_logging,
    get_logger,
    JSONFormatter,
    ReadableFormatter,
)

__all__ = [
    "ROOT_LOGGER",
    "configure_logging",
    "get_logger",
    "JSONFormatter",
    "ReadableFormatter",
]
