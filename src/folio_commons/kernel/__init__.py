"""Kernel – errors and clock shared by every layer."""

from folio_commons.kernel.clock import Clock, FrozenClock, SystemClock, utc_now
from folio_commons.kernel.errors import (
    ConfigError,
    FolioError,
    TransportError,
    TransportTimeoutError,
)

__all__ = [
    "Clock",
    "ConfigError",
    "FolioError",
    "FrozenClock",
    "SystemClock",
    "TransportError",
    "TransportTimeoutError",
    "utc_now",
]
