"""Error types and error logging helpers."""

from .handling import classify_error, log_error  # noqa: F401
from .internal import (  # noqa: F401
    CheckFailedError,
    CheckTimeoutError,
    ConfigError,
    ProbeError,
    TransportConnectError,
)

__all__ = [
    "CheckFailedError",
    "CheckTimeoutError",
    "ConfigError",
    "ProbeError",
    "TransportConnectError",
    "classify_error",
    "log_error",
]
