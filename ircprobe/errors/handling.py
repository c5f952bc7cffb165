from __future__ import annotations

import logging

from ..logging_config import log_structured_error
from .internal import (
    CheckFailedError,
    CheckTimeoutError,
    ConfigError,
    ProbeError,
    TransportConnectError,
)


def classify_error(error: BaseException) -> str:
    """Return the log category for an exception."""
    if isinstance(error, TransportConnectError | OSError | ConnectionError):
        return "network"
    if isinstance(error, ConfigError):
        return "config"
    if isinstance(error, CheckTimeoutError):
        return "timeout"
    if isinstance(error, CheckFailedError):
        return "check"
    if isinstance(error, ProbeError):
        return "internal"
    return "unknown"


def log_error(
    message: str,
    error: BaseException,
    context: dict | None = None,
    level: int = logging.ERROR,
) -> None:
    """Logs an error message with the associated exception details.

    Args:
        message: A descriptive message about the error context.
        error: The exception instance to be logged.
        context: Optional additional context data for debugging. Structured
            ``data`` carried by probe errors is merged in.
        level: Logging level (default: ERROR).
    """
    merged: dict = {}
    if isinstance(error, ProbeError):
        merged.update(error.data)
    if context:
        merged.update(context)
    log_structured_error(
        error_type=classify_error(error),
        message=f"{message}: {str(error)}",
        exception=error,
        context=merged or None,
        level=level,
    )
