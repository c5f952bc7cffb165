"""Centralized internal error hierarchy.

These exceptions give the probe's failure modes semantic categories so the
run driver can map them onto exit codes and invocation errors.

Classes:
  ProbeError            – Base for all internal errors.
  ConfigError           – Missing or malformed configuration.
  TransportConnectError – TCP/TLS connection could not be established.
  CheckFailedError      – The check ran and reported a failure verdict.
  CheckTimeoutError     – No verdict was reached within the watchdog ceiling.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING

if TYPE_CHECKING:  # pragma: no cover
    from ..check.result import RunResult


class ProbeError(Exception):
    """Base class for all internal probe errors with metadata support.

    Attributes:
        data: Dictionary containing arbitrary structured context data.

    Args:
        message: Descriptive error message.
        data: Optional mapping of additional context data.
    """

    data: dict[str, object]

    def __init__(
        self, message: str, *, data: Mapping[str, object] | None = None
    ) -> None:
        super().__init__(message)
        # Copy into a plain dict to avoid unexpected mutations from caller.
        self.data = dict(data) if data else {}


class ConfigError(ProbeError):
    """Raised when the environment does not describe a usable check."""


class TransportConnectError(ProbeError):
    """Raised when the connection to the IRC server cannot be opened.

    The message is the text of the underlying socket or TLS error so that
    certificate problems surface verbatim to the operator.
    """

    def __init__(self, error: BaseException, *, address: str, port: int) -> None:
        super().__init__(
            str(error) or type(error).__name__,
            data={"address": address, "port": port},
        )
        self.__cause__ = error


class CheckFailedError(ProbeError):
    """Raised to the invoking runtime when a check run ends in failure.

    Args:
        result: The terminal failure result of the run.
    """

    def __init__(self, result: RunResult) -> None:
        super().__init__(result.reason or "check failed", data={"timeout": result.timed_out})
        self.result = result


class CheckTimeoutError(CheckFailedError):
    """Raised when the watchdog concluded the run."""


__all__ = [
    "ProbeError",
    "ConfigError",
    "TransportConnectError",
    "CheckFailedError",
    "CheckTimeoutError",
]
