from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from ..constants import (
    CHECK_TIMEOUT_SECONDS,
    IRC_CONNECT_TIMEOUT,
    IRC_DEFAULT_NICK,
    IRC_DEFAULT_REALNAME,
    IRC_DEFAULT_TLS_PORT,
)


class CheckConfig(BaseModel):
    """Immutable settings for one health check run.

    Attributes:
        server: Server name as it appears in the TLS certificate.
        address: DNS name or IP address to dial. Defaults to ``server``.
        port: TCP port the server listens on.
        check_nick: Nickname of a user who should be online.
        expected_hostname: Host the user should be connected from.
        interval: Minimum acceptable server uptime in seconds.
        timeout: Watchdog ceiling for the whole run in seconds.
        connect_timeout: Ceiling for the TCP/TLS handshake in seconds.
        nick: Nickname the probe registers with.
        realname: Realname the probe registers with.
        use_tls: Whether to wrap the connection in TLS.
    """

    model_config = ConfigDict(frozen=True)

    server: str = Field(min_length=1)
    address: str = ""
    port: int = Field(default=IRC_DEFAULT_TLS_PORT, gt=0, lt=65536)
    check_nick: str = Field(min_length=1)
    expected_hostname: str = Field(min_length=1)
    interval: int
    timeout: float = Field(default=CHECK_TIMEOUT_SECONDS, gt=0)
    connect_timeout: float = Field(default=IRC_CONNECT_TIMEOUT, gt=0)
    nick: str = Field(default=IRC_DEFAULT_NICK, min_length=1)
    realname: str = Field(default=IRC_DEFAULT_REALNAME, min_length=1)
    use_tls: bool = True

    @field_validator("server", "address", "check_nick", "expected_hostname", mode="before")
    @classmethod
    def strip_text(cls, v: Any) -> Any:
        """Strip surrounding whitespace picked up from environment files."""
        return v.strip() if isinstance(v, str) else v

    @model_validator(mode="before")
    @classmethod
    def default_address(cls, data: Any) -> Any:
        """Dial the TLS server name when no explicit address is given."""
        if isinstance(data, Mapping) and not data.get("address"):
            data = dict(data)
            data["address"] = data.get("server", "")
        return data

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> CheckConfig:
        return cls.model_validate(dict(data))

    @property
    def endpoint(self) -> str:
        return f"{self.address}:{self.port}"
