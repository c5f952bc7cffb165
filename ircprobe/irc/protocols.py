"""Protocol definition for the IRC transport consumed by the run driver.

The run driver only depends on this capability-scoped interface, so tests can
supply an in-memory implementation instead of a live socket.
"""

from __future__ import annotations

import asyncio
from collections.abc import Awaitable, Callable
from typing import Protocol

from .parser import IRCMessage

MessageHandler = Callable[[IRCMessage], Awaitable[None] | None]


class IRCTransport(Protocol):
    """Protocol for a single-session IRC connection."""

    @property
    def errors(self) -> asyncio.Queue[BaseException]:
        """Fatal transport/protocol errors surfaced out of band."""
        ...

    async def connect(self, address: str, port: int, tls_server_name: str) -> None:
        """Open the connection and register; raises TransportConnectError."""
        ...

    def on_message(self, code: str, handler: MessageHandler) -> None:
        """Register a handler for inbound messages with the given command code."""
        ...

    async def send_whois(self, nick: str) -> None:
        """Send a WHOIS query for ``nick``."""
        ...

    async def send_raw(self, line: str) -> None:
        """Send a raw protocol line (without CRLF)."""
        ...

    async def quit(self, message: str = "") -> None:
        """Send QUIT and close the connection. Safe to call repeatedly."""
        ...
