"""Line splitting, PING handling and per-numeric handler dispatch."""

from __future__ import annotations

import inspect
import logging
from collections import defaultdict
from typing import TYPE_CHECKING

from ..logs.logger import logger
from .parser import IRCMessage, parse_irc_message
from .protocols import MessageHandler

if TYPE_CHECKING:  # pragma: no cover
    from .async_irc import AsyncIRCTransport


class IRCDispatcher:
    def __init__(self, client: AsyncIRCTransport):
        self.client = client
        self.handlers: dict[str, list[MessageHandler]] = defaultdict(list)

    def add_handler(self, code: str, handler: MessageHandler) -> None:
        self.handlers[code.upper()].append(handler)

    async def process_incoming_data(self, buffer: str, new_data: str) -> str:
        buffer += new_data
        while "\n" in buffer:
            line, buffer = buffer.split("\n", 1)
            line = line.rstrip("\r")
            if line.strip():
                await self._handle_irc_message(line.strip())
        return buffer

    async def _handle_irc_message(self, raw_message: str) -> None:
        parsed = parse_irc_message(raw_message)
        command = parsed.command
        if not command:
            return
        if command == "PING":
            await self._handle_ping(parsed)
            return
        logger.log_event(
            "irc",
            "raw",
            level=logging.DEBUG,
            server=self.client.server_name,
            raw=raw_message,
        )
        if command == "ERROR":
            self.client.report_error(ConnectionError(parsed.arg(0, "server sent ERROR")))
            return
        if command == "433":
            await self.client.handle_nick_in_use()
        await self._dispatch(command, parsed)

    async def _handle_ping(self, parsed: IRCMessage) -> None:
        token = parsed.arg(0, self.client.server_name or "")
        await self.client.send_line(f"PONG :{token}")
        logger.log_event(
            "irc", "pong", level=logging.DEBUG, server=self.client.server_name, token=token
        )

    async def _dispatch(self, command: str, parsed: IRCMessage) -> None:
        for handler in list(self.handlers.get(command, ())):
            try:
                result = handler(parsed)
                if inspect.isawaitable(result):
                    await result
            except Exception as e:  # noqa: BLE001
                logger.log_event(
                    "irc",
                    "handler_error",
                    level=logging.ERROR,
                    server=self.client.server_name,
                    code=command,
                    error=str(e),
                    error_type=type(e).__name__,
                )
                self.client.report_error(e)
