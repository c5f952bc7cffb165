"""Async TLS IRC transport used by the health check."""

from __future__ import annotations

import asyncio
import logging
import ssl

from ..constants import (
    IRC_CONNECT_TIMEOUT,
    IRC_DEFAULT_NICK,
    IRC_DEFAULT_REALNAME,
    IRC_READ_CHUNK_SIZE,
)
from ..errors.internal import TransportConnectError
from ..logs.logger import logger
from .dispatcher import IRCDispatcher
from .models import ConnectionState
from .protocols import MessageHandler


class AsyncIRCTransport:  # pylint: disable=too-many-instance-attributes
    def __init__(
        self,
        nick: str = IRC_DEFAULT_NICK,
        realname: str = IRC_DEFAULT_REALNAME,
        *,
        connect_timeout: float = IRC_CONNECT_TIMEOUT,
        use_tls: bool = True,
        ssl_context: ssl.SSLContext | None = None,
    ) -> None:
        self.nick = nick
        self.realname = realname
        self.connect_timeout = connect_timeout
        self.use_tls = use_tls
        self.ssl_context = ssl_context
        self.server_name: str | None = None
        self.reader: asyncio.StreamReader | None = None
        self.writer: asyncio.StreamWriter | None = None
        self.state = ConnectionState.DISCONNECTED
        self.dispatcher = IRCDispatcher(self)
        self.message_buffer = ""
        self._errors: asyncio.Queue[BaseException] = asyncio.Queue()
        self._read_task: asyncio.Task[None] | None = None

    @property
    def errors(self) -> asyncio.Queue[BaseException]:
        return self._errors

    def _set_state(self, new_state: ConnectionState) -> None:
        if self.state != new_state:
            logger.log_event(
                "irc",
                "state_change",
                level=logging.DEBUG,
                server=self.server_name,
                old_state=self.state.name,
                new_state=new_state.name,
            )
            self.state = new_state

    def _build_ssl_context(self) -> ssl.SSLContext | None:
        if not self.use_tls:
            return None
        return self.ssl_context or ssl.create_default_context()

    async def connect(self, address: str, port: int, tls_server_name: str) -> None:
        self.server_name = tls_server_name
        context = self._build_ssl_context()
        self._set_state(ConnectionState.CONNECTING)
        logger.log_event(
            "irc",
            "connect_start",
            server=self.server_name,
            address=address,
            port=port,
            server_name=tls_server_name if context else "-",
        )
        try:
            self.reader, self.writer = await asyncio.wait_for(
                asyncio.open_connection(
                    address,
                    port,
                    ssl=context,
                    server_hostname=tls_server_name if context else None,
                ),
                timeout=self.connect_timeout,
            )
        except TimeoutError as e:
            self._set_state(ConnectionState.DISCONNECTED)
            error = TimeoutError(
                f"Timed out connecting to {address}:{port} after {self.connect_timeout} seconds"
            )
            raise TransportConnectError(error, address=address, port=port) from e
        except OSError as e:  # ssl.SSLError and socket.gaierror are OSErrors
            self._set_state(ConnectionState.DISCONNECTED)
            logger.log_event(
                "irc",
                "connect_failed",
                level=logging.ERROR,
                server=self.server_name,
                address=address,
                port=port,
                error=str(e),
            )
            raise TransportConnectError(e, address=address, port=port) from e

        logger.log_event(
            "irc", "connection_established", level=logging.DEBUG, server=self.server_name
        )
        self._set_state(ConnectionState.REGISTERING)
        await self.send_line(f"NICK {self.nick}")
        await self.send_line(f"USER {self.nick} 0 * :{self.realname}")
        logger.log_event(
            "irc", "register_sent", level=logging.DEBUG, server=self.server_name, nick=self.nick
        )
        self._set_state(ConnectionState.CONNECTED)
        self._read_task = asyncio.create_task(self._read_loop())

    async def send_line(self, message: str) -> None:
        if self.writer is None or self.writer.is_closing():
            return
        logger.log_event(
            "irc", "send", level=logging.DEBUG, server=self.server_name, line=message
        )
        self.writer.write(f"{message}\r\n".encode())
        await self.writer.drain()

    async def send_whois(self, nick: str) -> None:
        await self.send_line(f"WHOIS {nick}")

    async def send_raw(self, line: str) -> None:
        await self.send_line(line)

    def on_message(self, code: str, handler: MessageHandler) -> None:
        self.dispatcher.add_handler(code, handler)

    def report_error(self, error: BaseException) -> None:
        self._errors.put_nowait(error)

    async def handle_nick_in_use(self) -> None:
        if self.state is not ConnectionState.CONNECTED:
            return
        self.nick = f"{self.nick}_"
        await self.send_line(f"NICK {self.nick}")

    async def _read_loop(self) -> None:
        assert self.reader is not None
        try:
            while True:
                data = await self.reader.read(IRC_READ_CHUNK_SIZE)
                if not data:
                    if self.state is not ConnectionState.QUITTING:
                        self.report_error(ConnectionError("Connection closed by server"))
                    return
                self.message_buffer = await self.dispatcher.process_incoming_data(
                    self.message_buffer, data.decode("utf-8", errors="replace")
                )
        except asyncio.CancelledError:
            raise
        except OSError as e:
            if self.state is not ConnectionState.QUITTING:
                logger.log_event(
                    "irc",
                    "connection_lost",
                    level=logging.WARNING,
                    server=self.server_name,
                    error=str(e),
                )
                self.report_error(e)

    async def quit(self, message: str = "") -> None:
        if self.state in (ConnectionState.QUITTING, ConnectionState.DISCONNECTED):
            return
        self._set_state(ConnectionState.QUITTING)
        try:
            await self.send_line(f"QUIT :{message}" if message else "QUIT")
            logger.log_event("irc", "quit", level=logging.DEBUG, server=self.server_name)
        except OSError as e:
            logger.log_event(
                "irc",
                "connection_lost",
                level=logging.DEBUG,
                server=self.server_name,
                error=str(e),
            )
        await self.disconnect()

    async def disconnect(self) -> None:
        if self._read_task and not self._read_task.done():
            if self._read_task is not asyncio.current_task():
                self._read_task.cancel()
                try:
                    await self._read_task
                except asyncio.CancelledError:
                    pass
        self._read_task = None
        if self.writer:
            try:
                self.writer.close()
                await self.writer.wait_closed()
            except OSError as e:
                logger.log_event(
                    "irc",
                    "connection_lost",
                    level=logging.DEBUG,
                    server=self.server_name,
                    error=str(e),
                )
            finally:
                self.writer = None
                self.reader = None
        self.message_buffer = ""
        self._set_state(ConnectionState.DISCONNECTED)
        logger.log_event("irc", "disconnected", level=logging.DEBUG, server=self.server_name)
