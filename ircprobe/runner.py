"""Run driver: wires the state machine to a transport and a watchdog."""

from __future__ import annotations

import asyncio
import logging

from .check.machine import CheckStateMachine, OutboundCommand, SendRaw, SendWhois
from .check.result import ResultSlot, RunResult
from .config.model import CheckConfig
from .errors.handling import log_error
from .errors.internal import CheckFailedError, CheckTimeoutError, TransportConnectError
from .irc.async_irc import AsyncIRCTransport
from .irc.models import (
    CHECK_NUMERICS,
    InboundMessage,
    TransportError,
    WhoisUserReply,
    to_inbound,
)
from .irc.parser import IRCMessage
from .irc.protocols import IRCTransport
from .logs.logger import logger


def build_transport(config: CheckConfig) -> AsyncIRCTransport:
    return AsyncIRCTransport(
        nick=config.nick,
        realname=config.realname,
        connect_timeout=config.connect_timeout,
        use_tls=config.use_tls,
    )


class CheckRun:
    """One check: a fresh machine, a fresh slot and one connection."""

    def __init__(self, config: CheckConfig, transport: IRCTransport) -> None:
        self.config = config
        self.transport = transport
        self.slot = ResultSlot()
        self.machine = CheckStateMachine(config, self.slot)

    async def execute(self, command: OutboundCommand) -> None:
        server = self.config.server
        if isinstance(command, SendWhois):
            logger.log_event(
                "check", "whois_sent", level=logging.DEBUG, server=server, nick=command.nick
            )
            await self.transport.send_whois(command.nick)
        elif isinstance(command, SendRaw):
            logger.log_event(
                "check", "stats_sent", level=logging.DEBUG, server=server, line=command.line
            )
            await self.transport.send_raw(command.line)

    async def deliver(self, message: InboundMessage) -> None:
        command = self.machine.feed(message)
        if command is None:
            return
        if isinstance(message, WhoisUserReply):
            logger.log_event(
                "check",
                "host_verified",
                level=logging.DEBUG,
                server=self.config.server,
                nick=message.nick,
                hostname=message.hostname,
            )
        await self.execute(command)

    async def handle_message(self, parsed: IRCMessage) -> None:
        inbound = to_inbound(parsed)
        if inbound is not None:
            await self.deliver(inbound)

    def expire(self) -> None:
        timeout = self.config.timeout
        if self.slot.offer(
            RunResult.failure(
                f"Timed out after {timeout:g} seconds waiting for {self.config.endpoint}",
                timed_out=True,
            )
        ):
            logger.log_event(
                "check",
                "watchdog_fired",
                level=logging.WARNING,
                server=self.config.server,
                timeout=timeout,
            )

    async def _session(self) -> None:
        config = self.config
        try:
            await self.transport.connect(config.address, config.port, config.server)
        except TransportConnectError as e:
            log_error("Connection failed", e, level=logging.DEBUG)
            self.slot.offer(RunResult.failure(str(e)))
            return
        while not self.slot.is_set:
            error = await self.transport.errors.get()
            await self.deliver(TransportError(error))

    def _session_done(self, task: asyncio.Task[None]) -> None:
        if task.cancelled():
            return
        error = task.exception()
        if error is not None:
            log_error("Check session crashed", error)
            self.slot.offer(RunResult.failure(str(error) or type(error).__name__))

    async def run(self) -> RunResult:
        for code in CHECK_NUMERICS:
            self.transport.on_message(code, self.handle_message)

        loop = asyncio.get_running_loop()
        watchdog = loop.call_later(self.config.timeout, self.expire)
        session = asyncio.create_task(self._session())
        session.add_done_callback(self._session_done)
        try:
            return await self.slot.wait()
        finally:
            watchdog.cancel()
            if not session.done():
                session.cancel()
                try:
                    await session
                except asyncio.CancelledError:
                    pass
            await self.transport.quit()


async def run_check(
    config: CheckConfig, transport: IRCTransport | None = None
) -> RunResult:
    """Run one health check and return its verdict.

    Exactly one verdict is produced: the first of the state machine, a
    transport error, a connect failure or the watchdog to conclude wins. The
    connection is closed before returning.
    """
    return await CheckRun(config, transport or build_transport(config)).run()


def raise_for_result(result: RunResult) -> None:
    """Raise the matching CheckFailedError for a failure verdict."""
    if result.ok:
        return
    if result.timed_out:
        raise CheckTimeoutError(result)
    raise CheckFailedError(result)


async def check(config: CheckConfig, transport: IRCTransport | None = None) -> None:
    """Run the check; raises CheckFailedError on failure."""
    raise_for_result(await run_check(config, transport))
