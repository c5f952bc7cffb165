"""The verification state machine driving one health check.

``transition`` is a pure function from the current state and one inbound
message to the next state, an optional command to send and an optional
verdict. ``CheckStateMachine`` keeps the current state and records verdicts
in a ``ResultSlot``.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum, auto

from ..config.model import CheckConfig
from ..irc.models import (
    InboundMessage,
    NoSuchNick,
    StatsUptimeReply,
    TransportError,
    Welcome,
    WhoisUserReply,
)
from ..logs.logger import logger
from .result import ResultSlot, RunResult
from .uptime import UptimeParseError, parse_uptime

STATS_UPTIME_COMMAND = "STATS u"


class CheckState(Enum):
    AWAITING_WELCOME = auto()
    AWAITING_WHOIS_REPLY = auto()
    AWAITING_STATS_REPLY = auto()
    TERMINAL = auto()


@dataclass(frozen=True, slots=True)
class SendWhois:
    nick: str


@dataclass(frozen=True, slots=True)
class SendRaw:
    line: str


OutboundCommand = SendWhois | SendRaw


@dataclass(frozen=True, slots=True)
class Transition:
    state: CheckState
    command: OutboundCommand | None = None
    result: RunResult | None = None


def _fail(reason: str) -> Transition:
    return Transition(CheckState.TERMINAL, result=RunResult.failure(reason))


def _check_uptime(config: CheckConfig, text: str) -> Transition:
    try:
        uptime = parse_uptime(text)
    except UptimeParseError as e:
        return _fail(str(e))
    seconds_up = uptime.total_seconds
    logger.log_event(
        "check",
        "uptime",
        level=logging.DEBUG,
        server=config.server,
        seconds_up=seconds_up,
        threshold=config.interval,
    )
    if seconds_up < config.interval:
        # Rebooted since the previous scheduled check
        return _fail(f"Server {config.server} up for {seconds_up} seconds")
    return Transition(CheckState.TERMINAL, result=RunResult.success())


def transition(
    config: CheckConfig, state: CheckState, message: InboundMessage
) -> Transition:
    """Compute the next step of the check. Unexpected messages leave the state unchanged."""
    if state is CheckState.TERMINAL:
        return Transition(state)

    if isinstance(message, TransportError):
        return _fail(message.reason)

    if isinstance(message, NoSuchNick) and state is not CheckState.AWAITING_WELCOME:
        return _fail(f"Could not find {message.nick} online")

    if isinstance(message, Welcome) and state is CheckState.AWAITING_WELCOME:
        return Transition(
            CheckState.AWAITING_WHOIS_REPLY, command=SendWhois(config.check_nick)
        )

    if isinstance(message, WhoisUserReply) and state is CheckState.AWAITING_WHOIS_REPLY:
        if message.hostname != config.expected_hostname:
            return _fail(
                f"{config.check_nick}'s host is {message.hostname} "
                f"instead of {config.expected_hostname}"
            )
        return Transition(
            CheckState.AWAITING_STATS_REPLY, command=SendRaw(STATS_UPTIME_COMMAND)
        )

    if isinstance(message, StatsUptimeReply) and state is CheckState.AWAITING_STATS_REPLY:
        return _check_uptime(config, message.text)

    return Transition(state)


class CheckStateMachine:
    def __init__(self, config: CheckConfig, slot: ResultSlot | None = None) -> None:
        self.config = config
        self.slot = slot if slot is not None else ResultSlot()
        self.state = CheckState.AWAITING_WELCOME

    @property
    def result(self) -> RunResult:
        return self.slot.result

    @property
    def finished(self) -> bool:
        return self.state is CheckState.TERMINAL or self.slot.is_set

    def feed(self, message: InboundMessage) -> OutboundCommand | None:
        """Apply one inbound message; returns the command to send, if any.

        Once the slot holds a verdict (possibly written by another writer) the
        machine is finished and ignores further input.
        """
        if self.finished:
            return None
        step = transition(self.config, self.state, message)
        if step.state is self.state and step.result is None:
            logger.log_event(
                "check",
                "ignored_message",
                level=logging.DEBUG,
                server=self.config.server,
                message=type(message).__name__,
                state=self.state.name,
            )
            return None
        self._set_state(step.state)
        if step.result is not None:
            self.slot.offer(step.result)
            logger.log_event(
                "check",
                "terminal",
                level=logging.DEBUG,
                server=self.config.server,
                outcome=step.result.describe(),
            )
        return step.command

    def _set_state(self, new_state: CheckState) -> None:
        if self.state != new_state:
            logger.log_event(
                "check",
                "state_change",
                level=logging.DEBUG,
                server=self.config.server,
                old_state=self.state.name,
                new_state=new_state.name,
            )
            self.state = new_state
