"""Health check core: verdicts, uptime parsing and the state machine."""

from .machine import (  # noqa: F401
    STATS_UPTIME_COMMAND,
    CheckState,
    CheckStateMachine,
    OutboundCommand,
    SendRaw,
    SendWhois,
    Transition,
    transition,
)
from .result import ResultSlot, ResultStatus, RunResult  # noqa: F401
from .uptime import Uptime, UptimeParseError, parse_uptime  # noqa: F401

__all__ = [
    "CheckState",
    "CheckStateMachine",
    "OutboundCommand",
    "ResultSlot",
    "ResultStatus",
    "RunResult",
    "STATS_UPTIME_COMMAND",
    "SendRaw",
    "SendWhois",
    "Transition",
    "Uptime",
    "UptimeParseError",
    "parse_uptime",
    "transition",
]
