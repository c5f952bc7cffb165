"""IRC transport subsystem.

Contains parsing, dispatch and the asyncio TLS transport the health check
drives, plus the inbound message alphabet the check state machine consumes.
"""

from .async_irc import AsyncIRCTransport  # noqa: F401
from .dispatcher import IRCDispatcher  # noqa: F401
from .models import (  # noqa: F401
    CHECK_NUMERICS,
    ERR_NOSUCHNICK,
    RPL_STATSUPTIME,
    RPL_WELCOME,
    RPL_WHOISUSER,
    ConnectionState,
    InboundMessage,
    NoSuchNick,
    StatsUptimeReply,
    TransportError,
    Welcome,
    WhoisUserReply,
    to_inbound,
)
from .parser import IRCMessage, parse_irc_message  # noqa: F401
from .protocols import IRCTransport, MessageHandler  # noqa: F401

__all__ = [
    "AsyncIRCTransport",
    "CHECK_NUMERICS",
    "ConnectionState",
    "ERR_NOSUCHNICK",
    "IRCDispatcher",
    "IRCMessage",
    "IRCTransport",
    "InboundMessage",
    "MessageHandler",
    "NoSuchNick",
    "RPL_STATSUPTIME",
    "RPL_WELCOME",
    "RPL_WHOISUSER",
    "StatsUptimeReply",
    "TransportError",
    "Welcome",
    "WhoisUserReply",
    "parse_irc_message",
    "to_inbound",
]
