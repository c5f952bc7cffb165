"""Inbound message alphabet of the check and the numerics it is built from."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto

from .parser import IRCMessage

RPL_WELCOME = "001"
RPL_WHOISUSER = "311"
RPL_STATSUPTIME = "242"
ERR_NOSUCHNICK = "401"

CHECK_NUMERICS = (RPL_WELCOME, RPL_WHOISUSER, RPL_STATSUPTIME, ERR_NOSUCHNICK)


class ConnectionState(Enum):
    DISCONNECTED = auto()
    CONNECTING = auto()
    REGISTERING = auto()
    CONNECTED = auto()
    QUITTING = auto()


@dataclass(frozen=True, slots=True)
class Welcome:
    pass


@dataclass(frozen=True, slots=True)
class WhoisUserReply:
    nick: str
    hostname: str


@dataclass(frozen=True, slots=True)
class StatsUptimeReply:
    text: str


@dataclass(frozen=True, slots=True)
class NoSuchNick:
    nick: str


@dataclass(frozen=True, slots=True)
class TransportError:
    error: BaseException | str

    @property
    def reason(self) -> str:
        if isinstance(self.error, str):
            return self.error
        return str(self.error) or type(self.error).__name__


InboundMessage = Welcome | WhoisUserReply | StatsUptimeReply | NoSuchNick | TransportError


def to_inbound(message: IRCMessage) -> InboundMessage | None:
    """Translate a parsed numeric into the check's message alphabet.

    Argument positions follow the replies as sent by the server, where the
    first argument is always the probe's own nick:

    - ``311 <me> <nick> <user> <host> * :<realname>``
    - ``242 <me> :Server up <days> days, <hh:mm:ss>``
    - ``401 <me> <nick> :No such nick/channel``
    """
    code = message.command
    if code == RPL_WELCOME:
        return Welcome()
    if code == RPL_WHOISUSER:
        return WhoisUserReply(nick=message.arg(1), hostname=message.arg(3))
    if code == RPL_STATSUPTIME:
        return StatsUptimeReply(text=message.arg(1))
    if code == ERR_NOSUCHNICK:
        return NoSuchNick(nick=message.arg(1))
    return None
