from __future__ import annotations

from ircprobe.irc.models import (
    NoSuchNick,
    StatsUptimeReply,
    Welcome,
    WhoisUserReply,
    to_inbound,
)
from ircprobe.irc.parser import parse_irc_message


def test_parse_numeric_with_trailing():  # type: ignore[no-untyped-def]
    msg = parse_irc_message(":irc.horph.com 311 checker doug ~doug host.example * :Doug Q")
    assert msg.prefix == "irc.horph.com"
    assert msg.command == "311"
    assert msg.args == ["checker", "doug", "~doug", "host.example", "*", "Doug Q"]
    assert msg.arg(3) == "host.example"
    assert msg.arg(10, "missing") == "missing"


def test_parse_without_prefix():  # type: ignore[no-untyped-def]
    msg = parse_irc_message("PING :irc.horph.com")
    assert msg.prefix is None
    assert msg.command == "PING"
    assert msg.args == ["irc.horph.com"]


def test_parse_tags():  # type: ignore[no-untyped-def]
    msg = parse_irc_message("@time=2024-01-01T00:00:00Z;flag :srv 001 checker :hi")
    assert msg.tags == {"time": "2024-01-01T00:00:00Z", "flag": ""}
    assert msg.command == "001"


def test_parse_keeps_colons_inside_trailing():  # type: ignore[no-untyped-def]
    msg = parse_irc_message(":srv 242 checker :Server up 0 days, 00:00:10")
    assert msg.args == ["checker", "Server up 0 days, 00:00:10"]


def test_parse_malformed_prefix_only():  # type: ignore[no-untyped-def]
    msg = parse_irc_message(":justaprefix")
    assert msg.prefix == "justaprefix"
    assert msg.command is None
    assert msg.args == []


def test_command_is_uppercased():  # type: ignore[no-untyped-def]
    assert parse_irc_message("error :Closing link").command == "ERROR"


def test_to_inbound_maps_check_numerics():  # type: ignore[no-untyped-def]
    assert to_inbound(parse_irc_message(":srv 001 checker :Welcome")) == Welcome()
    assert to_inbound(
        parse_irc_message(":srv 311 checker doug ~doug cnn.com * :Doug")
    ) == WhoisUserReply(nick="doug", hostname="cnn.com")
    assert to_inbound(
        parse_irc_message(":srv 242 checker :Server up 1 days, 00:00:00")
    ) == StatsUptimeReply(text="Server up 1 days, 00:00:00")
    assert to_inbound(
        parse_irc_message(":srv 401 checker nobodynowhere :No such nick/channel")
    ) == NoSuchNick(nick="nobodynowhere")


def test_to_inbound_ignores_other_commands():  # type: ignore[no-untyped-def]
    assert to_inbound(parse_irc_message(":srv 318 checker doug :End of /WHOIS list")) is None
    assert to_inbound(parse_irc_message(":srv NOTICE * :hello")) is None


def test_short_reply_yields_empty_fields():  # type: ignore[no-untyped-def]
    assert to_inbound(parse_irc_message(":srv 311 checker doug")) == WhoisUserReply(
        nick="doug", hostname=""
    )
