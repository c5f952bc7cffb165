"""
Unit tests for the pure check transition function.
"""

from ircprobe.check.machine import CheckState, SendRaw, SendWhois, transition
from ircprobe.check.result import ResultStatus, RunResult
from ircprobe.irc.models import (
    NoSuchNick,
    StatsUptimeReply,
    TransportError,
    Welcome,
    WhoisUserReply,
)
from tests.fixtures.irc_fixtures import EXPECTED_HOSTNAME, make_config

CONFIG = make_config(interval=300)


def test_welcome_requests_whois():
    step = transition(CONFIG, CheckState.AWAITING_WELCOME, Welcome())
    assert step.state is CheckState.AWAITING_WHOIS_REPLY
    assert step.command == SendWhois("doug")
    assert step.result is None


def test_matching_host_requests_stats():
    step = transition(
        CONFIG,
        CheckState.AWAITING_WHOIS_REPLY,
        WhoisUserReply(nick="doug", hostname=EXPECTED_HOSTNAME),
    )
    assert step.state is CheckState.AWAITING_STATS_REPLY
    assert step.command == SendRaw("STATS u")
    assert step.result is None


def test_host_mismatch_fails_with_observed_and_expected_hosts():
    config = make_config(expected_hostname="cnn.com")
    step = transition(
        config,
        CheckState.AWAITING_WHOIS_REPLY,
        WhoisUserReply(nick="doug", hostname=EXPECTED_HOSTNAME),
    )
    assert step.state is CheckState.TERMINAL
    assert step.command is None
    assert step.result == RunResult.failure(
        "doug's host is ip-192-231-221-38.ec2.internal instead of cnn.com"
    )


def test_host_match_is_exact_not_substring():
    config = make_config(expected_hostname="ec2.internal")
    step = transition(
        config,
        CheckState.AWAITING_WHOIS_REPLY,
        WhoisUserReply(nick="doug", hostname=EXPECTED_HOSTNAME),
    )
    assert step.result is not None
    assert step.result.status is ResultStatus.FAILURE


def test_no_such_nick_fails_after_whois():
    for state in (CheckState.AWAITING_WHOIS_REPLY, CheckState.AWAITING_STATS_REPLY):
        step = transition(CONFIG, state, NoSuchNick("nobodynowhere"))
        assert step.state is CheckState.TERMINAL
        assert step.result == RunResult.failure("Could not find nobodynowhere online")


def test_no_such_nick_before_whois_is_ignored():
    step = transition(CONFIG, CheckState.AWAITING_WELCOME, NoSuchNick("someone"))
    assert step.state is CheckState.AWAITING_WELCOME
    assert step.result is None


def test_recent_reboot_fails():
    step = transition(
        CONFIG,
        CheckState.AWAITING_STATS_REPLY,
        StatsUptimeReply("Server up 0 days, 00:00:10"),
    )
    assert step.result == RunResult.failure("Server irc.horph.com up for 10 seconds")


def test_uptime_equal_to_threshold_passes():
    step = transition(
        make_config(interval=10),
        CheckState.AWAITING_STATS_REPLY,
        StatsUptimeReply("Server up 0 days, 00:00:10"),
    )
    assert step.state is CheckState.TERMINAL
    assert step.result == RunResult.success()


def test_uptime_just_below_threshold_fails():
    step = transition(
        make_config(interval=11),
        CheckState.AWAITING_STATS_REPLY,
        StatsUptimeReply("Server up 0 days, 00:00:10"),
    )
    assert step.result == RunResult.failure("Server irc.horph.com up for 10 seconds")


def test_negative_threshold_accepts_fresh_boot():
    step = transition(
        make_config(interval=-1),
        CheckState.AWAITING_STATS_REPLY,
        StatsUptimeReply("Server up 0 days, 00:00:00"),
    )
    assert step.result == RunResult.success()


def test_unparseable_stats_fails():
    step = transition(CONFIG, CheckState.AWAITING_STATS_REPLY, StatsUptimeReply("whoa"))
    assert step.result == RunResult.failure("Could not find enough info in stats call")


def test_transport_error_fails_from_any_live_state():
    for state in (
        CheckState.AWAITING_WELCOME,
        CheckState.AWAITING_WHOIS_REPLY,
        CheckState.AWAITING_STATS_REPLY,
    ):
        step = transition(CONFIG, state, TransportError(ConnectionResetError("reset by peer")))
        assert step.state is CheckState.TERMINAL
        assert step.result == RunResult.failure("reset by peer")


def test_out_of_order_replies_are_ignored():
    step = transition(
        CONFIG, CheckState.AWAITING_WHOIS_REPLY, StatsUptimeReply("Server up 0 days, 00:00:10")
    )
    assert step.state is CheckState.AWAITING_WHOIS_REPLY
    assert step.result is None
    assert step.command is None


def test_terminal_state_absorbs_everything():
    for message in (Welcome(), NoSuchNick("x"), TransportError("boom")):
        step = transition(CONFIG, CheckState.TERMINAL, message)
        assert step.state is CheckState.TERMINAL
        assert step.result is None
        assert step.command is None


def test_transition_is_deterministic():
    message = StatsUptimeReply("Server up 0 days, 00:00:10")
    first = transition(CONFIG, CheckState.AWAITING_STATS_REPLY, message)
    second = transition(CONFIG, CheckState.AWAITING_STATS_REPLY, message)
    assert first == second
