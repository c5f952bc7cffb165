"""
Unit tests for the error hierarchy and log_error classification.
"""

import logging

from ircprobe.check.result import RunResult
from ircprobe.errors import (
    CheckFailedError,
    CheckTimeoutError,
    ConfigError,
    ProbeError,
    TransportConnectError,
    classify_error,
    log_error,
)


def test_probe_error_copies_data():
    data = {"a": 1}
    err = ProbeError("msg", data=data)
    data["a"] = 2
    assert err.data == {"a": 1}
    assert str(err) == "msg"


def test_transport_connect_error_keeps_cause_text():
    cause = ConnectionRefusedError("refused")
    err = TransportConnectError(cause, address="h", port=1)
    assert str(err) == "refused"
    assert err.__cause__ is cause
    assert err.data == {"address": "h", "port": 1}


def test_transport_connect_error_without_text_uses_type_name():
    err = TransportConnectError(TimeoutError(), address="h", port=1)
    assert str(err) == "TimeoutError"


def test_check_failed_error_carries_result():
    result = RunResult.failure("Could not find doug online")
    err = CheckFailedError(result)
    assert str(err) == "Could not find doug online"
    assert err.result is result
    assert err.data == {"timeout": False}


def test_classification():
    result = RunResult.failure("late", timed_out=True)
    assert classify_error(TransportConnectError(OSError("x"), address="h", port=1)) == "network"
    assert classify_error(ConnectionResetError()) == "network"
    assert classify_error(ConfigError("bad")) == "config"
    assert classify_error(CheckTimeoutError(result)) == "timeout"
    assert classify_error(CheckFailedError(RunResult.failure("x"))) == "check"
    assert classify_error(ProbeError("x")) == "internal"
    assert classify_error(KeyError("x")) == "unknown"


def test_log_error_structured_line(caplog):
    err = ConfigError("INTERVAL is not set", data={"source": "env"})
    with caplog.at_level(logging.ERROR):
        log_error("Configuration error", err, context={"attempt": 1})
    message = caplog.records[-1].getMessage()
    assert message.startswith("[CONFIG] Configuration error: INTERVAL is not set")
    assert "Exception: ConfigError: INTERVAL is not set" in message
    assert "source=env" in message
    assert "attempt=1" in message
