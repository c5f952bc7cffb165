"""Build a CheckConfig from environment variables."""

from __future__ import annotations

import os
from collections.abc import Mapping

from pydantic import ValidationError

from ..errors.internal import ConfigError
from .model import CheckConfig

# Environment variable -> CheckConfig field
ENV_FIELDS: dict[str, str] = {
    "SERVER": "server",
    "ADDRESS": "address",
    "PORT": "port",
    "CHECKNICK": "check_nick",
    "EXPECTEDHOSTNAME": "expected_hostname",
    "CHECK_TIMEOUT": "timeout",
    "CONNECT_TIMEOUT": "connect_timeout",
    "IRC_NICK": "nick",
    "IRC_REALNAME": "realname",
    "USE_TLS": "use_tls",
}


def _parse_interval(raw: str | None) -> int:
    if raw is None:
        raise ConfigError("INTERVAL is not set")
    try:
        return int(raw.strip())
    except ValueError as e:
        raise ConfigError(f"Error converting interval to int: {e}") from e


def _describe_validation_error(error: ValidationError) -> str:
    fields = {v: k for k, v in ENV_FIELDS.items()}
    fields["interval"] = "INTERVAL"
    problems = []
    for item in error.errors():
        loc = item.get("loc") or ("?",)
        name = fields.get(str(loc[0]), str(loc[0]))
        problems.append(f"{name}: {item.get('msg')}")
    return "; ".join(problems)


def load_config(environ: Mapping[str, str] | None = None) -> CheckConfig:
    """Load the check configuration.

    Args:
        environ: Mapping to read from. Defaults to ``os.environ``.

    Raises:
        ConfigError: when a required variable is missing or malformed.
    """
    env = os.environ if environ is None else environ
    data: dict[str, object] = {
        field: env[name] for name, field in ENV_FIELDS.items() if env.get(name, "") != ""
    }
    data["interval"] = _parse_interval(env.get("INTERVAL"))
    try:
        return CheckConfig.from_dict(data)
    except ValidationError as e:
        raise ConfigError(
            f"Invalid configuration: {_describe_validation_error(e)}",
            data={"fields": [str(i.get("loc")) for i in e.errors()]},
        ) from e
