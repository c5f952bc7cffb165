"""
Configuration constants for the IRC server health probe

This module contains the defaults used throughout the probe. Per-run settings
are read from the environment by ircprobe.config; only the socket read size
is overridden here, through an environment variable of the same name.
"""

import os
from collections.abc import Callable
from typing import TypeVar

T = TypeVar("T")


def _get_env(name: str, default: T, cast: Callable[[str], T]) -> T:
    """Read ``name`` from the environment converted with ``cast``.

    Unset or unparsable values fall back to ``default`` with a printed warning
    for the latter.
    """
    value = os.getenv(name)
    if value is None:
        return default
    try:
        return cast(value)
    except ValueError:
        print(f"Warning: Invalid value for {name}='{value}', using default {default}")
        return default


# Watchdog ceiling for a whole check run (seconds)
CHECK_TIMEOUT_SECONDS = 60.0

# Maximum time allowed for TCP + TLS handshake (seconds)
IRC_CONNECT_TIMEOUT = 10.0

# Default TLS port when PORT is not configured
IRC_DEFAULT_TLS_PORT = 6697

# Identity used when registering with the server
IRC_DEFAULT_NICK = "checker"
IRC_DEFAULT_REALNAME = "IRCTestSSL"

# Bytes requested per read from the socket
IRC_READ_CHUNK_SIZE = _get_env("IRC_READ_CHUNK_SIZE", 4096, int)

# Process exit codes for standalone mode
EXIT_SUCCESS = 0
EXIT_CHECK_FAILED = 1
EXIT_TIMEOUT = 2
EXIT_CONFIG_ERROR = 3
