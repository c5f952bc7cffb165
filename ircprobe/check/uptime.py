"""Parsing of the ``STATS u`` uptime reply."""

from __future__ import annotations

import re
from dataclasses import dataclass

UPTIME_PATTERN = re.compile(r"Server up (\d+) days, (\d\d):(\d\d):(\d\d)", re.ASCII)


class UptimeParseError(ValueError):
    """The reply text could not be turned into an uptime."""


@dataclass(frozen=True, slots=True)
class Uptime:
    days: int
    hours: int
    minutes: int
    seconds: int

    @property
    def total_seconds(self) -> int:
        return ((self.days * 24 + self.hours) * 60 + self.minutes) * 60 + self.seconds


def _to_int(text: str) -> int:
    try:
        return int(text)
    except ValueError as e:
        raise UptimeParseError(f"Error converting number: {e}") from e


def parse_uptime(text: str) -> Uptime:
    """Extract the uptime from a ``STATS u`` reply.

    Raises:
        UptimeParseError: with the user-facing failure reason.
    """
    match = UPTIME_PATTERN.search(text)
    if match is None:
        raise UptimeParseError("Could not find enough info in stats call")
    days, hours, minutes, seconds = (_to_int(g) for g in match.groups())
    return Uptime(days, hours, minutes, seconds)
