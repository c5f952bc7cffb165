"""IRC message parsing utilities."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class IRCMessage:
    raw: str
    prefix: str | None
    command: str | None
    args: list[str] = field(default_factory=list)
    tags: dict[str, str] = field(default_factory=dict)

    def arg(self, index: int, default: str = "") -> str:
        return self.args[index] if index < len(self.args) else default


def parse_irc_message(raw_line: str) -> IRCMessage:
    tags: dict[str, str] = {}
    prefix: str | None = None
    trailing: str | None = None
    command: str | None = None

    original = raw_line

    if raw_line.startswith("@"):
        tags_part, _, raw_line = raw_line.partition(" ")
        tags = _parse_tags(tags_part[1:])

    if raw_line.startswith(":"):
        remainder = raw_line[1:]
        if " " in remainder:
            prefix, raw_line = remainder.split(" ", 1)
        else:  # malformed; treat whole remainder as prefix and leave rest empty
            prefix = remainder
            raw_line = ""

    if raw_line.startswith(":"):
        raw_line, trailing = "", raw_line[1:]
    elif " :" in raw_line:
        raw_line, trailing = raw_line.split(" :", 1)

    args: list[str] = []
    parts = raw_line.split()
    if parts:
        command = parts[0].upper()
        args = parts[1:]
    if trailing is not None:
        args.append(trailing)

    return IRCMessage(raw=original, prefix=prefix, command=command, args=args, tags=tags)


def _parse_tags(raw_tags: str) -> dict[str, str]:
    tags: dict[str, str] = {}
    for tag in raw_tags.split(";"):
        if "=" in tag:
            k, v = tag.split("=", 1)
        else:
            k, v = tag, ""
        tags[k] = v
    return tags
