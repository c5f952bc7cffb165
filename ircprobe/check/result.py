"""Run verdicts and the write-once slot holding them."""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass
from enum import Enum, auto

from ..logs.logger import logger


class ResultStatus(Enum):
    PENDING = auto()
    SUCCESS = auto()
    FAILURE = auto()


@dataclass(frozen=True, slots=True)
class RunResult:
    status: ResultStatus
    reason: str | None = None
    timed_out: bool = False

    @classmethod
    def pending(cls) -> RunResult:
        return cls(ResultStatus.PENDING)

    @classmethod
    def success(cls) -> RunResult:
        return cls(ResultStatus.SUCCESS)

    @classmethod
    def failure(cls, reason: str, *, timed_out: bool = False) -> RunResult:
        return cls(ResultStatus.FAILURE, reason, timed_out)

    @property
    def is_terminal(self) -> bool:
        return self.status is not ResultStatus.PENDING

    @property
    def ok(self) -> bool:
        return self.status is ResultStatus.SUCCESS

    def describe(self) -> str:
        if self.status is ResultStatus.FAILURE:
            return f"failure ({self.reason})"
        return self.status.name.lower()


class ResultSlot:
    """Holds the verdict of one run; only the first terminal write is kept.

    The state machine, the transport error drain and the watchdog all write
    here. Every write after the first is logged and dropped.
    """

    def __init__(self) -> None:
        self._result = RunResult.pending()
        self._done = asyncio.Event()

    @property
    def result(self) -> RunResult:
        return self._result

    @property
    def is_set(self) -> bool:
        return self._result.is_terminal

    def offer(self, result: RunResult) -> bool:
        """Store ``result`` if no verdict exists yet. Returns True if stored."""
        if not result.is_terminal:
            raise ValueError("only terminal results can be stored")
        if self._result.is_terminal:
            logger.log_event(
                "check",
                "result_ignored",
                level=logging.DEBUG,
                reason=result.describe(),
            )
            return False
        self._result = result
        self._done.set()
        return True

    async def wait(self) -> RunResult:
        await self._done.wait()
        return self._result
