"""Outcomes of commands, scripts and job groups."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field


class Status(enum.Enum):
    """How an executable finished."""

    SUCCESS = "success"
    FAILURE = "failure"
    SKIP = "skip"


@dataclass(frozen=True)
class Result:
    """Name of a command or script, its status and an optional failure text."""

    name: str
    status: Status = Status.SUCCESS
    text: str = ""
    sub: list[Result] = field(default_factory=list)

    def success(self) -> bool:
        return self.status is Status.SUCCESS

    def failure(self) -> bool:
        return self.status is Status.FAILURE


def skipped(name: str) -> Result:
    return Result(name=name, status=Status.SKIP)


def succeeded(name: str) -> Result:
    return Result(name=name, status=Status.SUCCESS)


def failed(name: str, text: str) -> Result:
    return Result(name=name, status=Status.FAILURE, text=text)


def group_result(name: str, results: list[Result]) -> Result:
    """Combine the results of a group: any failure fails it, else any skip skips it."""
    status = Status.SUCCESS
    for res in results:
        if res.status is Status.FAILURE:
            status = Status.FAILURE
            break
        if res.status is Status.SKIP:
            status = Status.SKIP
    return Result(name=name, status=status, sub=list(results))