"""Errors raised while preparing jobs for execution."""

from __future__ import annotations


class SkipError(Exception):
    """The job must not run; the reason tells why."""

    def __init__(self, reason: str) -> None:
        super().__init__(reason)
        self.reason = reason

    def __str__(self) -> str:
        return self.reason


class ScriptNotExistsError(Exception):
    """The script was found in none of the source directories."""

    def __init__(self, script_path: str) -> None:
        super().__init__(script_path)
        self.script_path = script_path

    def __str__(self) -> str:
        return f"script does not exist: {self.script_path}"