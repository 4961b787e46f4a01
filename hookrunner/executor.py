"""Execution of shell commands for hooks."""

from __future__ import annotations

import io
import logging
import os
import re
import subprocess
import sys
from dataclasses import dataclass, field
from typing import IO, Any

logger = logging.getLogger(__name__)

COLOR_ON = "on"
COLOR_OFF = "off"

_ENV_REF = re.compile(r"\$(?:\{(\w+)\}|(\w+))")


@dataclass
class ExecOptions:
    """What to execute and how."""

    name: str = ""
    root: str = ""
    commands: list[str] = field(default_factory=list)
    env: dict[str, str] = field(default_factory=dict)
    interactive: bool = False
    use_stdin: bool = False
    colors: str | None = None


def _expand_env(value: str) -> str:
    return _ENV_REF.sub(lambda m: os.environ.get(m.group(1) or m.group(2), ""), value)


def _fileno(stream: Any) -> int | None:
    if stream is None:
        return None
    try:
        return stream.fileno()
    except (AttributeError, OSError, io.UnsupportedOperation, ValueError):
        return None


def _isatty(stream: Any) -> bool:
    try:
        return bool(stream.isatty())
    except (AttributeError, OSError, ValueError):
        return False


def _write(stream: Any, data: bytes | None) -> None:
    if stream is None or not data:
        return
    if isinstance(stream, io.TextIOBase):
        stream.write(data.decode(errors="replace"))
    else:
        stream.write(data)


def _stdin_kwargs(source: Any) -> dict[str, Any]:
    if source is None:
        return {"stdin": subprocess.DEVNULL}
    fd = _fileno(source)
    if fd is not None:
        return {"stdin": fd}
    data = source.read()
    if isinstance(data, str):
        data = data.encode()
    return {"input": data}


class CommandExecutor:
    """Runs commands through ``sh -c``, one after another."""

    def execute(
        self,
        opts: ExecOptions,
        stdin: IO[bytes] | None = None,
        stdout: IO[Any] | None = None,
    ) -> None:
        """Run every command of the options; raise CalledProcessError on failure."""
        tty = None
        if opts.interactive and not _isatty(sys.stdin):
            try:
                tty = open("/dev/tty", "rb")  # noqa: SIM115
            except OSError as err:
                logger.error("Couldn't enable TTY input: %s", err)

        env = dict(os.environ)
        env.update({name: _expand_env(value) for name, value in opts.env.items()})
        if opts.colors == COLOR_ON:
            env["CLICOLOR_FORCE"] = "true"
        elif opts.colors == COLOR_OFF:
            env["NO_COLOR"] = "true"

        root = os.path.abspath(opts.root)
        source = tty if tty is not None else stdin
        try:
            # One command may be split into several to fit the shell's length limit.
            for command in opts.commands:
                self._run(command, opts, root, env, source, stdout)
        finally:
            if tty is not None:
                tty.close()

    @staticmethod
    def _run(
        command: str,
        opts: ExecOptions,
        root: str,
        env: dict[str, str],
        source: Any,
        stdout: Any,
    ) -> None:
        logger.debug("run: %s", command)
        argv = ["sh", "-c", command]

        if opts.interactive or opts.use_stdin:
            out_fd = _fileno(stdout)
            if out_fd is not None:
                out_target: Any = out_fd
            elif stdout is None:
                out_target = subprocess.DEVNULL
            else:
                out_target = subprocess.PIPE
            proc = subprocess.run(
                argv,
                cwd=root,
                env=env,
                stdout=out_target,
                stderr=_fileno(sys.stderr),
                check=False,
                **_stdin_kwargs(source),
            )
        else:
            proc = subprocess.run(
                argv,
                cwd=root,
                env=env,
                stdin=subprocess.DEVNULL,
                stdout=subprocess.PIPE,
                stderr=subprocess.STDOUT,
                check=False,
            )

        _write(stdout, proc.stdout)
        if proc.returncode != 0:
            raise subprocess.CalledProcessError(proc.returncode, command, output=proc.stdout)