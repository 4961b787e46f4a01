"""Helpers for running a hook: files from stdin, hook modes and script locations."""

from __future__ import annotations

import os
from typing import Iterable

ENV_ENABLED = "LEFTHOOK"
ENV_SKIP_OUTPUT = "LEFTHOOK_QUIET"
ENV_OUTPUT = "LEFTHOOK_OUTPUT"


class PipedAndParallelError(ValueError):
    """A hook or group is configured to be both piped and parallel."""

    def __init__(self) -> None:
        super().__init__(
            "conflicting options 'piped' and 'parallel' are set to 'true', "
            "remove one of this option from hook group"
        )


def parse_files_from_string(paths: str) -> list[str]:
    """Split NUL-separated file names; the part after the last NUL is always kept."""
    return paths.split("\0")


def check_hook_modes(parallel: bool, piped: bool) -> None:
    """Raise PipedAndParallelError if both modes are enabled."""
    if parallel and piped:
        raise PipedAndParallelError()


def _join(*parts: str) -> str:
    present = [part for part in parts if part]
    if not present:
        return ""
    return os.path.normpath(os.path.join(*present))


def source_dirs(
    root: str,
    source_dir: str,
    source_dir_local: str,
    remote_dirs: Iterable[str] = (),
) -> list[str]:
    """Return the directories that scripts of a hook are looked up in.

    The configured source directories come first, then the ``.config``
    alternatives, then the source directory inside each remote checkout.
    """
    dirs = [
        _join(root, source_dir),
        _join(root, source_dir_local),
        _join(root, ".config", "lefthook"),
        _join(root, ".config", "lefthook-local"),
    ]
    # Only source_dir applies to remotes; a local source dir makes no sense there.
    dirs.extend(_join(remote, source_dir) for remote in remote_dirs)
    return dirs


def hook_disabled() -> bool:
    """Return True if hooks are switched off through the environment."""
    return os.environ.get(ENV_ENABLED) in ("0", "false")