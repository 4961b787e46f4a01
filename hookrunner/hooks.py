"""Housekeeping of installed git hooks, config lookup and checksum state."""

from __future__ import annotations

import logging
import os
import re
import time
from datetime import timedelta
from decimal import Decimal, InvalidOperation
from typing import Iterable

logger = logging.getLogger(__name__)

OLD_HOOK_POSTFIX = ".old"
HOOK_CONTENT_FINGERPRINT = "LEFTHOOK"
CONFIG_EXTENSIONS = (".yml", ".yaml", ".toml", ".json")

_CHECKSUM_LINE = re.compile(r"(\w+)\s+(\d+)", re.ASCII)
_INT64_MAX = 2**63 - 1

_UNIT_NANOSECONDS = {
    "ns": 1,
    "us": 1_000,
    "µs": 1_000,
    "μs": 1_000,
    "ms": 1_000_000,
    "s": 1_000_000_000,
    "m": 60 * 1_000_000_000,
    "h": 3600 * 1_000_000_000,
}
_DURATION_PART = re.compile(r"(\d+\.?\d*|\.\d+)(ns|us|µs|μs|ms|s|m|h)", re.ASCII)


class OldHookExistsError(FileExistsError):
    """A foreign hook cannot be moved aside because its backup already exists."""

    def __init__(self, hook: str) -> None:
        super().__init__(f"can't rename {hook} to {hook}{OLD_HOOK_POSTFIX} - file already exists")
        self.hook = hook

    def __str__(self) -> str:
        return self.args[0]


def is_env_enabled(name: str) -> bool:
    """Return True if the variable is set to something other than "0" or "false"."""
    value = os.environ.get(name, "")
    return bool(value) and value not in ("0", "false")


def is_lefthook_file(path: str) -> bool:
    """Return True if any line of the file carries the hook fingerprint."""
    try:
        with open(path, encoding="utf-8", errors="replace") as file:
            return any(HOOK_CONTENT_FINGERPRINT in line for line in file)
    except OSError:
        return False


def clean_hook(hooks_path: str, hook: str, force: bool) -> None:
    """Remove an installed hook, keeping a foreign one as ``<hook>.old``.

    Raises OldHookExistsError if the backup already exists and ``force`` is off.
    """
    hook_path = os.path.join(hooks_path, hook)
    if not os.path.lexists(hook_path):
        return

    if is_lefthook_file(hook_path):
        os.remove(hook_path)
        return

    old_path = hook_path + OLD_HOOK_POSTFIX
    if os.path.lexists(old_path):
        if not force:
            raise OldHookExistsError(hook)
        logger.info("File %s.old already exists, overwriting", hook)

    os.replace(hook_path, old_path)
    logger.info("Renamed %s to %s.old", hook_path, hook_path)


def find_main_config(path: str, names: Iterable[str]) -> str:
    """Return the path of the first config found among the names and extensions.

    Raises FileNotFoundError if there is none.
    """
    for name in names:
        for extension in CONFIG_EXTENSIONS:
            config_path = os.path.join(path, name + extension)
            if os.path.exists(config_path):
                return config_path
    raise FileNotFoundError("no lefthook config found")


def read_checksum(path: str) -> tuple[str, int] | None:
    """Return the stored checksum and timestamp, or None if there are none."""
    try:
        with open(path, encoding="utf-8", errors="replace") as file:
            for line in file:
                match = _CHECKSUM_LINE.search(line)
                if match is None:
                    continue
                timestamp = int(match.group(2))
                if timestamp > _INT64_MAX:
                    return None
                return match.group(1), timestamp
    except OSError:
        return None
    return None


def hooks_synchronized(checksum_path: str, config_path: str, config_checksum: str) -> bool:
    """Return True if the stored state matches the config's timestamp or checksum."""
    stored = read_checksum(checksum_path)
    if stored is None:
        return False
    stored_checksum, stored_timestamp = stored
    if not stored_checksum:
        return False

    try:
        config_timestamp = int(os.stat(config_path).st_mtime // 1)
    except OSError:
        return False

    if stored_timestamp == config_timestamp:
        return True
    return stored_checksum == config_checksum


def parse_duration(text: str) -> timedelta:
    """Parse a duration such as ``"1h30m"``, ``"90s"`` or ``"1.5m"``.

    Units are ns, us (µs), ms, s, m and h. Raises ValueError on bad input.
    """
    original = text
    sign = 1
    if text[:1] in ("+", "-"):
        sign = -1 if text[0] == "-" else 1
        text = text[1:]
    if text == "0":
        return timedelta(0)
    if not text:
        raise ValueError(f"invalid duration {original!r}")

    total = Decimal(0)
    pos = 0
    while pos < len(text):
        match = _DURATION_PART.match(text, pos)
        if match is None:
            raise ValueError(f"invalid duration {original!r}")
        try:
            number = Decimal(match.group(1))
        except InvalidOperation as err:
            raise ValueError(f"invalid duration {original!r}") from err
        total += number * _UNIT_NANOSECONDS[match.group(2)]
        pos = match.end()

    nanoseconds = int(total)
    if nanoseconds > _INT64_MAX:
        raise ValueError(f"invalid duration {original!r}")
    return timedelta(microseconds=sign * nanoseconds / 1000)


def should_refetch(refetch: bool, frequency: str, fetch_head_path: str) -> bool:
    """Decide whether a remote config has to be fetched again."""
    if refetch or frequency == "always":
        return True
    if frequency in ("", "never"):
        return False

    try:
        delta = parse_duration(frequency)
    except ValueError as err:
        logger.warning(
            "Couldn't parse refetch frequency %s. Will continue anyway: %s", frequency, err
        )
        return False

    try:
        last_fetch = os.stat(fetch_head_path).st_mtime
    except FileNotFoundError:
        return True
    except OSError as err:
        logger.warning("Failed to detect last fetch time: %s", err)
        return False

    return time.time() > last_fetch + delta.total_seconds()