"""Building of shell command lines from run templates and file lists."""

from __future__ import annotations

import logging
import re
import shlex
from dataclasses import dataclass, field
from typing import Iterable

logger = logging.getLogger(__name__)

_SURROUNDING_QUOTES = re.compile(r"^'(.*)'\Z")


@dataclass
class Job:
    """Command lines to execute and the files they were built from."""

    execs: list[str] = field(default_factory=list)
    files: list[str] = field(default_factory=list)


@dataclass
class FilesTemplate:
    """Files to substitute for a template and how often it occurs."""

    files: list[str] = field(default_factory=list)
    count: int = 0


def intersect(a: Iterable[str], b: Iterable[str]) -> bool:
    """Return True if the two collections share an element."""
    seen = set(a)
    return any(item in seen for item in b)


def replace_positional_arguments(text: str, args: list[str]) -> str:
    """Substitute ``{0}`` with all arguments and ``{N}`` with the N-th one."""
    text = text.replace("{0}", " ".join(args))
    for number, arg in enumerate(args, start=1):
        text = text.replace(f"{{{number}}}", arg)
    return text


def escape_files(files: Iterable[str]) -> list[str]:
    """Shell-quote non-empty file names."""
    escaped = [shlex.quote(name) for name in files if name]
    logger.debug("files after escaping: %s", escaped)
    return escaped


def _div_trunc(a: int, b: int) -> int:
    quotient = abs(a) // abs(b)
    return quotient if (a >= 0) == (b > 0) else -quotient


def replace_in_chunks(
    command: str, templates: dict[str, FilesTemplate], maxlen: int
) -> Job:
    """Substitute file templates, splitting into several commands to fit ``maxlen``."""
    if not templates:
        return Job(execs=[command])

    total = 0
    all_files: list[str] = []
    for name, template in templates.items():
        if template.count == 0:
            continue
        total += template.count
        maxlen += template.count * len(name)
        all_files.extend(template.files)
        template.files = escape_files(template.files)

    maxlen -= len(command)
    if total > 0:
        maxlen = _div_trunc(maxlen, total)

    exhausted = 0
    commands: list[str] = []
    while True:
        line = command
        for name, template in templates.items():
            added, rest = get_n_chars(template.files, maxlen)
            if not rest:
                exhausted += 1
            else:
                template.files = rest
            line = replace_quoted(line, name, added)

        logger.debug("job: %s", line)
        commands.append(line)
        if exhausted >= len(templates):
            break

    return Job(execs=commands, files=all_files)


def get_n_chars(items: list[str], n: int) -> tuple[list[str], list[str]]:
    """Split off leading items fitting into ``n`` characters, at least one."""
    if not items:
        return [], []

    length = 0
    for index, item in enumerate(items):
        length += len(item)
        if index > 0:
            length += 1  # a separating space
        if length > n:
            cut = max(index, 1)
            return list(items[:cut]), list(items[cut:])

    return list(items), []


def replace_quoted(source: str, substitution: str, files: list[str]) -> str:
    """Replace the substitution, honouring quotes written around it."""
    for quote in ('"', "'", ""):
        sub = f"{quote}{substitution}{quote}"
        if sub not in source:
            continue

        if quote:
            quoted = [
                quote + _SURROUNDING_QUOTES.sub(r"\1", name) + quote for name in files
            ]
        else:
            quoted = list(files)

        source = source.replace(sub, " ".join(quoted))

    return source