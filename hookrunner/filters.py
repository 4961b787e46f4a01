"""Filtering of file lists by glob, exclusion, root and file type."""

from __future__ import annotations

import enum
import logging
import os
import re
import stat
from dataclasses import dataclass, field
from typing import Any, Iterable

from hookrunner.detect_text import detect_text

logger = logging.getLogger(__name__)

DETECT_BUF_SIZE = 1024
EXECUTABLE_MASK = 0o111


class TypeMask(enum.IntFlag):
    """File type requirements."""

    NONE = 0
    EXECUTABLE = enum.auto()
    NOT_EXECUTABLE = enum.auto()
    SYMLINK = enum.auto()
    NOT_SYMLINK = enum.auto()
    TEXT = enum.auto()
    BINARY = enum.auto()


DETECT_TYPES = TypeMask.TEXT | TypeMask.BINARY

_TYPE_NAMES = {
    "executable": TypeMask.EXECUTABLE,
    "symlink": TypeMask.SYMLINK,
    "not executable": TypeMask.NOT_EXECUTABLE,
    "not symlink": TypeMask.NOT_SYMLINK,
    "binary": TypeMask.BINARY,
    "text": TypeMask.TEXT,
}


@dataclass
class FilterParams:
    """What to filter a file list by."""

    glob: list[str] = field(default_factory=list)
    root: str = ""
    file_types: list[str] = field(default_factory=list)
    exclude: Any = None


def compile_glob(pattern: str) -> re.Pattern[str]:
    """Compile a glob into a regular expression matched with ``fullmatch``.

    ``*`` and ``**`` match any characters including ``/``, ``?`` matches one
    character, ``[...]``/``[!...]`` are character classes, ``{a,b}`` are
    alternatives and ``\\`` escapes the next character.
    """
    parts: list[str] = []
    depth = 0
    chars = iter(pattern)
    for ch in chars:
        if ch == "\\":
            escaped = next(chars, None)
            if escaped is None:
                raise ValueError(f"dangling escape in glob {pattern!r}")
            parts.append(re.escape(escaped))
        elif ch == "*":
            parts.append(".*")
        elif ch == "?":
            parts.append(".")
        elif ch == "[":
            body: list[str] = []
            for c in chars:
                if c == "]":
                    break
                body.append(c)
            else:
                raise ValueError(f"unclosed character class in glob {pattern!r}")
            negate = bool(body) and body[0] == "!"
            if negate:
                body = body[1:]
            if not body:
                raise ValueError(f"empty character class in glob {pattern!r}")
            content = "".join(c if c == "-" else re.escape(c) for c in body)
            parts.append(f"[{'^' if negate else ''}{content}]")
        elif ch == "{":
            depth += 1
            parts.append("(?:")
        elif ch == "}" and depth:
            depth -= 1
            parts.append(")")
        elif ch == "," and depth:
            parts.append("|")
        else:
            parts.append(re.escape(ch))
    if depth:
        raise ValueError(f"unclosed alternatives in glob {pattern!r}")
    return re.compile("".join(parts), re.DOTALL)


def apply(files: list[str], params: FilterParams) -> list[str]:
    """Filter files by glob, exclude, root and file types, in that order."""
    if not files:
        return []

    logger.debug("filtered [ ]: %s", files)
    files = by_glob(files, params.glob)
    files = by_exclude(files, params.exclude)
    files = by_root(files, params.root)
    files = by_type(files, params.file_types)
    logger.debug("filtered [x]: %s", files)
    return files


def by_glob(files: list[str], globs: list[str]) -> list[str]:
    """Keep files matching any of the globs, case-insensitively."""
    patterns = [compile_glob(g.lower()) for g in globs or () if g]
    if not patterns:
        return files
    return [f for pattern in patterns for f in files if pattern.fullmatch(f.lower())]


def by_exclude(files: list[str], exclude: Any) -> list[str]:
    """Drop files matching a regular expression or any glob of a list."""
    if exclude is None:
        return files
    if isinstance(exclude, str):
        if not exclude:
            return files
        try:
            regex = re.compile(exclude)
        except re.error:
            return list(files)
        return [f for f in files if not regex.search(f)]
    if isinstance(exclude, list):
        if not exclude:
            return files
        globs = [compile_glob(name) for name in exclude]
        return [f for f in files if not any(g.fullmatch(f) for g in globs)]

    logger.warning("invalid value for exclude option")
    return files


def by_root(files: list[str], root: str) -> list[str]:
    """Keep files under the root, replacing the root prefix with ``./``."""
    if not root:
        return files
    return [f.replace(root, "./", 1) for f in files if f.startswith(root)]


def by_type(files: list[str], types: list[str]) -> list[str]:
    """Keep files satisfying every requested file type."""
    if not types:
        return files

    mask = fill_type_mask(types)
    result = []
    for path in files:
        try:
            info = os.lstat(path)
        except OSError as err:
            logger.error("Couldn't check file type of %s: %s", path, err)
            continue

        is_symlink = stat.S_ISLNK(info.st_mode)
        is_executable = bool(stat.S_IMODE(info.st_mode) & EXECUTABLE_MASK)
        if mask & TypeMask.SYMLINK and not is_symlink:
            continue
        if mask & TypeMask.NOT_SYMLINK and is_symlink:
            continue
        if mask & TypeMask.EXECUTABLE and (not is_executable or is_symlink):
            continue
        if mask & TypeMask.NOT_EXECUTABLE and is_executable and not is_symlink:
            continue

        if mask & DETECT_TYPES:
            if not stat.S_ISREG(info.st_mode):
                continue
            text = check_is_text(path)
            if mask & TypeMask.TEXT and not text:
                continue
            if mask & TypeMask.BINARY and text:
                continue

        result.append(path)
    return result


def fill_type_mask(types: Iterable[str]) -> TypeMask:
    """Combine type names into a mask, warning about unknown names."""
    mask = TypeMask.NONE
    for name in types:
        flag = _TYPE_NAMES.get(name)
        if flag is None:
            logger.warning("Unknown filter type: %s", name)
            continue
        mask |= flag
    return mask


def check_is_text(path: str) -> bool:
    """Return True if the beginning of the file looks like text."""
    try:
        with open(path, "rb") as file:
            head = file.read(DETECT_BUF_SIZE)
    except OSError as err:
        logger.error("Couldn't read file for content detecting: %s", err)
        return False
    return detect_text(head)