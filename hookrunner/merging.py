"""Merging of settings that job groups pass down to their jobs."""

from __future__ import annotations

from typing import Any


def first(*args: str) -> str:
    """Return the first non-empty string, or an empty string."""
    return next((arg for arg in args if arg), "")


def join(*args: Any) -> Any:
    """Merge exclude values.

    Lists are concatenated in order and ``None`` is ignored. The first other
    value ends the merge: the list gathered so far is returned if it is not
    empty, else that value itself.
    """
    result: list[Any] = []
    for arg in args:
        if arg is None:
            continue
        if isinstance(arg, list):
            result.extend(arg)
            continue
        return result if result else arg
    return result


def inherit_exclude(inherited: Any, exclude: Any) -> Any:
    """Compute the exclude value a group hands down to its jobs.

    A list of globs extends an inherited list or replaces any other inherited
    value; a regular expression always replaces it; anything else inherits.
    """
    if isinstance(exclude, list):
        if isinstance(inherited, list):
            return [*inherited, *exclude]
        return exclude
    if isinstance(exclude, str):
        return exclude
    return inherited