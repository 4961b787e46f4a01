"""Ordering of commands and scripts by priority and numeric prefixes."""

from __future__ import annotations

import functools
from typing import Iterable, Mapping

_INT64_MAX = 2**63 - 1


def _numeric_prefix(name: str) -> int | None:
    """Return the leading decimal number of a name, or None if it has none.

    A prefix made of non-ASCII digits, or one too large for a 64-bit
    integer, counts as unparsable and also yields None.
    """
    end = 0
    for ch in name:
        if not ch.isdecimal():
            break
        end += 1
    prefix = name[:end]
    if not prefix or not prefix.isascii():
        return None
    value = int(prefix)
    if value > _INT64_MAX:
        return None
    return value


def _has_prefix_digits(name: str) -> bool:
    return bool(name) and name[0].isdecimal()


def _less(a: str, b: str, priorities: Mapping[str, int]) -> bool:
    prio_a = priorities.get(a, 0) or 0
    prio_b = priorities.get(b, 0) or 0

    if prio_a != 0 or prio_b != 0:
        if prio_a == 0:
            return False
        if prio_b == 0:
            return True
        return prio_a < prio_b

    if not _has_prefix_digits(a):
        return a < b
    num_a = _numeric_prefix(a)
    if num_a is None:
        return a < b

    if not _has_prefix_digits(b):
        return True
    num_b = _numeric_prefix(b)
    if num_b is None:
        return True

    return num_a < num_b


def sort_by_priority(
    names: Iterable[str], priorities: Mapping[str, int] | None = None
) -> list[str]:
    """Return the names ordered for execution.

    Names with a non-zero priority come first, in ascending priority. The rest
    are ordered by a leading number if they have one, names without a number
    follow, and ties fall back to plain string order. The sort is stable.

    ``["1_command", "10command", "3 command", "command5"]`` is ordered as
    ``1_command, 3 command, 10command, command5``.
    """
    table: Mapping[str, int] = priorities or {}

    def compare(a: str, b: str) -> int:
        if _less(a, b, table):
            return -1
        if _less(b, a, table):
            return 1
        return 0

    return sorted(names, key=functools.cmp_to_key(compare))