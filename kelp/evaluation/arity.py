"""Uniform arity checks for native callables.

Natives receive the whole call list, head included, so the argument count is
one less than its length. Each check returns an Error value on mismatch and
None otherwise:

    if (err := check_arity("def", 2, lst)) is not None:
        return err
"""

from __future__ import annotations

from typing import Optional

from kelp.types.values import Error, List


def check_arity(name: str, expected: int, lst: List) -> Optional[Error]:
    actual = len(lst) - 1
    if actual != expected:
        return Error(f"{name} takes {expected} args, got {actual}")
    return None


def check_min_arity(name: str, minimum: int, lst: List) -> Optional[Error]:
    actual = len(lst) - 1
    if actual < minimum:
        return Error(f"{name} takes at least {minimum} args, got {actual}")
    return None
