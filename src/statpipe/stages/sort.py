from __future__ import annotations

from typing import Iterable


def ascending_compare(a: int, b: int) -> int:
    """Three-way comparator for ascending order (``functools.cmp_to_key`` compatible)."""
    return (a > b) - (a < b)


def sort_ascending(seq: Iterable[int]) -> list[int]:
    """Return a new list with the values of ``seq`` in non-decreasing order.

    The caller's sequence is never modified.
    """
    return sorted(seq)
