from __future__ import annotations

from typing import Callable, Iterable

Predicate = Callable[[int], bool]


def is_even_above_ten(value: int) -> bool:
    return value % 2 == 0 and value > 10


def filter_values(seq: Iterable[int], predicate: Predicate = is_even_above_ten) -> list[int]:
    """Keep the values passing ``predicate``, preserving their input order."""
    return [v for v in seq if predicate(v)]
