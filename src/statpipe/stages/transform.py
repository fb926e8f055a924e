"""Nonlinear per-element transform.

Formula (must match exactly, results are used as a regression oracle)::

    r1 = (value * 2 + 3) / 1.5
    r2 = r1**2 - sqrt(r1)
    r3 = r2 * ln(r2 + 1) / tanh(r2)
    result = trunc(r3)

Failure policy
--------------
Errors are raised, never replaced by a sentinel value:

- ``r1 < 0`` (every integer ``value <= -2``): sqrt is undefined -> :class:`DomainError`
- ``r2 <= -1``: log is undefined -> :class:`DomainError`
- ``r2 == 0`` (``r1`` in ``{0, 1}``): ``tanh(r2) == 0`` -> :class:`DivisionByZero`
- float overflow or a non-finite result -> :class:`DomainError`

``r2 == 0`` is unreachable from integers (it needs ``value`` in ``{-1.5, -0.75}``);
:func:`transform` accepts any real number so that boundary stays testable.
"""

from __future__ import annotations

import math
from typing import Callable, Iterable

from statpipe.errors import DivisionByZero, DomainError, PipelineError
from statpipe.stage_registry import REGISTRY

STAGE = REGISTRY.get("transform").key


def _scale(value: float) -> float:
    return (value * 2 + 3) / 1.5


def _shape(r1: float) -> float:
    if r1 < 0:
        raise DomainError(stage=STAGE, message=f"sqrt undefined for r1={r1!r}")
    return r1**2 - math.sqrt(r1)


def _weight(r2: float) -> float:
    if r2 <= -1:
        raise DomainError(stage=STAGE, message=f"log undefined for r2+1={r2 + 1!r}")
    denom = math.tanh(r2)
    if denom == 0:
        raise DivisionByZero(stage=STAGE, message=f"tanh(r2) == 0 at r2={r2!r}")
    return r2 * math.log(r2 + 1) / denom


def transform(value: float) -> int:
    """Apply the fixed nonlinear formula to one value, truncating toward zero."""
    try:
        r3 = _weight(_shape(_scale(value)))
    except PipelineError as exc:
        raise exc.at(value=value) from None
    except OverflowError as exc:
        raise DomainError(stage=STAGE, message=f"float overflow: {exc}", value=value) from exc
    if not math.isfinite(r3):
        raise DomainError(stage=STAGE, message=f"non-finite result {r3!r}", value=value)
    return int(r3)


def transform_all(
    seq: Iterable[int], fn: Callable[[int], int] = transform
) -> list[int]:
    """Apply ``fn`` to every element.

    The first failure (lowest index) aborts the whole map with its index attached.
    """
    out: list[int] = []
    for i, v in enumerate(seq):
        try:
            out.append(fn(v))
        except PipelineError as exc:
            raise exc.at(index=i, value=v) from exc
    return out
