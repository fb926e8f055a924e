"""Descriptive statistics over the filtered sequence.

Both reductions are two-pass and recompute the mean of the sequence they are
given, so :func:`standard_deviation` stays correct when called on its own.

Notes
-----
- Population standard deviation: the divisor is ``count``, not ``count - 1``.
- Values are promoted to float64 before reducing. Integer sums below 2**53
  are exact, so ``mean`` equals ``sum / count`` bit for bit.
- When the plain sum or the squared deviations overflow float64, both
  reductions are redone on values scaled by ``max(|x|)`` and scaled back.
  A result that is still not finite raises :class:`DomainError`.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Sequence

import numpy as np

from statpipe.errors import DomainError, EmptyInputError
from statpipe.stage_registry import REGISTRY

STAGE = REGISTRY.get("stats").key


@dataclass(frozen=True)
class Statistics:
    count: int
    mean: float
    stddev: float

    def as_dict(self) -> dict[str, Any]:
        return {"count": self.count, "mean": self.mean, "stddev": self.stddev}


def _as_float(seq: Sequence[float], what: str) -> np.ndarray:
    try:
        a = np.asarray(list(seq), dtype=np.float64)
    except OverflowError as exc:
        raise DomainError(stage=STAGE, message=f"{what}: value exceeds float64 range") from exc
    if a.size == 0:
        raise EmptyInputError(stage=STAGE, message=f"{what} of an empty sequence")
    if not np.all(np.isfinite(a)):
        raise DomainError(stage=STAGE, message=f"{what}: non-finite input value")
    return a


def _finite(x: float, what: str) -> float:
    if not np.isfinite(x):
        raise DomainError(stage=STAGE, message=f"{what} overflows float64 ({x!r})")
    return float(x)


def _scaled(a: np.ndarray) -> tuple[np.ndarray, float]:
    scale = float(np.max(np.abs(a)))
    if scale == 0.0:
        return a, 1.0
    return a / scale, scale


def _mean(a: np.ndarray) -> float:
    with np.errstate(over="ignore"):
        total = a.sum()
    if np.isfinite(total):
        return float(total / a.size)
    s, scale = _scaled(a)
    return _finite(s.sum() / a.size * scale, "mean")


def mean(seq: Sequence[float]) -> float:
    """Arithmetic mean (sum / count)."""
    return _mean(_as_float(seq, "mean"))


def standard_deviation(seq: Sequence[float]) -> float:
    """Population standard deviation: ``sqrt(sum((x - mean)**2) / count)``."""
    a = _as_float(seq, "standard deviation")
    with np.errstate(over="ignore", invalid="ignore"):
        dev = a - _mean(a)
        var = np.sum(dev * dev) / a.size
    if np.isfinite(var):
        return float(np.sqrt(var))
    s, scale = _scaled(a)
    dev = s - s.sum() / s.size
    return _finite(np.sqrt(np.sum(dev * dev) / s.size) * scale, "standard deviation")


def describe(seq: Sequence[float]) -> Statistics:
    values = list(seq)
    return Statistics(count=len(values), mean=mean(values), stddev=standard_deviation(values))
