"""Stage registry (single source of truth).

This module defines the *only* canonical list of pipeline stages. The
:class:`~statpipe.pipeline.engine.Pipeline` runs them in this order, labels
its stage timers with :attr:`StageDef.title`, and the stage modules report
failures under :attr:`StageDef.key`.

Contract
--------
- Stage numbering is fixed: 01..05.
- The order is fixed; stages are not configurable.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator


@dataclass(frozen=True)
class StageDef:
    """Single stage definition."""

    id: int
    key: str
    label: str

    @property
    def title(self) -> str:
        """Human title with numbering: ``NN Label``."""

        return f"{int(self.id):02d} {self.label}"


# -----------------------------------------------------------------------------
# Canonical stage table (DO NOT reorder).
# -----------------------------------------------------------------------------
STAGES: tuple[StageDef, ...] = (
    StageDef(1, "sort", "Sort Ascending"),
    StageDef(2, "transform", "Nonlinear Transform"),
    StageDef(3, "filter", "Even Above Ten"),
    StageDef(4, "stats", "Mean / Std. Deviation"),
    StageDef(5, "encode", "Reversible Encoding"),
)


class StageRegistry:
    """Lookup helpers for stage metadata."""

    def __init__(self, stages: Iterable[StageDef] = STAGES) -> None:
        self._stages = tuple(stages)
        self._by_key = {s.key: s for s in self._stages}

    def get(self, key: str) -> StageDef:
        k = str(key or "").strip().lower()
        if k not in self._by_key:
            raise KeyError(f"Unknown stage key: {key!r}")
        return self._by_key[k]

    def iter(self) -> Iterator[StageDef]:
        yield from self._stages

    def keys(self) -> tuple[str, ...]:
        return tuple(s.key for s in self._stages)

    def title(self, key: str) -> str:
        return self.get(key).title


REGISTRY = StageRegistry()
