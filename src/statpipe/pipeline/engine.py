"""Fixed-order pipeline: sort -> transform -> filter -> stats -> encode.

:class:`Pipeline` is the composition root. Every stage is a plain callable
field so tests can substitute one; there is one implementation per stage and
the order never changes (see :mod:`statpipe.stage_registry`).

``process`` has no side effects beyond logging: no I/O, no global state.
"""

from __future__ import annotations

import functools
import logging
from dataclasses import dataclass
from typing import Any, Callable, Iterable, Sequence

from statpipe import codec, stats
from statpipe.errors import EmptyInputError, InputError
from statpipe.log import timer
from statpipe.schema import PipelineConfig
from statpipe.stage_registry import REGISTRY
from statpipe.stages import filter_values, is_even_above_ten, sort_ascending, transform, transform_all

log = logging.getLogger(__name__)

EXAMPLE_INPUT: tuple[int, ...] = (5, 3, 8, 1, 9, 7, 15, 22, 19)

SortFunc = Callable[[Iterable[int]], list[int]]
TransformFunc = Callable[[int], int]
PredicateFunc = Callable[[int], bool]
ReduceFunc = Callable[[Sequence[float]], float]
EncodeFunc = Callable[[str], str]
DecodeFunc = Callable[[str], str]


@dataclass(frozen=True)
class PipelineResult:
    """Immutable output bundle of one :meth:`Pipeline.process` call."""

    filtered: tuple[int, ...]
    encoded_mean: str
    encoded_stddev: str

    def as_dict(self) -> dict[str, Any]:
        return {
            "filtered": list(self.filtered),
            "encoded_mean": self.encoded_mean,
            "encoded_stddev": self.encoded_stddev,
        }

    def decode_statistics(self, decode: DecodeFunc = codec.decode) -> tuple[float, float]:
        """Return ``(mean, stddev)`` decoded back to floats."""
        return float(decode(self.encoded_mean)), float(decode(self.encoded_stddev))


@dataclass(frozen=True)
class Pipeline:
    """Composition root; each field is one stage, injectable for tests."""

    sort: SortFunc = sort_ascending
    transform: TransformFunc = transform
    keep: PredicateFunc = is_even_above_ten
    mean: ReduceFunc = stats.mean
    stddev: ReduceFunc = stats.standard_deviation
    encode: EncodeFunc = codec.encode
    max_input_size: int = 1_000_000

    @classmethod
    def from_config(cls, cfg: PipelineConfig, **overrides: Any) -> "Pipeline":
        kwargs: dict[str, Any] = {
            "max_input_size": cfg.limits.max_input_size,
            "encode": functools.partial(codec.encode, level=cfg.codec.level),
        }
        kwargs.update(overrides)
        return cls(**kwargs)

    def _validate(self, seq: Iterable[int]) -> list[int]:
        values = list(seq)
        if len(values) > self.max_input_size:
            raise InputError(
                stage="input",
                code="TOO_LARGE",
                message=f"{len(values)} values exceed max_input_size={self.max_input_size}",
            )
        for i, v in enumerate(values):
            if isinstance(v, bool) or not isinstance(v, int):
                raise InputError(
                    stage="input",
                    message=f"expected int, got {type(v).__name__}",
                    index=i,
                    value=v,
                )
        return values

    def process(self, seq: Iterable[int]) -> PipelineResult:
        values = self._validate(seq)
        log.debug("process: %d input values", len(values))

        with timer(REGISTRY.title("sort"), log, logging.DEBUG):
            ordered = self.sort(values)
        with timer(REGISTRY.title("transform"), log, logging.DEBUG):
            transformed = transform_all(ordered, self.transform)
        with timer(REGISTRY.title("filter"), log, logging.DEBUG):
            filtered = filter_values(transformed, self.keep)

        if not filtered:
            raise EmptyInputError(
                stage=REGISTRY.get("filter").key,
                message=f"no value survived the filter ({len(transformed)} transformed)",
            )

        with timer(REGISTRY.title("stats"), log, logging.DEBUG):
            m = self.mean(filtered)
            s = self.stddev(filtered)
        with timer(REGISTRY.title("encode"), log, logging.DEBUG):
            encoded_mean = self.encode(codec.stringify(m))
            encoded_stddev = self.encode(codec.stringify(s))

        return PipelineResult(
            filtered=tuple(filtered),
            encoded_mean=encoded_mean,
            encoded_stddev=encoded_stddev,
        )


def process(seq: Iterable[int]) -> PipelineResult:
    """Run the default pipeline on ``seq``."""
    return Pipeline().process(seq)
