"""Pipeline execution package.

The core execution semantics live in :mod:`statpipe.pipeline.engine`.
"""

from .engine import (
    EXAMPLE_INPUT,
    Pipeline,
    PipelineResult,
    process,
)

__all__ = [
    "EXAMPLE_INPUT",
    "Pipeline",
    "PipelineResult",
    "process",
]
