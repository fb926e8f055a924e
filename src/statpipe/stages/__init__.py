"""Pure per-element / per-sequence stages.

Each stage is a plain function over in-memory values; the pipeline engine
composes them in :data:`statpipe.stage_registry.STAGES` order.
"""

from .select import filter_values, is_even_above_ten
from .sort import ascending_compare, sort_ascending
from .transform import transform, transform_all

__all__ = [
    "ascending_compare",
    "filter_values",
    "is_even_above_ten",
    "sort_ascending",
    "transform",
    "transform_all",
]
