"""statpipe package.

The CLI shows :data:`statpipe.version.PIPELINE_VERSION`.
"""

from .version import __version__, PIPELINE_VERSION
from .pipeline import Pipeline, PipelineResult, process

__all__ = ["__version__", "PIPELINE_VERSION", "Pipeline", "PipelineResult", "process"]
