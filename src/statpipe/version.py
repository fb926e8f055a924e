"""Version helpers.

This project keeps *two* version identifiers:

- ``__version__``: Python package version (PEP 440). This is what pip/packaging sees.
- ``PIPELINE_VERSION``: user-facing pipeline release shown by ``statpipe version``.

They are maintained together in this single module.
"""

from __future__ import annotations

from dataclasses import dataclass
import platform
import sys


__version__ = "1.2.0"
PIPELINE_VERSION = "v1.2.0"


@dataclass(frozen=True)
class VersionInfo:
    package_version: str
    pipeline_version: str
    python: str
    platform: str

    def as_dict(self) -> dict[str, str]:
        return {
            "package_version": self.package_version,
            "pipeline_version": self.pipeline_version,
            "python": self.python,
            "platform": self.platform,
        }


def get_version_info() -> VersionInfo:
    return VersionInfo(
        package_version=__version__,
        pipeline_version=PIPELINE_VERSION,
        python=sys.version.split()[0],
        platform=f"{platform.system()} {platform.release()} ({platform.machine()})",
    )
