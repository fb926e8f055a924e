from __future__ import annotations

import logging
import os
import time

from rich.logging import RichHandler


LEVELS = {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"}


def resolve_level(level: str | None = None, config_level: str | None = None) -> str:
    """Resolve a log level name.

    First match wins: argument, ``STATPIPE_LOG_LEVEL``, config ``logging.level``, INFO.
    """

    if level is None:
        level = os.environ.get("STATPIPE_LOG_LEVEL") or config_level or "INFO"
    level = str(level).upper().strip()
    if level not in LEVELS:
        level = "INFO"
    return level


def setup_logging(level: str | None = None, *, config_level: str | None = None) -> None:
    """Configure concise, readable console logging.

    Uses standard `logging` + RichHandler. Safe to call multiple times.

    Level resolution (first match wins):
      1) argument `level`
      2) env var `STATPIPE_LOG_LEVEL`
      3) `config_level` (the `logging.level` block of config.yaml)
      4) default = "INFO"
    """

    level = resolve_level(level, config_level)

    # Avoid duplicated handlers on re-init.
    root = logging.getLogger()
    for h in list(root.handlers):
        root.removeHandler(h)

    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%H:%M:%S]",
        handlers=[
            RichHandler(
                rich_tracebacks=True,
                tracebacks_show_locals=False,
                show_path=False,
                show_time=True,
                omit_repeated_times=False,
            )
        ],
    )


class timer:
    """Lightweight context timer for logs.

    Example:
        with timer("transform"):
            ...
    """

    def __init__(
        self,
        name: str,
        logger: logging.Logger | None = None,
        level: int = logging.INFO,
    ):
        self.name = name
        self.logger = logger or logging.getLogger("statpipe")
        self.level = level
        self.t0 = 0.0
        self.elapsed = 0.0

    def __enter__(self):
        self.t0 = time.perf_counter()
        self.logger.log(self.level, "▶ %s…", self.name)
        return self

    def __exit__(self, exc_type, exc, tb):
        self.elapsed = time.perf_counter() - self.t0
        if exc is None:
            self.logger.log(self.level, "✓ %s (%.4f s)", self.name, self.elapsed)
            return False
        self.logger.error("✗ %s FAILED (%.4f s): %s", self.name, self.elapsed, exc)
        return False
