"""Typed failures raised by the pipeline stages.

Hard-fail policy
----------------
Every stage raises a :class:`PipelineError` subclass instead of returning a
sentinel. Each error carries the stage key, a short machine-readable code and,
where it applies, the offending index / value.

The concrete classes also derive from the closest builtin exception so callers
can catch ``ValueError`` / ``ZeroDivisionError`` without importing this module.
"""

from __future__ import annotations

from typing import Any


class PipelineError(RuntimeError):
    """Stage-scoped failure."""

    default_code = "PIPELINE"

    def __init__(
        self,
        *,
        stage: str,
        message: str,
        code: str | None = None,
        index: int | None = None,
        value: Any = None,
    ) -> None:
        self.stage = str(stage)
        self.code = str(code or self.default_code)
        self.message = str(message)
        self.index = index
        self.value = value
        super().__init__(self._format())

    def _format(self) -> str:
        where = ""
        if self.index is not None:
            where = f" (index={self.index}, value={self.value!r})"
        return f"[{self.stage}] {self.code}: {self.message}{where}"

    def at(self, *, value: Any, index: int | None = None) -> "PipelineError":
        """Return a copy of this error located at ``value`` (and ``index``)."""
        return type(self)(
            stage=self.stage,
            code=self.code,
            message=self.message,
            index=self.index if index is None else index,
            value=value,
        )


class DomainError(PipelineError, ValueError):
    """A sub-operation of the transform left the real-valued domain."""

    default_code = "DOMAIN"


class DivisionByZero(PipelineError, ZeroDivisionError):
    """The transform's final division has a zero denominator."""

    default_code = "DIV_ZERO"


class EmptyInputError(PipelineError, ValueError):
    """Statistics requested over an empty sequence."""

    default_code = "EMPTY_INPUT"


class DecodeError(PipelineError, ValueError):
    """Encoded text could not be reversed."""

    default_code = "DECODE"


class InputError(PipelineError, ValueError):
    """The raw input sequence is not a bounded sequence of integers."""

    default_code = "BAD_INPUT"


class ConfigError(PipelineError, ValueError):
    """Config file missing or invalid."""

    default_code = "CONFIG"
