"""Reversible text codec for the statistic values.

Scheme: UTF-8 -> zlib -> base64 (standard alphabet, ASCII output).

There is no confidentiality here. Older tooling called this step
"encrypt"/"decrypt"; it is a plain reversible encoding and anyone can decode it.

``decode(encode(s)) == s`` holds for every ``str``: lone surrogates survive
through the ``surrogatepass`` error handler. The encoded form is not a stable
wire format across versions.
"""

from __future__ import annotations

import base64
import binascii
import zlib

from statpipe.errors import DecodeError
from statpipe.stage_registry import REGISTRY

STAGE = REGISTRY.get("encode").key

DEFAULT_LEVEL = 9
_TEXT_ERRORS = "surrogatepass"


def encode(text: str, *, level: int = DEFAULT_LEVEL) -> str:
    """Compress ``text`` and return it as printable base64."""
    if not isinstance(text, str):
        raise TypeError(f"encode() expects str, got {type(text).__name__}")
    raw = text.encode("utf-8", _TEXT_ERRORS)
    packed = zlib.compress(raw, level)
    return base64.b64encode(packed).decode("ascii")


def decode(text: str) -> str:
    """Invert :func:`encode`. Malformed input raises :class:`DecodeError`."""
    if not isinstance(text, str):
        raise DecodeError(stage=STAGE, message=f"expected str, got {type(text).__name__}")
    try:
        packed = base64.b64decode(text.encode("ascii"), validate=True)
    except (UnicodeEncodeError, binascii.Error) as exc:
        raise DecodeError(stage=STAGE, message=f"not base64: {exc}") from exc
    try:
        raw = zlib.decompress(packed)
    except zlib.error as exc:
        raise DecodeError(stage=STAGE, message=f"not a zlib stream: {exc}") from exc
    try:
        return raw.decode("utf-8", _TEXT_ERRORS)
    except UnicodeDecodeError as exc:
        raise DecodeError(stage=STAGE, message=f"payload is not UTF-8: {exc}") from exc


def stringify(value: float) -> str:
    """Shortest round-trippable decimal for a float (``repr``), e.g. ``'14.0'``."""
    return repr(float(value))
