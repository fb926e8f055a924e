"""Pydantic schema for config.yaml.

The pipeline stages themselves are fixed; the config only carries the
resource bound, codec level and logging level.

Notes
-----
- We allow extra keys (forward compatibility).
- `find_unknown_keys()` provides user-facing warnings about typos.
- `schema_validate()` returns a small report object (ok/errors/warnings).
"""


from __future__ import annotations


from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator


# ---------------------------- report objects ----------------------------


@dataclass(frozen=True)
class SchemaIssue:
    code: str
    message: str
    hint: str = ""


@dataclass(frozen=True)
class SchemaReport:
    ok: bool
    errors: List[SchemaIssue]
    warnings: List[SchemaIssue]


# ------------------------------ pydantic ------------------------------


class LimitsBlock(BaseModel):
    """Resource bounds.

    max_input_size caps the number of raw values accepted by one run.
    """

    model_config = ConfigDict(extra="allow")

    max_input_size: int = Field(default=1_000_000, ge=1)


class CodecBlock(BaseModel):
    model_config = ConfigDict(extra="allow")

    level: int = Field(default=9, ge=0, le=9)


class LoggingBlock(BaseModel):
    model_config = ConfigDict(extra="allow")

    level: Optional[str] = None

    @field_validator("level")
    @classmethod
    def _upper(cls, v: Optional[str]) -> Optional[str]:
        if v is None:
            return v
        v = str(v).upper().strip()
        if v not in {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"}:
            raise ValueError(f"unknown log level {v!r}")
        return v


class PipelineConfig(BaseModel):
    model_config = ConfigDict(extra="allow")

    limits: LimitsBlock = Field(default_factory=LimitsBlock)
    codec: CodecBlock = Field(default_factory=CodecBlock)
    logging: LoggingBlock = Field(default_factory=LoggingBlock)


_KNOWN_BLOCKS: Dict[str, type[BaseModel]] = {
    "limits": LimitsBlock,
    "codec": CodecBlock,
    "logging": LoggingBlock,
}


def find_unknown_keys(raw: Dict[str, Any]) -> List[str]:
    """Return dotted paths of keys the schema does not know (likely typos)."""
    unknown: List[str] = []
    for key, value in (raw or {}).items():
        block = _KNOWN_BLOCKS.get(str(key))
        if block is None:
            unknown.append(str(key))
            continue
        if isinstance(value, dict):
            for sub in value:
                if sub not in block.model_fields:
                    unknown.append(f"{key}.{sub}")
    return unknown


def schema_validate(raw: Dict[str, Any]) -> SchemaReport:
    errors: List[SchemaIssue] = []
    warnings: List[SchemaIssue] = []

    try:
        PipelineConfig.model_validate(raw or {})
    except ValidationError as exc:
        for e in exc.errors():
            loc = ".".join(str(p) for p in e.get("loc", ()))
            errors.append(SchemaIssue(code="SCHEMA", message=f"{loc}: {e.get('msg')}"))

    for path in find_unknown_keys(raw):
        warnings.append(
            SchemaIssue(code="UNKNOWN_KEY", message=f"Unknown config key: {path}", hint="typo?")
        )

    return SchemaReport(ok=not errors, errors=errors, warnings=warnings)
