from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml

from statpipe.errors import ConfigError
from statpipe.schema import PipelineConfig, schema_validate

log = logging.getLogger(__name__)

STAGE = "config"


def _read_yaml(cfg_path: Path) -> dict[str, Any]:
    try:
        text = cfg_path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigError(stage=STAGE, message=f"cannot read {cfg_path}: {exc}") from exc
    try:
        data = yaml.safe_load(text) or {}
    except yaml.YAMLError as exc:
        raise ConfigError(stage=STAGE, message=f"invalid YAML in {cfg_path}: {exc}") from exc
    if not isinstance(data, dict):
        raise ConfigError(stage=STAGE, message=f"{cfg_path}: top level must be a mapping")
    return data


def load_config(cfg_path: str | Path | None = None) -> PipelineConfig:
    """Load and validate a YAML config.

    ``None`` returns the defaults. Unknown keys are logged as warnings;
    schema errors raise :class:`ConfigError`.
    """
    if cfg_path is None:
        return PipelineConfig()

    cfg_path = Path(cfg_path).expanduser().resolve()
    raw = _read_yaml(cfg_path)

    report = schema_validate(raw)
    for w in report.warnings:
        log.warning("%s (%s)", w.message, cfg_path.name)
    if not report.ok:
        details = "; ".join(e.message for e in report.errors)
        raise ConfigError(stage=STAGE, message=f"{cfg_path.name}: {details}")

    return PipelineConfig.model_validate(raw)


def load_config_any(cfg: Any) -> PipelineConfig:
    """Load config from path/dict/model objects."""
    if cfg is None or isinstance(cfg, (str, Path)):
        return load_config(cfg)
    if isinstance(cfg, PipelineConfig):
        return cfg
    if isinstance(cfg, dict):
        report = schema_validate(cfg)
        if not report.ok:
            raise ConfigError(stage=STAGE, message="; ".join(e.message for e in report.errors))
        return PipelineConfig.model_validate(cfg)
    raise TypeError(f"Unsupported config type: {type(cfg)}")


def dump_config(cfg: PipelineConfig, path: str | Path) -> Path:
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    p.write_text(yaml.safe_dump(cfg.model_dump(), sort_keys=False), encoding="utf-8")
    return p
