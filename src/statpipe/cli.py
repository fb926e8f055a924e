from __future__ import annotations

import argparse
import json
import logging
import re
import sys
from pathlib import Path

from rich import print
from rich.markup import escape

from statpipe.codec import decode
from statpipe.config import load_config
from statpipe.errors import InputError, PipelineError
from statpipe.log import setup_logging, timer
from statpipe.pipeline import EXAMPLE_INPUT, Pipeline
from statpipe.stage_registry import REGISTRY
from statpipe.version import get_version_info

_SPLIT = re.compile(r"[\s,;]+")


def read_values(path: Path) -> list[int]:
    """Parse whitespace/comma separated integers from a text file."""
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise InputError(stage="input", message=f"cannot read {path}: {exc}") from exc
    out: list[int] = []
    for tok in _SPLIT.split(text.strip()):
        if not tok:
            continue
        try:
            out.append(int(tok))
        except ValueError as exc:
            raise InputError(stage="input", message=f"{path.name}: not an integer: {tok!r}") from exc
    return out


def _cmd_run(args: argparse.Namespace, log: logging.Logger) -> int:
    cfg = load_config(args.config)
    if cfg.logging.level:
        setup_logging(args.log_level, config_level=cfg.logging.level)
    pipe = Pipeline.from_config(cfg)

    if args.input:
        values = read_values(Path(args.input))
    elif args.values:
        values = list(args.values)
    else:
        values = list(EXAMPLE_INPUT)
        log.info("No input given, using the example sequence")

    with timer("pipeline", log):
        res = pipe.process(values)

    if args.json:
        sys.stdout.write(json.dumps(res.as_dict(), indent=2) + "\n")
        return 0

    mean, stddev = res.decode_statistics()
    print(f"[bold]Filtered:[/bold] {list(res.filtered)}")
    print(f"[bold]Mean:[/bold] {mean!r}  [dim]({res.encoded_mean})[/dim]")
    print(f"[bold]Std. deviation:[/bold] {stddev!r}  [dim]({res.encoded_stddev})[/dim]")
    return 0


def _cmd_decode(args: argparse.Namespace, log: logging.Logger) -> int:
    for text in args.text:
        print(escape(decode(text)))
    return 0


def _cmd_stages(args: argparse.Namespace, log: logging.Logger) -> int:
    for s in REGISTRY.iter():
        print(f"{s.title}  [dim]({s.key})[/dim]")
    return 0


def _cmd_version(args: argparse.Namespace, log: logging.Logger) -> int:
    v = get_version_info()
    print(f"statpipe {v.pipeline_version} (package {v.package_version}, Python {v.python}, {v.platform})")
    return 0


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="statpipe")
    p.add_argument(
        "--log-level",
        default=None,
        help="CRITICAL|ERROR|WARNING|INFO|DEBUG (or env STATPIPE_LOG_LEVEL)",
    )
    sub = p.add_subparsers(dest="cmd", required=True)

    p_run = sub.add_parser("run", help="Run the pipeline on a sequence of integers")
    p_run.add_argument("values", nargs="*", type=int, help="Input integers (default: example sequence)")
    p_run.add_argument("--input", default=None, help="Text file with whitespace/comma separated integers")
    p_run.add_argument("--config", default=None, help="YAML config path")
    p_run.add_argument("--json", action="store_true", help="Print the result as JSON")
    p_run.set_defaults(func=_cmd_run)

    p_dec = sub.add_parser("decode", help="Decode encoded statistic values")
    p_dec.add_argument("text", nargs="+")
    p_dec.set_defaults(func=_cmd_decode)

    p_st = sub.add_parser("stages", help="List pipeline stages in execution order")
    p_st.set_defaults(func=_cmd_stages)

    p_ver = sub.add_parser("version", help="Print version info")
    p_ver.set_defaults(func=_cmd_version)
    return p


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    setup_logging(args.log_level)
    log = logging.getLogger("statpipe")

    try:
        return int(args.func(args, log))
    except PipelineError as exc:
        log.error("%s", exc)
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
