"""Convenient local test runner.

Pytest's `-m` option *selects* tests by marker.

So:
  - `pytest -m smoke` runs only tests marked `@pytest.mark.smoke` (others show as
    "deselected", that's normal).

In CI we run two suites:
  - fast unit tests:               `pytest -m "not smoke"`
  - end-to-end regression (smoke): `pytest -m smoke`

Usage
-----
  python scripts/run_tests.py ci
  python scripts/run_tests.py fast
  python scripts/run_tests.py smoke
  python scripts/run_tests.py all
"""

from __future__ import annotations

import argparse
import os
import subprocess
import sys
from pathlib import Path


def _repo_root() -> Path:
    return Path(__file__).resolve().parents[1]


def _src_env() -> dict[str, str]:
    """Allow running from a source checkout without `pip install -e .`."""
    env = dict(os.environ)
    src = str(_repo_root() / "src")
    parts = [p for p in env.get("PYTHONPATH", "").split(os.pathsep) if p]
    if src not in parts:
        env["PYTHONPATH"] = os.pathsep.join([src, *parts])
    return env


def _run(cmd: list[str]) -> int:
    print("\n$", " ".join(cmd))
    return subprocess.call(cmd, cwd=str(_repo_root()), env=_src_env())


def main(argv: list[str] | None = None) -> int:
    ap = argparse.ArgumentParser(description="Run statpipe test suites")
    ap.add_argument(
        "suite",
        nargs="?",
        default="ci",
        choices={"ci", "fast", "smoke", "all"},
        help="Which suite to run (default: ci)",
    )
    ap.add_argument("--pytest", default=sys.executable, help="Python used to run pytest")
    ap.add_argument("--quiet", action="store_true", help="Pass -q to pytest")
    args = ap.parse_args(argv)

    base = [args.pytest, "-m", "pytest"]
    q = ["-q"] if args.quiet else []

    if args.suite == "fast":
        return _run([*base, *q, "-m", "not smoke"])
    if args.suite == "smoke":
        return _run([*base, *q, "-m", "smoke"])
    if args.suite == "all":
        return _run([*base, *q])

    # ci: fast + smoke
    code = _run([*base, *q, "-m", "not smoke"])
    if code != 0:
        return code
    return _run([*base, *q, "-m", "smoke"])


if __name__ == "__main__":
    raise SystemExit(main())
