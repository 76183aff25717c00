#!/usr/bin/env python3
# Copyright 2026 Jarmin Contributors
# SPDX-License-Identifier: Apache-2.0

"""Run the jarmin CI checks locally: format, lint, type check, tests, smoke test and build.

Pass step names to run a subset, e.g. ``tools/ci.py lint tests``.
"""

import argparse
import subprocess
import sys
import time
from pathlib import Path

from yachalk import chalk

# ###############
# Public Interface
# ###############

STEPS: dict[str, tuple[str, list[str]]] = {
    "format": ("Format check", ["uv", "run", "ruff", "format", "--check", "src/", "tests/", "tools/"]),
    "lint": ("Lint", ["uv", "run", "ruff", "check", "src/", "tests/", "tools/"]),
    "types": ("Type check", ["uv", "run", "ty", "check", "src/"]),
    "tests": ("Tests", ["uv", "run", "pytest", "--cov=jarmin", "--cov-report=term-missing"]),
    "smoke": ("CLI smoke test", ["uv", "run", "jarmin", "--help"]),
    "build": ("Build", ["uv", "build"]),
}


def main() -> int:
    """Run the selected CI steps and report a summary."""
    parser = argparse.ArgumentParser(description=__doc__, formatter_class=argparse.RawDescriptionHelpFormatter)
    parser.add_argument("steps", nargs="*", metavar="STEP", help=f"Steps to run (default: all): {', '.join(STEPS)}")
    parser.add_argument("--fail-fast", action="store_true", help="Stop at the first failing step")
    args = parser.parse_args()
    unknown = [step for step in args.steps if step not in STEPS]
    if unknown:
        parser.error(f"unknown step(s): {', '.join(unknown)}")

    selected = args.steps or list(STEPS)
    results: list[tuple[str, bool, float]] = []
    for key in selected:
        name, cmd = STEPS[key]
        _banner(name)
        start = time.monotonic()
        proc = subprocess.run(cmd, cwd=_REPO_ROOT)
        passed = proc.returncode == 0
        results.append((name, passed, time.monotonic() - start))
        if not passed and args.fail_fast:
            break

    _banner("  Summary")
    for name, passed, elapsed in results:
        colour = chalk.green if passed else chalk.red
        print(colour(f"  {'PASS' if passed else 'FAIL'}  {name} ({elapsed:.1f}s)"))
    skipped = len(selected) - len(results)
    if skipped:
        print(chalk.yellow(f"  {skipped} step(s) skipped after failure"))
    print()
    return 0 if all(passed for _, passed, _ in results) and not skipped else 1


# ################
# Implementation
# ################

_REPO_ROOT = Path(__file__).resolve().parent.parent


def _banner(title: str) -> None:
    sep = chalk.blue("=" * 60)
    print(f"\n{sep}")
    print(chalk.blue(title))
    print(sep)


if __name__ == "__main__":
    sys.exit(main())
