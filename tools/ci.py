#!/usr/bin/env python3
# Copyright 2026 CaseFile Contributors
# SPDX-License-Identifier: Apache-2.0

"""Run the CI checks locally: format, lint, type check, tests, example test cases, and build.

Pass step names (case-insensitive) to run a subset, e.g. ``tools/ci.py lint tests``.
"""

import subprocess
import sys
import time
from pathlib import Path

from yachalk import chalk

# ###############
# Public Interface
# ###############

REPO_ROOT = Path(__file__).resolve().parent.parent
CASES_DIR = REPO_ROOT / "tests" / "data" / "cases"

STEPS: dict[str, list[list[str]]] = {
    "format": [["uv", "run", "ruff", "format", "--check", "src/", "tests/", "tools/"]],
    "lint": [["uv", "run", "ruff", "check", "src/", "tests/", "tools/"]],
    "typecheck": [["uv", "run", "ty", "check", "src/"]],
    "tests": [["uv", "run", "pytest", "--cov=casefile", "--cov-report=term-missing"]],
    "cases": [["uv", "run", "casefile", "check", str(case)] for case in sorted(CASES_DIR.glob("*.sol"))],
    "build": [["uv", "build"]],
}


def main(argv: list[str]) -> int:
    """Run the selected CI steps (all by default) and print a summary."""
    selected = [name.lower() for name in argv] or list(STEPS)
    unknown = [name for name in selected if name not in STEPS]
    if unknown:
        print(chalk.red(f"Unknown step(s): {', '.join(unknown)} (choose from {', '.join(STEPS)})"))
        return 2

    results: list[tuple[str, bool, float]] = []
    for name in selected:
        _banner(name)
        start = time.monotonic()
        passed = all(subprocess.run(cmd, cwd=REPO_ROOT).returncode == 0 for cmd in STEPS[name])
        results.append((name, passed, time.monotonic() - start))

    _banner("summary")
    for name, passed, elapsed in results:
        colour = chalk.green if passed else chalk.red
        print(colour(f"  {'PASS' if passed else 'FAIL'}  {name} ({elapsed:.1f}s)"))
    print()
    return 0 if all(passed for _, passed, _ in results) else 1


# ################
# Implementation
# ################


def _banner(title: str) -> None:
    sep = chalk.blue("=" * 60)
    print(f"\n{sep}\n{chalk.blue(title.capitalize())}\n{sep}")


if __name__ == "__main__":
    sys.exit(main(sys.argv[1:]))
