#!/usr/bin/env python3
# Copyright 2026 sgfkit Contributors
# SPDX-License-Identifier: Apache-2.0

"""Run all CI checks locally: format, lint, type check, tests, sample files and build."""

import argparse
import pathlib
import subprocess
import sys
import time

from yachalk import chalk

# ###############
# Public Interface
# ###############

STEPS: list[tuple[str, list[str]]] = [
    ("Format check", ["uv", "run", "ruff", "format", "--check", "src/", "tests/"]),
    ("Lint", ["uv", "run", "ruff", "check", "src/", "tests/"]),
    ("Type check", ["uv", "run", "ty", "check", "src/"]),
    ("Tests", ["uv", "run", "pytest", "--cov=sgfkit", "--cov-report=term-missing"]),
]

BUILD_STEP: tuple[str, list[str]] = ("Build", ["uv", "build"])


def main() -> int:
    """Run all CI steps and report results."""
    parser = argparse.ArgumentParser(description="Run the sgfkit CI checks locally.")
    parser.add_argument("--skip-build", action="store_true", help="Do not build the distribution")
    args = parser.parse_args()

    steps = list(STEPS)
    samples = _sample_files()
    if samples:
        steps.append(("Sample files", ["uv", "run", "sgfkit", "check", *samples]))
    if not args.skip_build:
        steps.append(BUILD_STEP)

    results: list[tuple[str, bool, float]] = []
    for name, cmd in steps:
        _banner(name)
        start = time.monotonic()
        proc = subprocess.run(cmd, cwd=_repo_root())
        results.append((name, proc.returncode == 0, time.monotonic() - start))

    _banner("  Summary")
    for name, passed, elapsed in results:
        color = chalk.green if passed else chalk.red
        print(color(f"  {'PASS' if passed else 'FAIL'}  {name} ({elapsed:.1f}s)"))
    print()
    return 0 if all(passed for _, passed, _ in results) else 1


# ################
# Implementation
# ################


def _repo_root() -> pathlib.Path:
    return pathlib.Path(__file__).parent.parent


def _sample_files() -> list[str]:
    """Return the SGF files under tests/data, relative to the repository root."""
    data_dir = _repo_root() / "tests" / "data"
    return sorted(str(path.relative_to(_repo_root())) for path in data_dir.glob("*.sgf"))


def _banner(title: str) -> None:
    sep = chalk.blue("=" * 60)
    print(f"\n{sep}")
    print(chalk.blue(title))
    print(sep)


if __name__ == "__main__":
    sys.exit(main())
