"""Development tasks for nuka-code.

Usage: uv run devops.py <task> [<task> ...]
Tasks: fmt, lint, test, clean, check (lint + test)
"""

import subprocess
import sys
from collections.abc import Callable

Command = list[str]


def _run(title: str, *commands: Command) -> None:
    """Run commands in order and stop at the first failure."""
    print(f"==> {title}")
    for cmd in commands:
        result = subprocess.run(cmd)  # nosec: B603, B607
        if result.returncode != 0:
            print(f"Command failed: {' '.join(cmd)}", file=sys.stderr)
            sys.exit(result.returncode)


def fmt() -> None:
    """Format with Ruff and apply its safe fixes."""
    _run("Formatting", ["ruff", "format", "."], ["ruff", "check", "--fix", "."])


def lint() -> None:
    """Check formatting and lint rules without changing files."""
    _run("Linting", ["ruff", "format", "--check", "."], ["ruff", "check", "."])


def test() -> None:
    """Run the pytest suite."""
    _run("Testing", ["uv", "run", "pytest", "-q"])


def clean() -> None:
    """Remove Python caches and packaging output."""
    remove_dirs = ["-type", "d", "-prune", "-exec", "rm", "-rf", "{}", "+"]
    _run(
        "Cleaning",
        ["find", ".", "-name", "__pycache__", *remove_dirs],
        ["find", ".", "-name", "*.egg-info", *remove_dirs],
        ["rm", "-rf", ".pytest_cache", ".ruff_cache", "dist", "build"],
    )


def check() -> None:
    """Lint, then test."""
    lint()
    test()


TASKS: dict[str, Callable[[], None]] = {
    "fmt": fmt,
    "lint": lint,
    "test": test,
    "clean": clean,
    "check": check,
}


if __name__ == "__main__":
    names = sys.argv[1:]
    unknown = [name for name in names if name not in TASKS]
    if not names or unknown:
        print(__doc__, file=sys.stderr)
        sys.exit(2)
    for name in names:
        TASKS[name]()
