"""CLI wrapper: Run linter."""

from __future__ import annotations

import sys

from cli._runner import SOURCE_PATHS, run


def main() -> None:
    run([sys.executable, "-m", "ruff", "check", *SOURCE_PATHS, *sys.argv[1:]])
