"""
Shared CLI runner helper.

Runs a tool inside the current interpreter's environment so the wrappers
behave the same under uv, a virtualenv or a plain install.
"""

from __future__ import annotations

import subprocess
from collections.abc import Sequence

SOURCE_PATHS = ("relay_pagination", "tests", "cli")


def run(cmd: Sequence[str]) -> None:
    """
    Run a command and exit with its return code.

    Args:
        cmd: Command and arguments to execute

    Example:
        >>> run([sys.executable, "-m", "pytest", "-q"])
    """
    result = subprocess.run(cmd)
    raise SystemExit(result.returncode)
