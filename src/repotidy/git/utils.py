"""Utility helpers for the git runner."""

from __future__ import annotations

import os
import shlex
from typing import Mapping

# These override the repository git would otherwise discover from cwd.
_SANITIZED_VARS = {
    "GIT_DIR",
    "GIT_WORK_TREE",
    "GIT_INDEX_FILE",
}


def sanitize_environment(additional: Mapping[str, str] | None = None) -> dict[str, str]:
    """Return a sanitized environment suitable for subprocess execution."""

    env = dict(os.environ)
    for key in _SANITIZED_VARS:
        env.pop(key, None)
    if additional:
        env.update(additional)
    return env


def format_command(args: tuple[str, ...] | list[str]) -> str:
    """Render an argument vector for log and error messages."""

    return shlex.join(args)
