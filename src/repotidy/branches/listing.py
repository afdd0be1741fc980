"""Remote branch listing."""

from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import Iterable

from ..git import GitRunner
from .models import PROTECTED_BRANCHES

logger = logging.getLogger(__name__)

REMOTE = "origin"

# `git ls-remote --heads` prints "<sha>\trefs/heads/<branch>".
_LS_REMOTE_LINE = re.compile(r"^\w+\s+refs/heads/(.+)$")
# `git branch -r` prints "  <remote>/<branch>". Symbolic refs such as
# "origin/HEAD -> origin/main" contain spaces and do not match.
_REMOTE_BRANCH_LINE = re.compile(r"^\s*[^/\s]+/(\S+)$")


def _parse_lines(output: str, pattern: re.Pattern[str], source: str) -> list[str]:
    names: list[str] = []
    for line in output.splitlines():
        if not line.strip():
            continue
        match = pattern.match(line)
        if match is None:
            logger.debug("Skipping unrecognised %s line: %r", source, line)
            continue
        names.append(match.group(1))
    return names


def parse_ls_remote_heads(output: str) -> list[str]:
    """Extract branch names from ``git ls-remote --heads`` output.

    Lines that do not look like a head ref are dropped.
    """

    return _parse_lines(output, _LS_REMOTE_LINE, "ls-remote")


def parse_remote_branches(output: str) -> list[str]:
    """Extract branch names from ``git branch -r`` output, dropping the remote prefix."""

    return _parse_lines(output, _REMOTE_BRANCH_LINE, "branch -r")


def filter_protected(branch_names: Iterable[str]) -> list[str]:
    return [name for name in branch_names if name not in PROTECTED_BRANCHES]


async def prune_remote(runner: GitRunner, cwd: Path) -> None:
    await runner.run("remote", "prune", REMOTE, cwd=cwd, check=True)


async def list_remote_branches(runner: GitRunner, cwd: Path) -> list[str]:
    """Return every non-protected branch on the remote."""

    result = await runner.run("ls-remote", "--heads", REMOTE, cwd=cwd, check=True)
    return filter_protected(parse_ls_remote_heads(result.stdout))


async def list_merged_remote_branches(runner: GitRunner, cwd: Path) -> list[str]:
    """Return every non-protected remote-tracking branch merged into ``HEAD``."""

    result = await runner.run("branch", "-r", "--merged", cwd=cwd, check=True)
    return filter_protected(parse_remote_branches(result.stdout))


__all__ = [
    "REMOTE",
    "filter_protected",
    "list_merged_remote_branches",
    "list_remote_branches",
    "parse_ls_remote_heads",
    "parse_remote_branches",
    "prune_remote",
]
