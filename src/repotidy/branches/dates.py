"""Last-commit date resolution for remote branches."""

from __future__ import annotations

import re
from datetime import datetime, timezone
from pathlib import Path
from typing import Iterable

from ..concurrency import gather_bounded
from ..git import GitRunner
from .listing import REMOTE
from .models import BranchRecord

_TIMESTAMP = re.compile(r"[0-9]+")


class CommitDateError(RuntimeError):
    """Raised when a branch's last commit date cannot be determined."""


def parse_commit_timestamp(output: str, branch_name: str) -> datetime:
    """Parse ``git show --format=%at`` output into an aware UTC datetime.

    Anything other than a positive integer is an error: an unresolved date
    must not take part in a threshold comparison.
    """

    text = output.strip()
    if not _TIMESTAMP.fullmatch(text) or int(text) <= 0:
        raise CommitDateError(
            f"Failed to get last commit date for branch {branch_name}: {text!r}"
        )
    return datetime.fromtimestamp(int(text), tz=timezone.utc)


async def resolve_commit_date(runner: GitRunner, cwd: Path, branch_name: str) -> BranchRecord:
    """Fetch ``branch_name`` from the remote and read its last commit timestamp."""

    await runner.run("fetch", REMOTE, branch_name, cwd=cwd, check=True)
    result = await runner.run(
        "show", "-s", "--format=%at", f"{REMOTE}/{branch_name}", cwd=cwd, check=True
    )
    return BranchRecord(
        name=branch_name,
        last_commit_date=parse_commit_timestamp(result.stdout, branch_name),
    )


async def resolve_commit_dates(
    runner: GitRunner,
    cwd: Path,
    branch_names: Iterable[str],
    *,
    max_concurrency: int,
) -> list[BranchRecord]:
    """Resolve every branch concurrently; the first failure aborts the batch."""

    async def _resolve(name: str) -> BranchRecord:
        return await resolve_commit_date(runner, cwd, name)

    return await gather_bounded(_resolve, branch_names, limit=max_concurrency)


__all__ = [
    "CommitDateError",
    "parse_commit_timestamp",
    "resolve_commit_date",
    "resolve_commit_dates",
]
