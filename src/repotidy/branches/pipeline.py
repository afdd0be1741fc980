"""Stale and merged remote branch sweep."""

from __future__ import annotations

import logging
from pathlib import Path

from ..git import GitRunner
from .classify import exclude_stale, select_older_than
from .confirm import ConfirmationProvider, render_report, request_confirmation
from .dates import resolve_commit_dates
from .delete import delete_branches
from .listing import list_merged_remote_branches, list_remote_branches, prune_remote
from .models import SweepResult, Thresholds

logger = logging.getLogger(__name__)


async def sweep_branches(
    cwd: Path | str,
    *,
    runner: GitRunner,
    thresholds: Thresholds,
    confirmation: ConfirmationProvider,
    max_concurrency: int = 8,
    color: bool = True,
) -> SweepResult:
    """Find stale and merged remote branches and delete them once confirmed.

    Every step before the prompt is read-only apart from the remote-tracking
    refs updated by ``git remote prune`` and ``git fetch``. Any failure before
    the prompt aborts the run with nothing deleted.
    """

    cwd = Path(cwd)
    await prune_remote(runner, cwd)

    remote_names = await list_remote_branches(runner, cwd)
    merged_names = await list_merged_remote_branches(runner, cwd)
    logger.info(
        "Found %d remote branches, %d merged into HEAD",
        len(remote_names),
        len(merged_names),
    )

    remote_records = await resolve_commit_dates(
        runner, cwd, remote_names, max_concurrency=max_concurrency
    )
    stale = select_older_than(remote_records, thresholds.stale_before)

    merged_records = await resolve_commit_dates(
        runner, cwd, exclude_stale(merged_names, stale), max_concurrency=max_concurrency
    )
    merged = select_older_than(merged_records, thresholds.merged_before)

    print(render_report(stale, merged, thresholds, color=color))
    result = SweepResult(
        thresholds=thresholds,
        stale=stale,
        merged=merged,
        confirmed=False,
        deleted=[],
    )

    if not await request_confirmation(confirmation):
        print("Branches not deleted: user declined to proceed.")
        return result

    result.confirmed = True
    result.deleted = await delete_branches(
        runner, cwd, result.approved, max_concurrency=max_concurrency
    )
    print("\ndone.")
    return result


__all__ = ["sweep_branches"]
