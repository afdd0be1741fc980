"""Remote branch deletion."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Sequence

from ..concurrency import gather_bounded
from ..git import GitRunner
from .listing import REMOTE
from .models import BranchRecord

logger = logging.getLogger(__name__)


async def delete_branch(runner: GitRunner, cwd: Path, branch_name: str) -> str:
    await runner.run("push", REMOTE, "--delete", branch_name, cwd=cwd, check=True, echo=True)
    return branch_name


async def delete_branches(
    runner: GitRunner,
    cwd: Path,
    branches: Sequence[BranchRecord],
    *,
    max_concurrency: int,
) -> list[str]:
    """Delete every branch from the remote.

    Deletions are not transactional: the first failure is raised and branches
    already deleted stay deleted.
    """

    logger.info("Deleting %d remote branches", len(branches))

    async def _delete(branch: BranchRecord) -> str:
        return await delete_branch(runner, cwd, branch.name)

    return await gather_bounded(_delete, branches, limit=max_concurrency)


__all__ = ["delete_branch", "delete_branches"]
