"""Stale and merged branch classification."""

from __future__ import annotations

from datetime import datetime
from typing import Iterable

from .models import BranchRecord


def select_older_than(records: Iterable[BranchRecord], threshold: datetime) -> list[BranchRecord]:
    """Return records last committed strictly before ``threshold``, oldest first.

    The sort is stable, so records with equal dates keep their input order.
    """

    selected = [record for record in records if threshold > record.last_commit_date]
    selected.sort(key=lambda record: record.last_commit_date)
    return selected


def exclude_stale(branch_names: Iterable[str], stale: Iterable[BranchRecord]) -> list[str]:
    """Drop names already classified as stale so a branch is swept at most once."""

    stale_names = {record.name for record in stale}
    return [name for name in branch_names if name not in stale_names]


__all__ = ["exclude_stale", "select_older_than"]
