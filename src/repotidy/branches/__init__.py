"""Stale and merged remote branch sweeping."""

from .classify import exclude_stale, select_older_than
from .confirm import CannedConfirmation, ConfirmationProvider, StdinConfirmation, render_report
from .dates import CommitDateError, resolve_commit_dates
from .delete import delete_branches
from .listing import list_merged_remote_branches, list_remote_branches
from .models import PROTECTED_BRANCHES, BranchRecord, SweepResult, Thresholds
from .pipeline import sweep_branches

__all__ = [
    "PROTECTED_BRANCHES",
    "BranchRecord",
    "CannedConfirmation",
    "CommitDateError",
    "ConfirmationProvider",
    "StdinConfirmation",
    "SweepResult",
    "Thresholds",
    "delete_branches",
    "exclude_stale",
    "list_merged_remote_branches",
    "list_remote_branches",
    "render_report",
    "resolve_commit_dates",
    "select_older_than",
    "sweep_branches",
]
