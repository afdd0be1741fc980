"""Data models for branch classification."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta

PROTECTED_BRANCHES = frozenset({"main", "master", "staging", "production"})


@dataclass(frozen=True, slots=True)
class BranchRecord:
    name: str
    last_commit_date: datetime

    def __post_init__(self) -> None:
        if not self.name:
            raise ValueError("Branch name must not be empty")


@dataclass(frozen=True, slots=True)
class Thresholds:
    """Cutoff dates a branch's last commit must predate to be swept."""

    stale_before: datetime
    merged_before: datetime

    def __post_init__(self) -> None:
        if self.stale_before >= self.merged_before:
            raise ValueError("Stale cutoff must be older than the merged cutoff")

    @classmethod
    def from_ages(cls, now: datetime, *, stale_age: timedelta, merged_age: timedelta) -> "Thresholds":
        return cls(stale_before=now - stale_age, merged_before=now - merged_age)

    @classmethod
    def from_days(cls, now: datetime, *, stale_days: int, merged_days: int) -> "Thresholds":
        return cls.from_ages(
            now,
            stale_age=timedelta(days=stale_days),
            merged_age=timedelta(days=merged_days),
        )


@dataclass(slots=True)
class SweepResult:
    """Outcome of a sweep run."""

    thresholds: Thresholds
    stale: list[BranchRecord]
    merged: list[BranchRecord]
    confirmed: bool
    deleted: list[str]

    @property
    def approved(self) -> list[BranchRecord]:
        return [*self.stale, *self.merged]


__all__ = ["PROTECTED_BRANCHES", "BranchRecord", "SweepResult", "Thresholds"]
