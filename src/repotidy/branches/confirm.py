"""Deletion report and interactive confirmation."""

from __future__ import annotations

import asyncio
from datetime import datetime
from typing import Protocol, Sequence

from .models import BranchRecord, Thresholds

CONFIRMATION_PROMPT = 'Are you sure you want to delete all these? (Type "yes" and hit enter to proceed.) '
APPROVAL = "yes"

_NAME_COLOR = "\x1b[91m"
_TEXT_COLOR = "\x1b[37m"
_DATE_COLOR = "\x1b[96m"
_RESET = "\x1b[0m"


class ConfirmationProvider(Protocol):
    """Presents a prompt and returns the single line typed in response."""

    async def __call__(self, prompt: str) -> str:
        ...


class StdinConfirmation:
    """Reads the answer from the terminal without blocking the event loop."""

    async def __call__(self, prompt: str) -> str:
        return await asyncio.to_thread(self._read, prompt)

    @staticmethod
    def _read(prompt: str) -> str:
        try:
            return input(prompt)
        except EOFError:
            return ""


class CannedConfirmation:
    """Answers every prompt with a fixed response."""

    def __init__(self, answer: str) -> None:
        self.answer = answer
        self.prompts: list[str] = []

    async def __call__(self, prompt: str) -> str:
        self.prompts.append(prompt)
        return self.answer


def format_date(value: datetime) -> str:
    return value.astimezone().strftime("%a %b %d %Y")


def format_branch_lines(branches: Sequence[BranchRecord], *, color: bool = True) -> str:
    lines = []
    for branch in branches:
        date_text = format_date(branch.last_commit_date)
        if color:
            lines.append(
                f"{_NAME_COLOR}{branch.name}{_TEXT_COLOR}: Last modified on "
                f"{_DATE_COLOR}{date_text}{_RESET}"
            )
        else:
            lines.append(f"{branch.name}: Last modified on {date_text}")
    return "\n".join(lines)


def render_report(
    stale: Sequence[BranchRecord],
    merged: Sequence[BranchRecord],
    thresholds: Thresholds,
    *,
    color: bool = True,
) -> str:
    sections = [
        f"\n\n{len(stale)} stale branches to delete:\n",
        format_branch_lines(stale, color=color),
        f"\n\n{len(merged)} merged branches to delete:\n",
        format_branch_lines(merged, color=color),
        f"\n{len(stale)} stale branches will be deleted.",
        f"\n{len(merged)} merged branches will be deleted.",
        f"Stale branch date cutoff: {format_date(thresholds.stale_before)}",
        f"Merged branch date cutoff: {format_date(thresholds.merged_before)}",
    ]
    return "\n".join(sections)


async def request_confirmation(provider: ConfirmationProvider) -> bool:
    """Return True only when the answer is exactly ``yes``."""

    answer = await provider(CONFIRMATION_PROMPT)
    return answer == APPROVAL


__all__ = [
    "APPROVAL",
    "CONFIRMATION_PROMPT",
    "CannedConfirmation",
    "ConfirmationProvider",
    "StdinConfirmation",
    "format_branch_lines",
    "format_date",
    "render_report",
    "request_confirmation",
]
