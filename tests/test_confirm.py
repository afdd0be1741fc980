from __future__ import annotations

import asyncio
import time
from datetime import datetime, timezone

import pytest

from repotidy.branches.confirm import (
    CONFIRMATION_PROMPT,
    CannedConfirmation,
    StdinConfirmation,
    format_branch_lines,
    render_report,
    request_confirmation,
)
from repotidy.branches.models import BranchRecord, Thresholds

NOW = datetime(2026, 1, 1, tzinfo=timezone.utc)


@pytest.fixture()
def local_timezone(monkeypatch: pytest.MonkeyPatch):
    if not hasattr(time, "tzset"):
        pytest.skip("time.tzset is unavailable on this platform")

    def _set(name: str) -> None:
        monkeypatch.setenv("TZ", name)
        time.tzset()

    yield _set
    monkeypatch.undo()
    time.tzset()


def _thresholds() -> Thresholds:
    return Thresholds.from_days(NOW, stale_days=90, merged_days=14)


def test_render_report_lists_both_sets(local_timezone) -> None:
    local_timezone("UTC")
    stale = [BranchRecord("old-work", datetime(2024, 3, 5, tzinfo=timezone.utc))]
    merged = [
        BranchRecord("done-a", datetime(2025, 11, 1, tzinfo=timezone.utc)),
        BranchRecord("done-b", datetime(2025, 12, 1, tzinfo=timezone.utc)),
    ]

    report = render_report(stale, merged, _thresholds(), color=False)

    assert "1 stale branches to delete:" in report
    assert "old-work: Last modified on Tue Mar 05 2024" in report
    assert "2 merged branches to delete:" in report
    assert "done-b: Last modified on Mon Dec 01 2025" in report
    assert "1 stale branches will be deleted." in report
    assert "2 merged branches will be deleted." in report
    assert "Stale branch date cutoff: Fri Oct 03 2025" in report
    assert "Merged branch date cutoff: Thu Dec 18 2025" in report
    assert "\x1b[" not in report


def test_branch_lines_are_coloured_by_default() -> None:
    line = format_branch_lines([BranchRecord("topic", NOW)])

    assert line.startswith("\x1b[91mtopic\x1b[37m")
    assert line.endswith("\x1b[0m")


def test_render_report_with_no_branches() -> None:
    report = render_report([], [], _thresholds(), color=False)

    assert "0 stale branches to delete:" in report
    assert "0 merged branches to delete:" in report


@pytest.mark.parametrize(
    "answer, approved",
    [("yes", True), ("no", False), ("", False), ("YES", False), ("yes ", False), ("y", False)],
)
def test_request_confirmation_requires_exact_yes(answer: str, approved: bool) -> None:
    provider = CannedConfirmation(answer)

    assert asyncio.run(request_confirmation(provider)) is approved
    assert provider.prompts == [CONFIRMATION_PROMPT]


def test_stdin_confirmation_reads_input(monkeypatch: pytest.MonkeyPatch) -> None:
    prompts: list[str] = []

    def fake_input(prompt: str) -> str:
        prompts.append(prompt)
        return "yes"

    monkeypatch.setattr("builtins.input", fake_input)

    assert asyncio.run(StdinConfirmation()("Proceed? ")) == "yes"
    assert prompts == ["Proceed? "]


def test_stdin_confirmation_treats_eof_as_empty(monkeypatch: pytest.MonkeyPatch) -> None:
    def closed_input(prompt: str) -> str:
        raise EOFError

    monkeypatch.setattr("builtins.input", closed_input)

    assert asyncio.run(StdinConfirmation()("Proceed? ")) == ""


def test_dates_are_shown_in_local_time(local_timezone) -> None:
    # POSIX "Etc/GMT+8" is eight hours behind UTC.
    local_timezone("Etc/GMT+8")
    early_utc = datetime(2025, 1, 1, 3, 0, tzinfo=timezone.utc)

    line = format_branch_lines([BranchRecord("late-night", early_utc)], color=False)

    assert line == "late-night: Last modified on Tue Dec 31 2024"
