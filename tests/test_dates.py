from __future__ import annotations

import asyncio
from datetime import datetime, timezone
from pathlib import Path

import pytest

from repotidy.branches.dates import (
    CommitDateError,
    parse_commit_timestamp,
    resolve_commit_date,
    resolve_commit_dates,
)
from repotidy.git import FakeGitRunner, GitCommandError


def _show(branch: str) -> tuple[str, ...]:
    return ("show", "-s", "--format=%at", f"origin/{branch}")


def test_parse_commit_timestamp() -> None:
    assert parse_commit_timestamp("1700000000\n", "topic") == datetime(
        2023, 11, 14, 22, 13, 20, tzinfo=timezone.utc
    )


@pytest.mark.parametrize("output", ["", "   \n", "0", "-5", "yesterday", "17e8", "1.5"])
def test_parse_commit_timestamp_rejects_invalid(output: str) -> None:
    with pytest.raises(CommitDateError, match="topic"):
        parse_commit_timestamp(output, "topic")


def test_resolve_commit_date_fetches_before_show() -> None:
    fake = FakeGitRunner()
    fake.respond(_show("topic"), stdout="1700000000\n")

    record = asyncio.run(resolve_commit_date(fake, Path("."), "topic"))

    assert record.name == "topic"
    assert record.last_commit_date.timestamp() == 1700000000
    assert fake.invocations == [("fetch", "origin", "topic"), _show("topic")]


def test_resolve_commit_date_fetch_failure_is_fatal() -> None:
    fake = FakeGitRunner()
    fake.respond(("fetch", "origin", "topic"), returncode=128, stderr="fatal: couldn't find remote ref topic")

    with pytest.raises(GitCommandError, match="couldn't find remote ref"):
        asyncio.run(resolve_commit_date(fake, Path("."), "topic"))

    assert _show("topic") not in fake.invocations


def test_resolve_commit_dates_keeps_input_order() -> None:
    fake = FakeGitRunner()
    fake.respond(_show("a"), stdout="1700000300\n")
    fake.respond(_show("b"), stdout="1700000100\n")
    fake.respond(_show("c"), stdout="1700000200\n")

    records = asyncio.run(resolve_commit_dates(fake, Path("."), ["a", "b", "c"], max_concurrency=2))

    assert [record.name for record in records] == ["a", "b", "c"]


def test_resolve_commit_dates_aborts_on_unparsable_date() -> None:
    fake = FakeGitRunner()
    fake.respond(_show("a"), stdout="1700000300\n")
    fake.respond(_show("b"), stdout="not a date\n")

    with pytest.raises(CommitDateError, match="branch b"):
        asyncio.run(resolve_commit_dates(fake, Path("."), ["a", "b"], max_concurrency=4))
