"""Bounded concurrent fan-out over a collection."""

from __future__ import annotations

import asyncio
from typing import Awaitable, Callable, Iterable, TypeVar

T = TypeVar("T")
R = TypeVar("R")


async def gather_bounded(
    func: Callable[[T], Awaitable[R]],
    items: Iterable[T],
    *,
    limit: int,
) -> list[R]:
    """Apply ``func`` to every item with at most ``limit`` calls in flight.

    Results are returned in input order. The first failure cancels the
    remaining calls and is re-raised as-is rather than wrapped in an
    ``ExceptionGroup``; calls that already finished are not undone.
    """

    if limit < 1:
        raise ValueError("limit must be >= 1")

    semaphore = asyncio.Semaphore(limit)

    async def _bounded(item: T) -> R:
        async with semaphore:
            return await func(item)

    try:
        async with asyncio.TaskGroup() as group:
            tasks = [group.create_task(_bounded(item)) for item in items]
    except ExceptionGroup as exc:
        raise exc.exceptions[0] from None
    return [task.result() for task in tasks]


__all__ = ["gather_bounded"]
