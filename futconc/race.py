"""Wait for the first awaitable in a collection to complete."""

from __future__ import annotations

import asyncio
from collections.abc import Awaitable, Iterable
from typing import Any

from .join import _awaitables, _cancel_and_wait, _Once


class _Race(_Once):
    """Awaitable that returns the output of whichever awaitable finishes first."""

    __slots__ = ("_futures",)

    def __init__(self, futures: Iterable[Awaitable[Any]]) -> None:
        super().__init__()
        self._futures = _awaitables(futures)
        if not self._futures:
            raise ValueError("race needs at least one awaitable")

    def __repr__(self) -> str:
        return f"Race({self._futures!r})"

    async def _run(self) -> Any:
        tasks = [asyncio.ensure_future(future) for future in self._futures]
        self._futures = []
        index_of = {task: index for index, task in enumerate(tasks)}
        try:
            done, _ = await asyncio.wait(tasks, return_when=asyncio.FIRST_COMPLETED)
            winner = min(done, key=index_of.__getitem__)
            return winner.result()
        finally:
            await _cancel_and_wait(tasks)


def race(futures: Iterable[Awaitable[Any]]) -> _Race:
    """Await all awaitables concurrently and return the first output.

    As soon as one completes, the others are cancelled. When several
    complete at the same time, the earliest in input order wins. If the
    first to complete raises, its exception propagates.
    """
    return _Race(futures)