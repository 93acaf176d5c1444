"""Wait for every awaitable in a collection to complete."""

from __future__ import annotations

import asyncio
import inspect
from abc import ABC, abstractmethod
from collections.abc import Awaitable, Generator, Iterable
from enum import Enum
from typing import Any


class _PollState(Enum):
    PENDING = "Pending"
    READY = "Ready"
    NONE = "None"


def _awaitables(futures: Iterable[Awaitable[Any]]) -> list[Awaitable[Any]]:
    """Materialise ``futures`` as a list, rejecting anything not awaitable."""
    items = list(futures)
    for item in items:
        if not inspect.isawaitable(item):
            raise TypeError(f"expected an awaitable, got {type(item).__name__}")
    return items


async def _cancel_and_wait(tasks: Iterable[asyncio.Future[Any]]) -> None:
    """Cancel unfinished tasks, wait for them, and retrieve stray exceptions."""
    tasks = list(tasks)
    unfinished = [task for task in tasks if not task.done()]
    for task in unfinished:
        task.cancel()
    if unfinished:
        await asyncio.wait(unfinished)
    for task in tasks:
        if not task.cancelled():
            task.exception()


class _Once(ABC):
    """Awaitable that may be awaited a single time."""

    __slots__ = ("_consumed",)

    def __init__(self) -> None:
        self._consumed = False

    def __await__(self) -> Generator[Any, None, Any]:
        return self._guarded().__await__()

    async def _guarded(self) -> Any:
        if self._consumed:
            raise RuntimeError("Futures must not be polled after completing")
        self._consumed = True
        return await self._run()

    @abstractmethod
    async def _run(self) -> Any:
        """Drive the wrapped awaitables to the combinator's result."""


class _Join(_Once):
    """Awaitable that runs its awaitables concurrently and returns every output."""

    __slots__ = ("_futures", "_as_tuple", "_states")

    def __init__(self, futures: Iterable[Awaitable[Any]]) -> None:
        super().__init__()
        self._as_tuple = isinstance(futures, tuple)
        self._futures = _awaitables(futures)
        self._states = [_PollState.PENDING] * len(self._futures)

    def __repr__(self) -> str:
        return "[" + ", ".join(state.value for state in self._states) + "]"

    async def _run(self) -> Any:
        tasks = [asyncio.ensure_future(future) for future in self._futures]
        self._futures = []
        index_of = {task: index for index, task in enumerate(tasks)}
        pending: set[asyncio.Future[Any]] = set(tasks)
        try:
            while pending:
                done, pending = await asyncio.wait(
                    pending, return_when=asyncio.FIRST_COMPLETED
                )
                failed = None
                for task in sorted(done, key=index_of.__getitem__):
                    succeeded = not task.cancelled() and task.exception() is None
                    state = _PollState.READY if succeeded else _PollState.NONE
                    self._states[index_of[task]] = state
                    if not succeeded and failed is None:
                        failed = task
                if failed is not None:
                    failed.result()
        finally:
            await _cancel_and_wait(tasks)

        self._states = [_PollState.NONE] * len(tasks)
        outputs = [task.result() for task in tasks]
        return tuple(outputs) if self._as_tuple else outputs


def join(futures: Iterable[Awaitable[Any]]) -> _Join:
    """Await all awaitables concurrently and return their outputs in input order.

    A tuple of awaitables yields a tuple of outputs; any other iterable yields
    a list. If one of them raises, the others are cancelled and the exception
    propagates.
    """
    return _Join(futures)