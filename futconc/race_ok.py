"""Wait for the first awaitable in a collection to complete successfully."""

from __future__ import annotations

import asyncio
import inspect
from collections.abc import Awaitable, Generator, Iterable, Iterator
from typing import Any, overload


class AggregateError(Exception):
    """Raised when every awaitable failed; holds their errors in input order."""

    def __init__(self, errors: Iterable[BaseException]) -> None:
        self._errors = list(errors)
        super().__init__(self._errors)

    def __len__(self) -> int:
        return len(self._errors)

    @overload
    def __getitem__(self, index: int) -> BaseException: ...

    @overload
    def __getitem__(self, index: slice) -> list[BaseException]: ...

    def __getitem__(self, index: int | slice) -> BaseException | list[BaseException]:
        return self._errors[index]

    def __iter__(self) -> Iterator[BaseException]:
        return iter(self._errors)

    def __str__(self) -> str:
        return f"{len(self._errors)} errors occurred"

    def __repr__(self) -> str:
        return f"AggregateError({self._errors!r})"

    def report(self) -> str:
        """Return a multi-line description of every error and its causes."""
        lines = [f"{self}:"]
        for number, error in enumerate(self._errors, start=1):
            lines.append(f"- Error {number}: {error}")
            for cause in _causes(error):
                lines.append(f"  ↳ Caused by: {cause}")
        return "\n".join(lines) + "\n"


def _causes(error: BaseException) -> Iterator[BaseException]:
    seen = {id(error)}
    current: BaseException | None = error
    while current is not None:
        if current.__cause__ is not None:
            current = current.__cause__
        elif not current.__suppress_context__:
            current = current.__context__
        else:
            current = None
        if current is None or id(current) in seen:
            return
        seen.add(id(current))
        yield current


async def _discard(tasks: list[asyncio.Future[Any]]) -> None:
    """Cancel unfinished tasks, wait for them, and retrieve stray exceptions."""
    unfinished = [task for task in tasks if not task.done()]
    for task in unfinished:
        task.cancel()
    if unfinished:
        await asyncio.wait(unfinished)
    for task in tasks:
        if not task.cancelled():
            task.exception()


class _RaceOk:
    """Awaitable returning the first successful output of its awaitables."""

    __slots__ = ("_futures", "_done")

    def __init__(self, futures: Iterable[Awaitable[Any]]) -> None:
        self._futures = list(futures)
        for future in self._futures:
            if not inspect.isawaitable(future):
                raise TypeError(f"expected an awaitable, got {type(future).__name__}")
        self._done = False

    def __repr__(self) -> str:
        return f"RaceOk({self._futures!r})"

    def __await__(self) -> Generator[Any, None, Any]:
        return self._run().__await__()

    async def _run(self) -> Any:
        if self._done:
            raise RuntimeError("Futures must not be polled after completing")
        self._done = True

        tasks = [asyncio.ensure_future(future) for future in self._futures]
        self._futures = []
        index_of = {task: index for index, task in enumerate(tasks)}
        errors: list[BaseException | None] = [None] * len(tasks)
        pending: set[asyncio.Future[Any]] = set(tasks)
        try:
            while pending:
                done, pending = await asyncio.wait(
                    pending, return_when=asyncio.FIRST_COMPLETED
                )
                for task in sorted(done, key=index_of.__getitem__):
                    if task.cancelled():
                        error: BaseException | None = asyncio.CancelledError()
                    else:
                        error = task.exception()
                    if error is None:
                        return task.result()
                    if not isinstance(error, (Exception, asyncio.CancelledError)):
                        raise error
                    errors[index_of[task]] = error
        finally:
            await _discard(tasks)
        raise AggregateError(error for error in errors if error is not None)


def race_ok(futures: Iterable[Awaitable[Any]]) -> _RaceOk:
    """Await all awaitables concurrently and return the first successful output.

    As soon as one completes without raising, the others are cancelled and its
    output is returned. If every awaitable raises, an AggregateError holding
    all of their exceptions, in input order, is raised.
    """
    return _RaceOk(futures)