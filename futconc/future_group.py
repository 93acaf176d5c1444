"""A growable group of awaitables that yields outputs as they complete."""

from __future__ import annotations

import asyncio
import inspect
from collections.abc import Awaitable, Iterable, Sized
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

T = TypeVar("T")


@dataclass(frozen=True, order=True)
class Key:
    """Identifies one awaitable inside a FutureGroup."""

    index: int


class FutureGroup(Generic[T]):
    """A growable set of awaitables, iterated asynchronously in completion order.

    Awaitables are started the first time the group is iterated. Iterating
    yields each output as soon as its awaitable finishes; among several
    finished at once, the one with the lowest key comes first.
    """

    def __init__(self, capacity: int = 0) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self._entries: dict[int, Awaitable[T]] = {}
        self._free: list[int] = []
        self._next_index = 0
        self._capacity = capacity
        self._wakeup: asyncio.Future[None] | None = None

    @classmethod
    def from_iterable(cls, futures: Iterable[Awaitable[T]]) -> FutureGroup[T]:
        """Create a group holding every awaitable from ``futures``."""
        group = cls()
        group.extend(futures)
        return group

    def __repr__(self) -> str:
        return f"FutureGroup(len={len(self)}, capacity={self._capacity})"

    def __len__(self) -> int:
        return len(self._entries)

    def capacity(self) -> int:
        """Return the capacity of the group."""
        return self._capacity

    def is_empty(self) -> bool:
        """Return True when no awaitables are active in the group."""
        return not self._entries

    def insert(self, future: Awaitable[T]) -> Key:
        """Add an awaitable to the group and return its key."""
        if not inspect.isawaitable(future):
            raise TypeError(f"expected an awaitable, got {type(future).__name__}")
        if self._capacity <= len(self):
            self.reserve(self._capacity * 2 + 1)

        if self._free:
            index = self._free.pop()
        else:
            index = self._next_index
            self._next_index += 1
        self._entries[index] = future
        self._wake()
        return Key(index)

    def remove(self, key: Key) -> bool:
        """Remove and cancel the awaitable under ``key``; return whether it was present."""
        entry = self._entries.pop(key.index, None)
        if entry is None:
            return False
        self._free.append(key.index)
        if isinstance(entry, asyncio.Future):
            entry.cancel()
        elif inspect.iscoroutine(entry):
            entry.close()
        self._wake()
        return True

    def contains_key(self, key: Key) -> bool:
        """Return True if the group holds an awaitable for ``key``."""
        return key.index in self._entries

    def reserve(self, additional: int) -> None:
        """Grow the capacity by ``additional`` unless it already suffices."""
        if additional < 0:
            raise ValueError("additional must not be negative")
        if len(self) + additional < self._capacity:
            return
        self._capacity += additional

    def extend(self, futures: Iterable[Awaitable[T]]) -> None:
        """Insert every awaitable from ``futures``."""
        self.reserve(len(futures) if isinstance(futures, Sized) else 0)
        for future in futures:
            self.insert(future)

    def keyed(self) -> Keyed[T]:
        """Return an async iterator over ``(key, output)`` pairs of this group."""
        return Keyed(self)

    def __aiter__(self) -> FutureGroup[T]:
        return self

    async def __anext__(self) -> T:
        _, value = await self._next_keyed()
        return value

    def _wake(self) -> None:
        if self._wakeup is not None and not self._wakeup.done():
            self._wakeup.set_result(None)

    def _start_all(self) -> None:
        for index, entry in self._entries.items():
            if not isinstance(entry, asyncio.Future):
                self._entries[index] = asyncio.ensure_future(entry)

    async def _next_keyed(self) -> tuple[Key, T]:
        loop = asyncio.get_running_loop()
        while True:
            if not self._entries:
                raise StopAsyncIteration
            self._start_all()
            ready = [index for index, task in self._entries.items() if task.done()]
            if ready:
                index = min(ready)
                task = self._entries.pop(index)
                self._free.append(index)
                return Key(index), task.result()

            wakeup: asyncio.Future[None] = loop.create_future()
            self._wakeup = wakeup
            try:
                await asyncio.wait(
                    [*self._entries.values(), wakeup],
                    return_when=asyncio.FIRST_COMPLETED,
                )
            finally:
                self._wakeup = None
                wakeup.cancel()


class Keyed(Generic[T]):
    """Async iterator yielding ``(key, output)`` pairs from a FutureGroup."""

    def __init__(self, group: FutureGroup[T]) -> None:
        self._group = group

    def __repr__(self) -> str:
        return f"Keyed({self._group!r})"

    @property
    def group(self) -> FutureGroup[T]:
        """The underlying group, for inserting or removing awaitables."""
        return self._group

    def __aiter__(self) -> Keyed[T]:
        return self

    async def __anext__(self) -> tuple[Key, T]:
        return await self._group._next_keyed()