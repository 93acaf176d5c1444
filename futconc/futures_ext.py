"""Method-style combinators for single awaitables."""

from __future__ import annotations

import inspect
from collections.abc import Awaitable, Generator
from typing import Any

from futconc.join import join
from futconc.race import race
from futconc.wait_until import wait_until


class FutureExt:
    """Wraps an awaitable to offer ``join``, ``race`` and ``wait_until`` as methods.

    Each method returns another FutureExt, so calls can be chained.
    """

    __slots__ = ("_awaitable",)

    def __init__(self, awaitable: Awaitable[Any]) -> None:
        if not inspect.isawaitable(awaitable):
            raise TypeError(f"expected an awaitable, got {type(awaitable).__name__}")
        self._awaitable = awaitable

    def __repr__(self) -> str:
        return f"FutureExt({self._awaitable!r})"

    def join(self, other: Awaitable[Any]) -> FutureExt:
        """Wait for both awaitables and return their outputs as a pair."""
        return FutureExt(join((self._awaitable, other)))

    def race(self, other: Awaitable[Any]) -> FutureExt:
        """Wait for the first of the two awaitables and return its output."""
        return FutureExt(race([self._awaitable, other]))

    def wait_until(self, deadline: Awaitable[Any]) -> FutureExt:
        """Do not start this awaitable before ``deadline`` has completed."""
        return FutureExt(wait_until(self._awaitable, deadline))

    def __await__(self) -> Generator[Any, None, Any]:
        return self._awaitable.__await__()