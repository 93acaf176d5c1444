"""Wait for every awaitable to succeed, or stop at the first failure."""

from __future__ import annotations

from collections.abc import Awaitable, Iterable
from typing import Any

from .join import _Join


class _TryJoin(_Join):
    """Awaitable that returns all outputs or raises the first error."""

    __slots__ = ()


def try_join(futures: Iterable[Awaitable[Any]]) -> _TryJoin:
    """Await all awaitables concurrently, failing fast on the first exception.

    On success the outputs come back in input order, as a tuple for tuple
    input and a list otherwise. When any awaitable raises, every other one
    is cancelled, completed outputs are discarded, and the exception is raised.
    """
    return _TryJoin(futures)