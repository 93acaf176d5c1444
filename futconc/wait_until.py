"""Hold back an awaitable until a deadline awaitable has completed."""

from __future__ import annotations

import inspect
from collections.abc import Awaitable
from typing import Any, TypeVar

T = TypeVar("T")


async def wait_until(future: Awaitable[T], deadline: Awaitable[Any]) -> T:
    """Await ``deadline`` first, then ``future``, returning the output of ``future``.

    A coroutine passed as ``future`` does not start running before the
    deadline has completed. If the deadline raises, the coroutine is closed
    without having run.
    """
    try:
        await deadline
    except BaseException:
        if inspect.iscoroutine(future):
            future.close()
        raise
    return await future