import asyncio

import pytest

from futconc.join import join


async def ready(value):
    return value


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "values",
    [
        [],
        ["hello", "world"],
        (),
        ("hello",),
        ("hello", 12),
        ("hello", "world", 12),
    ],
)
async def test_outputs_keep_container_kind(values):
    result = await join(type(values)(ready(value) for value in values))
    assert result == values
    assert type(result) is type(values)


@pytest.mark.asyncio
async def test_debug():
    fut = join([ready("hello"), ready("world")])
    assert repr(fut) == "[Pending, Pending]"
    await fut
    assert repr(fut) == "[None, None]"


@pytest.mark.asyncio
async def test_outputs_follow_input_order():
    async def delayed(value, delay):
        await asyncio.sleep(delay)
        return value

    result = await join([delayed("slow", 0.02), delayed("fast", 0)])
    assert result == ["slow", "fast"]


@pytest.mark.asyncio
async def test_does_not_leak_pending_futures():
    never = asyncio.get_running_loop().create_future()
    with pytest.raises(asyncio.TimeoutError):
        await asyncio.wait_for(join((ready("memory"), ready(1), never)), 0.01)
    assert never.cancelled()


@pytest.mark.asyncio
async def test_exception_cancels_others():
    async def failing():
        raise ValueError("boom")

    blocker = asyncio.get_running_loop().create_future()
    with pytest.raises(ValueError, match="boom"):
        await join([blocker, failing()])
    assert blocker.cancelled()


@pytest.mark.asyncio
async def test_await_twice_raises():
    fut = join([ready(1)])
    assert await fut == [1]
    with pytest.raises(RuntimeError):
        await fut


def test_rejects_non_awaitable():
    with pytest.raises(TypeError):
        join([1, 2])