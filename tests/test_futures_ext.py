import asyncio

import pytest

from futconc.futures_ext import FutureExt


async def ready(value):
    return value


async def never():
    await asyncio.get_running_loop().create_future()


@pytest.mark.asyncio
async def test_join_returns_both_outputs():
    result = await FutureExt(ready(1)).join(ready("hello"))
    assert result == (1, "hello")


@pytest.mark.asyncio
async def test_race_returns_ready_output():
    result = await FutureExt(never()).race(ready("world"))
    assert result == "world"


@pytest.mark.asyncio
async def test_race_prefers_faster():
    async def slow():
        await asyncio.sleep(0.2)
        return "slow"

    async def fast():
        await asyncio.sleep(0)
        return "fast"

    assert await FutureExt(slow()).race(fast()) == "fast"


@pytest.mark.asyncio
async def test_wait_until_orders_deadline_first():
    events = []

    async def meow():
        events.append("future")
        return "meow"

    async def deadline():
        await asyncio.sleep(0)
        events.append("deadline")

    result = await FutureExt(meow()).wait_until(deadline())
    assert result == "meow"
    assert events == ["deadline", "future"]


@pytest.mark.asyncio
async def test_wait_until_delays_by_duration():
    loop = asyncio.get_running_loop()
    start = loop.time()
    result = await FutureExt(ready("meow")).wait_until(asyncio.sleep(0.05))
    assert result == "meow"
    assert loop.time() - start >= 0.05


@pytest.mark.asyncio
async def test_wait_until_deadline_error_skips_future():
    ran = False

    async def work():
        nonlocal ran
        ran = True

    async def bad_deadline():
        raise ValueError("deadline failed")

    with pytest.raises(ValueError):
        await FutureExt(work()).wait_until(bad_deadline())
    assert ran is False


@pytest.mark.asyncio
async def test_chaining_wait_until_and_join():
    result = await FutureExt(ready("a")).wait_until(asyncio.sleep(0)).join(ready("b"))
    assert result == ("a", "b")


def test_rejects_non_awaitable():
    with pytest.raises(TypeError):
        FutureExt(5)