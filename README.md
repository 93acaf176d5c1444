# futconc

Structured concurrency operations for `asyncio`.

`futconc` offers a small set of building blocks for awaiting many
awaitables at once: wait for all of them, wait for the first, wait for the
first success, hold one back until another has finished, or keep a growable
group of them and consume their outputs as they complete.

## Installation

```
pip install futconc
```

## Awaiting many awaitables

| | Wait for all outputs | Wait for first output |
| --- | --- | --- |
| Continue on error | `join` | `race_ok` |
| Return early on error | `try_join` | `race` |

```python
import asyncio

from futconc.join import join
from futconc.race import race
from futconc.race_ok import AggregateError, race_ok
from futconc.try_join import try_join


async def value(x):
    return x


async def fail(msg):
    raise ValueError(msg)


async def main():
    # All outputs, in input order. A list in gives a list out,
    # a tuple in gives a tuple out.
    assert await join([value(1), value(2), value(3)]) == [1, 2, 3]
    assert await join((value(1), value("hello"))) == (1, "hello")

    # All outputs, but the first exception cancels the rest and is raised.
    assert await try_join([value("hello"), value("world")]) == ["hello", "world"]

    # Whichever finishes first; the others are cancelled.
    print(await race([value("hello"), value("world")]))

    # The first success. If every awaitable raises, all of the
    # exceptions are raised together, in input order.
    try:
        await race_ok([fail("oops"), fail("oh no")])
    except AggregateError as errors:
        print(errors)            # 2 errors occurred
        print(errors[0], errors[1])
        print(errors.report())   # one line per error, with its causes


asyncio.run(main())
```

Details:

- The objects returned by `join`, `try_join`, `race` and `race_ok` may be
  awaited only once; awaiting again raises `RuntimeError`.
- Each argument must be awaitable, otherwise `TypeError` is raised.
- `race` needs at least one awaitable (`ValueError` otherwise). When several
  finish at the same moment, the earliest in input order wins.
- `AggregateError` is an `Exception` that supports `len()`, indexing and
  iteration over the collected errors.

## Waiting for a deadline

`wait_until(future, deadline)` from `futconc.wait_until` awaits `deadline`
first and only then `future`, returning the output of `future`. A coroutine
passed as `future` does not run before the deadline completes; if the
deadline raises, the coroutine is closed without having run.

```python
from futconc.wait_until import wait_until

result = await wait_until(value("meow"), asyncio.sleep(0.1))
```

## Method-style use

`FutureExt` from `futconc.futures_ext` wraps one awaitable so the same
operations read as methods. Each method returns another `FutureExt`, so
calls can be chained, and the wrapper itself is awaitable.

```python
from futconc.futures_ext import FutureExt

a, b = await FutureExt(value(1)).join(value(2))
first = await FutureExt(value(1)).race(value(2))
later = await FutureExt(value("meow")).wait_until(asyncio.sleep(0.1))
```

## Future groups

`FutureGroup` from `futconc.future_group` is a growable set of awaitables
iterated with `async for`, yielding each output as its awaitable completes.
Awaitables are started when iteration begins, and more may be inserted
while iterating. Each insertion returns a `Key`.

```python
from futconc.future_group import FutureGroup

group = FutureGroup()
group.insert(value(2))
key = group.insert(value(4))
assert len(group) == 2
assert group.contains_key(key)

total = 0
async for num in group:
    total += num
assert total == 6
assert group.is_empty()
```

Other members:

- `FutureGroup(capacity)` and `FutureGroup.from_iterable(awaitables)`
  create a group; `extend(awaitables)` inserts many at once.
- `remove(key)` removes and cancels an awaitable and returns whether it was
  present.
- `capacity()` and `reserve(additional)` report and grow the capacity; it
  also grows by itself on insert.
- `keyed()` returns a `Keyed` iterator that yields `(key, output)` pairs;
  its `group` property gives back the group for further inserts.

## What this package does not do

It works on awaitables you already have. It has no stream adapters: there is
no way here to turn a list or an async iterator into a pipeline that maps,
enumerates or takes items concurrently with a bounded number in flight, and
no `for_each` or `collect` over such a pipeline.

## Testing

```
pip install "futconc[test]"
pytest
```