"""Structured concurrency operations for asyncio: join, try_join, race, race_ok, wait_until and future groups."""

__version__ = "7.6.3"

__all__ = [
    "future_group",
    "futures_ext",
    "join",
    "race",
    "race_ok",
    "try_join",
    "wait_until",
]